"""DFT kernels operating on flat interleaved buffers.

A kernel takes ``2N`` reals laid out as ``[re0, im0, re1, im1, ...]`` and
returns the forward discrete Fourier transform of the ``N`` complex samples
in the same layout, without any scaling.  ``N`` must be a power of two and
at least 2.

Classes
-------
DftKernel
    Base class; subclasses implement :meth:`DftKernel.transform`.
NumpyFftKernel
    Production kernel backed by ``numpy.fft.fft``.
DirectDftKernel
    O(N^2) direct summation, used as a reference in tests.
"""

from __future__ import annotations

import logging
from typing import Dict, Type

import numpy as np

logger = logging.getLogger(__name__)


class InvalidTransformSize(ValueError):
    """Transform size is not a power of two of at least 2."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Transform size must be a power of two and at least 2, got {size}")


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def check_transform_size(n: int) -> int:
    """Return ``n`` as int, raising :class:`InvalidTransformSize` if it is not a valid size."""
    n = int(n)
    if n < 2 or not is_power_of_two(n):
        raise InvalidTransformSize(n)
    return n


def interleave(z: np.ndarray) -> np.ndarray:
    """Complex array of shape ``(N,)`` -> float array ``[re0, im0, re1, im1, ...]``."""
    z = np.asarray(z, dtype=complex).ravel()
    out = np.empty(2 * z.size, dtype=float)
    out[0::2] = z.real
    out[1::2] = z.imag
    return out


def deinterleave(flat: np.ndarray) -> np.ndarray:
    """Float array ``[re0, im0, ...]`` of even length -> complex array of shape ``(N,)``."""
    flat = np.asarray(flat, dtype=float).ravel()
    if flat.size % 2 != 0:
        raise ValueError(f"Interleaved buffer must have even length, got {flat.size}")
    return flat[0::2] + 1j * flat[1::2]


class DftKernel:
    """Forward DFT on interleaved buffers.

    Kernels hold no state between calls, so one instance may be shared.
    """

    name = "base"

    def transform(self, data: np.ndarray) -> np.ndarray:
        """Forward DFT of the ``N`` complex samples in ``data`` (length ``2N``)."""
        z = deinterleave(data)
        check_transform_size(z.size)
        return interleave(self._dft(z))

    def to_complex_array(self, values: np.ndarray) -> np.ndarray:
        """Pack ``N`` real scalars into a ``2N`` interleaved buffer with zero imaginary parts."""
        values = np.asarray(values, dtype=float).ravel()
        out = np.zeros(2 * values.size, dtype=float)
        out[0::2] = values
        return out

    def _dft(self, z: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class NumpyFftKernel(DftKernel):
    name = "numpy"

    def _dft(self, z: np.ndarray) -> np.ndarray:
        return np.fft.fft(z)


class DirectDftKernel(DftKernel):
    """Direct O(N^2) summation ``X[k] = sum_n x[n] exp(-2 pi i k n / N)``."""

    name = "direct"

    def _dft(self, z: np.ndarray) -> np.ndarray:
        n = z.size
        k = np.arange(n)
        # (k * m) % n keeps the exponent small so large N stays accurate
        w = np.exp(-2j * np.pi * ((k[:, None] * k[None, :]) % n) / n)
        return w @ z


_KERNELS: Dict[str, Type[DftKernel]] = {
    NumpyFftKernel.name: NumpyFftKernel,
    DirectDftKernel.name: DirectDftKernel,
}


def get_kernel(name: str = "numpy") -> DftKernel:
    """Instantiate a kernel by name (``"numpy"`` or ``"direct"``)."""
    try:
        cls = _KERNELS[name]
    except KeyError:
        raise KeyError(f"Unknown DFT kernel {name!r}; known kernels: {sorted(_KERNELS)}") from None
    logger.debug("Using DFT kernel %s", name)
    return cls()
