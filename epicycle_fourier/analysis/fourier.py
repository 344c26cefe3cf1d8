"""Frequency bins for epicycle drawings.

Raw DFT output is reinterpreted as a list of
:class:`~epicycle_fourier.models.bins.FrequencyBin` records.

Functions
---------
get_fourier_data
    Complex form: ``N`` interleaved (x, y) samples -> ``N`` bins over the
    signed range ``[-N/2, N/2)``, in centered, alternating order.
get_real_fourier_data
    Real form: ``N`` scalar samples -> ``N/2`` bins over ``[0, N/2)``,
    ascending, amplitudes doubled.
fourier_from_points
    Resample a polyline, then apply :func:`get_fourier_data`.
compute_from_profile
    Same as :func:`fourier_from_points`, driven by a TransformProfile.
sort_by_amplitude
    Optional post-pass ordering bins by descending amplitude.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import numpy as np

from epicycle_fourier.analysis.kernels import DftKernel, check_transform_size, get_kernel
from epicycle_fourier.analysis.resample import resample_2d_data
from epicycle_fourier.models.bins import FrequencyBin
from epicycle_fourier.models.profile import TransformProfile

logger = logging.getLogger(__name__)


def alternating_index(i: int, n: int) -> int:
    """Raw bin index read for output position ``i``: 0, n-1, 1, n-2, 2, ..."""
    if i % 2 == 0:
        return i // 2
    return n - (i + 1) // 2


def alternating_order(n: int) -> np.ndarray:
    """Vector form of :func:`alternating_index` for all ``i`` in ``[0, n)``."""
    i = np.arange(n)
    return np.where(i % 2 == 0, i // 2, n - (i + 1) // 2)


def fold_frequency(j, n: int):
    """Fold natural DFT bin index ``j`` in ``[0, n)`` into the signed range ``[-n/2, n/2)``."""
    half = n // 2
    return ((j + half) % n) - half


def _phase(re: np.ndarray, im: np.ndarray) -> np.ndarray:
    # atan2(-0.0, x<0) is -pi; keep phases in (-pi, pi]
    phase = np.arctan2(im, re)
    return np.where(phase <= -np.pi, np.pi, phase)


def _run_kernel(kernel: DftKernel, data: np.ndarray, n: int) -> np.ndarray:
    raw = np.asarray(kernel.transform(data), dtype=float).ravel()
    if raw.size != 2 * n:
        raise ValueError(f"DFT kernel returned {raw.size} values, expected {2 * n}")
    return raw


def _to_bins(freq: np.ndarray, amplitude: np.ndarray, phase: np.ndarray) -> List[FrequencyBin]:
    return [
        FrequencyBin(freq=int(f), amplitude=float(a), phase=float(p))
        for f, a, p in zip(freq, amplitude, phase)
    ]


def get_fourier_data(samples: Sequence[float], *, kernel: Optional[DftKernel] = None) -> List[FrequencyBin]:
    """Frequency bins of ``N`` complex samples given as interleaved ``[re0, im0, re1, im1, ...]``.

    Parameters
    ----------
    samples:
        Flat sequence of length ``2N``; ``N`` must be a power of two (at least 2).
        Typically the output of :func:`~epicycle_fourier.analysis.resample.resample_2d_data`.
    kernel:
        DFT kernel; defaults to the numpy kernel.

    Returns
    -------
    list of FrequencyBin
        ``N`` bins.  Output position ``i`` reads raw bin ``j = i/2`` (even ``i``)
        or ``j = N - (i+1)/2`` (odd ``i``), so frequencies come out as
        0, -1, 1, -2, 2, ...  Amplitude is ``|X_j| / N``.

    Raises
    ------
    ValueError
        If ``samples`` has odd length.
    InvalidTransformSize
        If ``N`` is not a power of two of at least 2.
    """
    x = np.asarray(samples, dtype=float).ravel()
    if x.size == 0:
        return []
    if x.size % 2 != 0:
        raise ValueError(f"Complex samples must be interleaved re/im pairs, got odd length {x.size}")

    n = check_transform_size(x.size // 2)
    if kernel is None:
        kernel = get_kernel()
    raw = _run_kernel(kernel, x, n)

    j = alternating_order(n)
    re = raw[2 * j]
    im = raw[2 * j + 1]

    logger.debug("Complex transform of %d samples", n)
    return _to_bins(fold_frequency(j, n), np.hypot(re, im) / n, _phase(re, im))


def get_real_fourier_data(samples: Sequence[float], *, kernel: Optional[DftKernel] = None) -> List[FrequencyBin]:
    """Frequency bins of ``N`` real samples of a waveform.

    Only the first half of the spectrum is read; for real input the upper
    half is the complex conjugate of the lower half.  Amplitudes are
    ``2 |X_k| / N`` for every ``k``, DC included (no special case for DC).

    Returns
    -------
    list of FrequencyBin
        ``N/2`` bins with ``freq = 0, 1, ..., N/2 - 1``.

    Raises
    ------
    InvalidTransformSize
        If ``N`` is not a power of two of at least 2.
    """
    x = np.asarray(samples, dtype=float).ravel()
    if x.size == 0:
        return []

    n = check_transform_size(x.size)
    if kernel is None:
        kernel = get_kernel()
    raw = _run_kernel(kernel, kernel.to_complex_array(x), n)

    half = n // 2
    re = raw[0 : 2 * half : 2]
    im = raw[1 : 2 * half : 2]

    logger.debug("Real transform of %d samples", n)
    return _to_bins(np.arange(half), 2.0 * np.hypot(re, im) / n, _phase(re, im))


def sort_by_amplitude(bins: Sequence[FrequencyBin]) -> List[FrequencyBin]:
    """Return a copy of ``bins`` ordered by descending amplitude (stable for ties)."""
    return sorted(bins, key=lambda b: b.amplitude, reverse=True)


def fourier_from_points(
    points: Sequence[Any],
    num_samples: int,
    *,
    kernel: Optional[DftKernel] = None,
) -> List[FrequencyBin]:
    """Resample a closed polyline to ``num_samples`` points and transform it.

    Empty ``points`` yields an empty list.
    """
    return get_fourier_data(resample_2d_data(points, num_samples), kernel=kernel)


def compute_from_profile(points: Sequence[Any], profile: TransformProfile) -> List[FrequencyBin]:
    """Run :func:`fourier_from_points` with the parameters bundled in ``profile``."""
    bins = fourier_from_points(points, profile.num_samples, kernel=get_kernel(profile.kernel))
    if profile.sort_by_amplitude:
        bins = sort_by_amplitude(bins)
    return bins
