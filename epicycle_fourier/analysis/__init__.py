"""Analysis package.

Design principle:
  - Polylines are resampled onto a power-of-two grid (:mod:`.resample`).
  - A DFT kernel (:mod:`.kernels`) produces raw interleaved spectra.
  - :mod:`.fourier` turns raw spectra into FrequencyBin records.

The kernel is always injected; nothing here implements the FFT itself.
"""

from .kernels import (
    DftKernel,
    DirectDftKernel,
    InvalidTransformSize,
    NumpyFftKernel,
    get_kernel,
)
from .resample import lerp, resample_2d_data
from .fourier import (
    compute_from_profile,
    fourier_from_points,
    get_fourier_data,
    get_real_fourier_data,
    sort_by_amplitude,
)
from .tables import bins_to_frame, frame_to_bins

__all__ = [
    "DftKernel",
    "DirectDftKernel",
    "InvalidTransformSize",
    "NumpyFftKernel",
    "get_kernel",
    "lerp",
    "resample_2d_data",
    "compute_from_profile",
    "fourier_from_points",
    "get_fourier_data",
    "get_real_fourier_data",
    "sort_by_amplitude",
    "bins_to_frame",
    "frame_to_bins",
]
