"""Epicycle Fourier -- frequency-domain tooling for epicycle-style drawings.

This package provides tools for:
- Resampling hand-drawn polylines onto a fixed-size uniform grid
- Computing frequency bins from interleaved (x, y) samples (complex form)
- Computing frequency bins from scalar waveforms (real form)
- Exporting bins as pandas DataFrames

Key principles:
- The FFT itself is an injected kernel; this package only prepares its
  input and reinterprets its output
- Transform sizes are powers of two, validated before the kernel runs
- All operations are pure functions: no caching, no shared state

Main subpackages:
- analysis: Resampling, kernels, bin construction, tabular export
- models: Data records (Point2D, FrequencyBin) and TransformProfile
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = []
