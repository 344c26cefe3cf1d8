"""Uniform resampling of closed polylines.

Hand-drawn strokes arrive with an arbitrary number of points.  Before the
transform they are resampled to a fixed count by walking the polyline as a
closed loop (the last point connects back to the first) and linearly
interpolating between neighbouring vertices.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from epicycle_fourier.models.points import Point2D

logger = logging.getLogger(__name__)


def lerp(a, b, t):
    """Linear interpolation ``a + t * (b - a)``; exact at ``t == 0``. Works on scalars and arrays."""
    return a + t * (b - a)


def points_to_array(points: Sequence[Any]) -> np.ndarray:
    """Convert a sequence of point-like objects to a float array of shape ``(M, 2)``.

    Accepts an ``(M, 2)`` array directly, otherwise each element goes through
    :meth:`Point2D.coerce`.
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return np.empty((0, 2), dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"points array must have shape (M, 2), got {arr.shape}")
        return arr

    pts = [Point2D.coerce(p) for p in points]
    if not pts:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in pts], dtype=float)


def resample_2d_data(points: Sequence[Any], num_samples: int) -> np.ndarray:
    """Resample a closed polyline to ``num_samples`` points.

    Parameters
    ----------
    points:
        Ordered polyline vertices (Point2D, ``{"x", "y"}`` mappings, 2-sequences
        or an ``(M, 2)`` array).
    num_samples:
        Number of output points, ``>= 0``.

    Returns
    -------
    ndarray
        Flat array ``[x0, y0, x1, y1, ...]`` of length ``2 * num_samples``,
        or an empty array if ``points`` is empty.

    Notes
    -----
    Output point ``i`` sits at fractional vertex position ``M * i / num_samples``
    along the polyline; the segment from the last vertex back to the first is
    part of the walk.
    """
    pts = points_to_array(points)
    m = pts.shape[0]
    if m == 0:
        return np.empty(0, dtype=float)

    num_samples = int(num_samples)
    if num_samples < 0:
        raise ValueError(f"num_samples must be >= 0, got {num_samples}")
    if num_samples == 0:
        return np.empty(0, dtype=float)

    pos = m * (np.arange(num_samples) / num_samples)
    idx = np.floor(pos).astype(int)
    t = pos - idx
    idx = idx % m
    nxt = (idx + 1) % m

    out = lerp(pts[idx], pts[nxt], t[:, None])
    logger.debug("Resampled %d points to %d", m, num_samples)
    return out.reshape(-1)
