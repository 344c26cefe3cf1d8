"""Transform profile -- bundles the parameters of a points-to-bins run.

A TransformProfile groups every parameter that affects the output of
:func:`~epicycle_fourier.analysis.fourier.compute_from_profile` into one
frozen dataclass.  It can be:

- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class TransformProfile:
    """Frozen configuration for resampling and transforming a polyline.

    Fields
    ------
    num_samples : int
        Number of uniformly spaced points the polyline is resampled to.
        Must be a power of two (at least 2) for the transform to accept it.
    kernel : str
        Name of the DFT kernel, see :func:`~epicycle_fourier.analysis.kernels.get_kernel`.
    sort_by_amplitude : bool
        If True, bins are reordered by descending amplitude after the
        transform.  Off by default: the centered, alternating order is kept.
    """

    num_samples: int = 256
    kernel: str = "numpy"
    sort_by_amplitude: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TransformProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        d = dict(d)  # shallow copy
        if "num_samples" in d:
            d["num_samples"] = int(d["num_samples"])
        if "sort_by_amplitude" in d:
            d["sort_by_amplitude"] = bool(d["sort_by_amplitude"])
        return cls(**d)
