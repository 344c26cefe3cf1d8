from __future__ import annotations

import cmath
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FrequencyBin:
    """One frequency component of a transformed signal.

    Attributes
    ----------
    freq:
        Signed frequency index, in cycles per full traversal of the input.
    amplitude:
        Normalized magnitude (``|X| / N`` for complex input, ``2 |X| / N`` for real input).
    phase:
        Angular offset in radians, in ``(-pi, pi]``.
    """

    freq: int
    amplitude: float
    phase: float

    def as_complex(self) -> complex:
        """Rotating-vector coefficient ``amplitude * exp(i * phase)``."""
        return cmath.rect(self.amplitude, self.phase)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> FrequencyBin:
        return cls(freq=int(d["freq"]), amplitude=float(d["amplitude"]), phase=float(d["phase"]))
