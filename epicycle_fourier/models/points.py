from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Point2D:
    """One vertex of a polyline.

    Order within a sequence defines the traversal order of the polyline.
    """

    x: float
    y: float

    @classmethod
    def coerce(cls, obj: Any) -> Point2D:
        """Build a Point2D from a Point2D, an ``{"x", "y"}`` mapping or a 2-sequence."""
        if isinstance(obj, Point2D):
            return obj
        if isinstance(obj, Mapping):
            try:
                return cls(x=float(obj["x"]), y=float(obj["y"]))
            except KeyError as exc:
                raise TypeError(f"Point mapping needs 'x' and 'y' keys, got {sorted(obj)}") from exc
        try:
            x, y = obj
            return cls(x=float(x), y=float(y))
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Cannot interpret {obj!r} as a 2D point") from exc
