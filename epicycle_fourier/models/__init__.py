from .bins import FrequencyBin
from .points import Point2D
from .profile import TransformProfile

__all__ = [
    "FrequencyBin",
    "Point2D",
    "TransformProfile",
]
