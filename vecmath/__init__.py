"""Single-precision 2D vector math."""

from .transforms import rotate_point, rotate_vector2
from .vector2 import Vector2

__all__ = [
    "Vector2",
    "rotate_vector2",
    "rotate_point",
]
