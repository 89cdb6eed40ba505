"""Rotation helpers for Vector2 values."""

from __future__ import annotations

import numpy as np

from .vector2 import Vector2


def rotate_vector2(vec: Vector2, angle_rad: float) -> Vector2:
    """Return ``vec`` turned counter-clockwise by ``angle_rad`` about the origin.

    The angle is cast to float32 before the trig calls, so the result carries
    single precision throughout. Infinite components yield inf/NaN silently.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        angle = np.float32(angle_rad)
        cos_a = np.cos(angle)
        sin_a = np.sin(angle)
        return Vector2(
            vec.x * cos_a - vec.y * sin_a,
            vec.x * sin_a + vec.y * cos_a,
        )


def rotate_point(point: Vector2, origin: Vector2, angle_rad: float) -> Vector2:
    # Neither input is modified.
    return origin + rotate_vector2(point - origin, angle_rad)
