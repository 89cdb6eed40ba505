import math
import unittest
import warnings

import numpy as np

from vecmath.transforms import rotate_point, rotate_vector2
from vecmath.vector2 import Vector2


class TransformTests(unittest.TestCase):
    def test_rotate_vector2_quarter_turn(self) -> None:
        rotated = rotate_vector2(Vector2.right(), math.pi / 2)
        self.assertAlmostEqual(float(rotated.x), 0.0, places=6)
        self.assertAlmostEqual(float(rotated.y), 1.0, places=6)

    def test_rotate_vector2_preserves_magnitude(self) -> None:
        v = Vector2(3.0, 4.0)
        rotated = rotate_vector2(v, 1.234)
        self.assertAlmostEqual(float(rotated.magnitude()), 5.0, places=5)

    def test_rotate_point_about_origin(self) -> None:
        rotated = rotate_point(Vector2(2.0, 1.0), Vector2(1.0, 1.0), math.pi)
        self.assertAlmostEqual(float(rotated.x), 0.0, places=6)
        self.assertAlmostEqual(float(rotated.y), 1.0, places=6)

    def test_rotate_point_leaves_inputs(self) -> None:
        point = Vector2(2.0, 1.0)
        origin = Vector2(1.0, 1.0)
        rotate_point(point, origin, 0.5)
        self.assertEqual(point, Vector2(2.0, 1.0))
        self.assertEqual(origin, Vector2(1.0, 1.0))

    def test_rotate_infinite_vector_is_silent(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rotated = rotate_vector2(Vector2.positive_infinity(), 0.0)
            spun = rotate_vector2(Vector2.one(), np.inf)
        self.assertTrue(np.isnan(rotated.x))
        self.assertTrue(np.isnan(rotated.y))
        self.assertTrue(np.isnan(spun.x))


if __name__ == "__main__":
    unittest.main()
