from __future__ import annotations

import unittest

import numpy as np

from touch_orbit.pose import RigidPose
from touch_orbit.render.camera import ViewCamera


class TestViewCamera(unittest.TestCase):
    def test_view_matrix_maps_eye_to_origin_and_target_to_negative_z(self):
        pose = RigidPose.looking_at((2.0, 3.0, 6.0), (0.0, 0.0, 0.0))
        m = ViewCamera().view_matrix(pose)
        eye = np.array([2.0, 3.0, 6.0, 1.0])
        np.testing.assert_allclose(m @ eye, [0.0, 0.0, 0.0, 1.0], atol=1e-5)
        target = m @ np.array([0.0, 0.0, 0.0, 1.0])
        self.assertAlmostEqual(float(target[0]), 0.0, places=5)
        self.assertAlmostEqual(float(target[1]), 0.0, places=5)
        self.assertAlmostEqual(float(target[2]), -7.0, places=4)

    def test_view_matrix_follows_rotation(self):
        pivot = (0.0, 0.0, 0.0)
        pose = RigidPose.looking_at((0.0, 0.0, 5.0), pivot)
        pose.rotate_around(pivot, (0.0, 1.0, 0.0), 90.0)
        m = ViewCamera().view_matrix(pose)
        target = m @ np.array([0.0, 0.0, 0.0, 1.0])
        self.assertAlmostEqual(float(target[2]), -5.0, places=4)

    def test_projection_matrix_shape(self):
        p = ViewCamera(fov_deg=90.0, near=1.0, far=10.0).projection_matrix(2.0)
        self.assertEqual(p.shape, (4, 4))
        self.assertAlmostEqual(float(p[1, 1]), 1.0, places=6)
        self.assertAlmostEqual(float(p[0, 0]), 0.5, places=6)
        self.assertEqual(float(p[3, 2]), -1.0)


if __name__ == "__main__":
    unittest.main()
