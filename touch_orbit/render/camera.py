from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from touch_orbit.pose import RigidPose

@dataclass
class ViewCamera:
    fov_deg: float = 60.0
    near: float = 0.05
    far: float = 500.0

    def view_matrix(self, pose: RigidPose) -> np.ndarray:
        eye = pose.position
        s = pose.right
        u = pose.up
        f = pose.forward

        m = np.eye(4, dtype=np.float32)
        m[0, 0:3] = s
        m[1, 0:3] = u
        m[2, 0:3] = -f
        m[0, 3] = -float(np.dot(s, eye))
        m[1, 3] = -float(np.dot(u, eye))
        m[2, 3] = float(np.dot(f, eye))
        return m

    def projection_matrix(self, aspect: float) -> np.ndarray:
        f = 1.0 / math.tan(math.radians(self.fov_deg) * 0.5)
        near = float(self.near)
        far = float(self.far)
        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = f / float(aspect)
        m[1, 1] = f
        m[2, 2] = (far + near) / (near - far)
        m[2, 3] = (2.0 * far * near) / (near - far)
        m[3, 2] = -1.0
        return m
