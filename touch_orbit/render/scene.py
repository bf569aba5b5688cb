from __future__ import annotations

import time
from typing import Optional

import pyglet
from pyglet.gl import (
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_FALSE,
    GL_TRUE,
    glClear,
    glDepthMask,
)

from touch_orbit.config import ViewerConfig
from touch_orbit.model import RigStep
from touch_orbit.pose import RigidPose
from touch_orbit.render.camera import ViewCamera
from touch_orbit.render.glutil import init_gl, set_matrices, set_viewport
from touch_orbit.render.primitives import draw_axes, draw_grid, draw_marker, draw_plane
from touch_orbit.rig import OrbitCameraRig

class SceneRenderer:
    def __init__(self, cfg: ViewerConfig):
        self.cfg = cfg
        init_gl()

        self.view = ViewCamera(fov_deg=float(cfg.fov_deg))

        self._w = int(cfg.window_w)
        self._h = int(cfg.window_h)
        self._grid_half = float(cfg.grid_half_extent_m)

        self._col_grid = (0.15, 0.15, 0.18, 1.0)
        self._col_pivot = (1.0, 0.55, 0.10, 1.0)
        self._col_band = (0.20, 0.75, 1.0, 0.12)

        self.show_band = bool(cfg.show_band)

        self._last_cap_t = 0.0
        self._last_cap_s = ""

    def resize(self, w: int, h: int):
        self._w = int(max(1, w))
        self._h = int(max(1, h))
        set_viewport(self._w, self._h)

    def draw(self, window: pyglet.window.Window, pose: RigidPose, rig: OrbitCameraRig, step: Optional[RigStep]):
        w = int(max(1, window.width))
        h = int(max(1, window.height))
        if w != self._w or h != self._h:
            self.resize(w, h)

        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        aspect = float(w) / float(h)
        set_matrices(self.view.projection_matrix(aspect), self.view.view_matrix(pose))

        ref = rig.reference_height
        draw_grid(self._grid_half, ref, step=1.0, rgba=self._col_grid)
        draw_axes((0.0, ref, 0.0), scale=1.0)

        px, py, pz = (float(c) for c in rig.pivot)
        draw_marker((px, py, pz), 0.4, self._col_pivot)

        if self.show_band and rig.max_vertical_translation > 0.0:
            glDepthMask(GL_FALSE)
            band = rig.max_vertical_translation
            draw_plane(self._grid_half, ref + band, self._col_band)
            draw_plane(self._grid_half, ref - band, self._col_band)
            glDepthMask(GL_TRUE)

        self._update_caption(window, pose, rig, step)

    def _update_caption(self, window: pyglet.window.Window, pose: RigidPose, rig: OrbitCameraRig, step: Optional[RigStep]):
        now = time.perf_counter()
        if (now - self._last_cap_t) < 0.2:
            return
        self._last_cap_t = now

        mode = step.mode.value if step is not None else "idle"
        s = (
            f"{self.cfg.caption} | {mode} | "
            f"h={rig.height():+.2f} tilt={rig.tilt_deg():.1f} | "
            f"pivot=({rig.pivot[0]:.2f}, {rig.pivot[1]:.2f}, {rig.pivot[2]:.2f})"
        )
        if s != self._last_cap_s:
            window.set_caption(s)
            self._last_cap_s = s
