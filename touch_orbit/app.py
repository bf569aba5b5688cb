from __future__ import annotations

from typing import Optional

import numpy as np
import pyglet
from pyglet.window import key, mouse

from touch_orbit.config import ViewerConfig
from touch_orbit.model import PointerSample, RigStep
from touch_orbit.pose import RigidPose
from touch_orbit.render.scene import SceneRenderer
from touch_orbit.rig import OrbitCameraRig

TAG = "[touch-orbit]"


class ViewerApp:
    """pyglet host: polls the pointer every tick and feeds it to the rig."""

    def __init__(self, cfg: ViewerConfig):
        self.cfg = cfg

        self.window = pyglet.window.Window(
            width=cfg.window_w,
            height=cfg.window_h,
            caption=cfg.caption,
            resizable=True,
        )
        self.window.push_handlers(self)

        self.pose = RigidPose.looking_at(cfg.camera_start, cfg.rig.pivot)
        self.rig = OrbitCameraRig.from_config(self.pose, cfg.rig)
        self.renderer = SceneRenderer(cfg)

        self._button_held = False
        self._mx = 0
        self._my = 0
        self.last_step: Optional[RigStep] = None

        self._fps_inv = 1.0 / float(max(1, cfg.fps))
        pyglet.clock.schedule_interval(self._tick, self._fps_inv)

    def run(self):
        print(f"{TAG} camera={tuple(round(float(c), 3) for c in self.pose.position)} pivot={tuple(self.cfg.rig.pivot)}")
        print(f"{TAG} drag with the left button; R resets, B toggles the translate band")
        pyglet.app.run()

    def sample_pointer(self) -> PointerSample:
        # pyglet reports y-up window coordinates, the rig wants y-down
        h = int(max(1, self.window.height))
        return PointerSample(held=self._button_held, x=float(self._mx), y=float(h - self._my))

    def _tick(self, dt: float):
        sample = self.sample_pointer()
        self.last_step = self.rig.tick(sample.held, sample.position())
        self.window.invalid = True

    def reset_view(self):
        pivot = self.cfg.rig.pivot
        self.pose.position = self.cfg.camera_start
        self.pose.look_at(pivot)
        self.rig.pivot = np.asarray(pivot, dtype=np.float64)
        self.rig.reset()
        print(f"{TAG} view reset")

    def on_draw(self):
        self.window.clear()
        self.renderer.draw(self.window, self.pose, self.rig, self.last_step)

    def on_resize(self, width: int, height: int):
        self.renderer.resize(width, height)
        # the y-down flip depends on the window height; restart the drag
        self.rig.reset()

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button == mouse.LEFT:
            self._button_held = True
            self._mx = x
            self._my = y

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if button == mouse.LEFT:
            self._button_held = False

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self._mx = x
        self._my = y

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        self._mx = x
        self._my = y

    def on_deactivate(self):
        self._button_held = False
        self.rig.reset()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.R:
            self.reset_view()
        elif symbol == key.B:
            self.renderer.show_band = not self.renderer.show_band
