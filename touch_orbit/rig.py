from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np

from touch_orbit.checks import (
    check_height_unchanged,
    check_rotation_limit,
    check_tilt_within,
    check_xz_unchanged,
    enforce,
)
from touch_orbit.config import RigConfig
from touch_orbit.model import IDLE_STEP, PRESS_STEP, RigMode, RigStep
from touch_orbit.pose import WORLD_UP, PoseMutator, angle_between_deg


class OrbitCameraRig:
    """
    Drag-driven camera rig.

    Horizontal drag orbits the camera around ``pivot`` about world up. Vertical
    drag translates the camera (and the pivot with it) while the camera is
    inside the band ``|y - reference_height| < max_vertical_translation``, and
    orbits it over or under the pivot once outside, with the look direction
    clamped to ``max_vertical_rotation_angle`` from horizontal. Together the
    motion follows the surface of a capsule.

    ``tick`` is meant to be polled once per frame with the pointer position in
    y-down screen pixels.
    """

    def __init__(
        self,
        pose: PoseMutator,
        pivot: Sequence[float] = (0.0, 0.0, 0.0),
        max_vertical_translation: float = 1.0,
        max_vertical_rotation_angle: float = 80.0,
        horizontal_rotate_rate: float = 0.5,
        vertical_rotate_rate: float = 0.5,
        vertical_translate_rate: float = 0.01,
        reference_height: float = 0.0,
        debug_checks: bool = False,
    ):
        self.pose = pose
        self.pivot = np.asarray(pivot, dtype=np.float64).reshape(3).copy()
        self.max_vertical_translation = max_vertical_translation
        self.max_vertical_rotation_angle = max_vertical_rotation_angle
        self.horizontal_rotate_rate = float(horizontal_rotate_rate)
        self.vertical_rotate_rate = float(vertical_rotate_rate)
        self.vertical_translate_rate = float(vertical_translate_rate)
        self.reference_height = float(reference_height)
        self.debug_checks = bool(debug_checks)

        self.is_dragging = False
        self.previous_pointer_position: Tuple[float, float] = (0.0, 0.0)

    @classmethod
    def from_config(cls, pose: PoseMutator, cfg: RigConfig) -> "OrbitCameraRig":
        return cls(
            pose,
            pivot=cfg.pivot,
            max_vertical_translation=cfg.max_vertical_translation,
            max_vertical_rotation_angle=cfg.max_vertical_rotation_angle,
            horizontal_rotate_rate=cfg.horizontal_rotate_rate,
            vertical_rotate_rate=cfg.vertical_rotate_rate,
            vertical_translate_rate=cfg.vertical_translate_rate,
            reference_height=cfg.reference_height,
            debug_checks=cfg.debug_checks,
        )

    @property
    def max_vertical_rotation_angle(self) -> float:
        return self._max_vertical_rotation_angle

    @max_vertical_rotation_angle.setter
    def max_vertical_rotation_angle(self, value: float):
        res = check_rotation_limit(value)
        if not res.ok:
            raise ValueError(res.message)
        self._max_vertical_rotation_angle = float(value)

    @property
    def max_vertical_translation(self) -> float:
        return self._max_vertical_translation

    @max_vertical_translation.setter
    def max_vertical_translation(self, value: float):
        v = float(value)
        if v < 0.0:
            raise ValueError(f"max_vertical_translation must be >= 0, got {v}")
        self._max_vertical_translation = v

    def height(self) -> float:
        return float(self.pose.position[1]) - self.reference_height

    def tilt_deg(self) -> float:
        return angle_between_deg(WORLD_UP, self.pose.forward)

    def in_translate_band(self) -> bool:
        return abs(self.height()) < self._max_vertical_translation

    def reset(self):
        self.is_dragging = False
        self.previous_pointer_position = (0.0, 0.0)

    def tick(self, input_held: bool, pointer_position: Sequence[float]) -> RigStep:
        if not input_held:
            self.is_dragging = False
            return IDLE_STEP

        px, py = float(pointer_position[0]), float(pointer_position[1])
        step = PRESS_STEP
        if self.is_dragging:
            ox, oy = self.previous_pointer_position
            step = self.apply_delta((px - ox, py - oy))
        else:
            self.is_dragging = True

        self.previous_pointer_position = (px, py)
        return step

    def apply_delta(self, delta: Sequence[float]) -> RigStep:
        dx, dy = float(delta[0]), float(delta[1])
        self._rotate_horizontal(dx)

        # screen y grows downward; positive input moves the camera up
        vertical_input = -dy
        if self.in_translate_band():
            self._translate_vertical(vertical_input)
            mode = RigMode.TRANSLATE
        elif self._rotate_vertical(vertical_input):
            mode = RigMode.ROTATE
        else:
            mode = RigMode.CLAMPED

        return RigStep(mode=mode, delta=(dx, dy), vertical_input=vertical_input)

    def _checking(self) -> bool:
        return __debug__ and self.debug_checks

    def _rotate_horizontal(self, dx: float):
        before = np.array(self.pose.position, dtype=np.float64)
        self.pose.rotate_around(self.pivot, WORLD_UP, self.horizontal_rotate_rate * dx)
        if self._checking():
            enforce(check_height_unchanged(before, self.pose.position), self)

    def _translate_vertical(self, vertical_input: float):
        before = np.array(self.pose.position, dtype=np.float64)
        offset = WORLD_UP * (vertical_input * self.vertical_translate_rate)
        self.pose.translate(offset)
        self.pivot = self.pivot + offset
        if self._checking():
            enforce(check_xz_unchanged(before, self.pose.position), self)

    def _rotate_vertical(self, vertical_input: float) -> bool:
        angle = self.tilt_deg()
        max_top = 90.0 + self._max_vertical_rotation_angle
        max_bottom = 90.0 - self._max_vertical_rotation_angle

        can_rotate_down = angle > max_bottom
        can_rotate_up = angle < max_top
        is_rotating_down = vertical_input <= 0
        is_rotating_up = vertical_input >= 0

        if not ((can_rotate_down and is_rotating_down) or (can_rotate_up and is_rotating_up)):
            return False

        # step is the change in tilt; never carry it past the limit it heads for
        step = self.vertical_rotate_rate * vertical_input
        if step > 0.0:
            step = min(step, max(0.0, max_top - angle))
        elif step < 0.0:
            step = max(step, -max(0.0, angle - max_bottom))

        # right-handed host: tilting the view down (camera rising over the
        # pivot) is a negative turn about camera right
        self.pose.rotate_around(self.pivot, self.pose.right, -step)

        if self._checking() and check_tilt_within(angle, self._max_vertical_rotation_angle).ok:
            enforce(check_tilt_within(self.tilt_deg(), self._max_vertical_rotation_angle), self)
        return True
