from __future__ import annotations
from dataclasses import dataclass
import os
from typing import Tuple

def _f(name: str, default: float) -> float:
    v = os.environ.get(name, "")
    if not v:
        return float(default)
    try:
        return float(v)
    except ValueError:
        return float(default)

def _s(name: str, default: str) -> str:
    v = os.environ.get(name, "")
    return v if v else default

def _i(name: str, default: int) -> int:
    v = os.environ.get(name, "")
    if not v:
        return int(default)
    try:
        return int(v)
    except ValueError:
        return int(default)

def _b(name: str, default: bool) -> bool:
    v = os.environ.get(name, "")
    if not v:
        return bool(default)
    vv = v.strip().lower()
    if vv in ("1", "true", "yes", "y", "on"):
        return True
    if vv in ("0", "false", "no", "n", "off"):
        return False
    return bool(default)

def _v3(prefix: str, default: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return (
        _f(prefix + "_X", default[0]),
        _f(prefix + "_Y", default[1]),
        _f(prefix + "_Z", default[2]),
    )

@dataclass(frozen=True)
class RigConfig:
    pivot: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    max_vertical_translation: float = 1.0
    max_vertical_rotation_angle: float = 80.0
    horizontal_rotate_rate: float = 0.5
    vertical_rotate_rate: float = 0.5
    vertical_translate_rate: float = 0.01
    reference_height: float = 0.0
    debug_checks: bool = False

@dataclass(frozen=True)
class ViewerConfig:
    rig: RigConfig
    camera_start: Tuple[float, float, float]
    window_w: int
    window_h: int
    fps: int
    fov_deg: float
    caption: str
    grid_half_extent_m: float
    show_band: bool

def load_rig_config() -> RigConfig:
    d = RigConfig()
    return RigConfig(
        pivot=_v3("ORBIT_PIVOT", d.pivot),
        max_vertical_translation=_f("ORBIT_MAX_VERTICAL_TRANSLATION", d.max_vertical_translation),
        max_vertical_rotation_angle=_f("ORBIT_MAX_VERTICAL_ROTATION_DEG", d.max_vertical_rotation_angle),
        horizontal_rotate_rate=_f("ORBIT_HORIZONTAL_RATE", d.horizontal_rotate_rate),
        vertical_rotate_rate=_f("ORBIT_VERTICAL_RATE", d.vertical_rotate_rate),
        vertical_translate_rate=_f("ORBIT_TRANSLATE_RATE", d.vertical_translate_rate),
        reference_height=_f("ORBIT_REFERENCE_HEIGHT", d.reference_height),
        debug_checks=_b("ORBIT_DEBUG_CHECKS", d.debug_checks),
    )

def load_config() -> ViewerConfig:
    return ViewerConfig(
        rig=load_rig_config(),
        camera_start=_v3("ORBIT_CAMERA", (0.0, 0.5, 8.0)),
        window_w=_i("WINDOW_W", 1280),
        window_h=_i("WINDOW_H", 720),
        fps=_i("FPS", 60),
        fov_deg=_f("FOV_DEG", 60.0),
        caption=_s("WINDOW_CAPTION", "touch-orbit"),
        grid_half_extent_m=_f("GRID_HALF_EXTENT_M", 10.0),
        show_band=_b("SHOW_BAND", True),
    )
