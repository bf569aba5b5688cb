from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

class RigMode(Enum):
    IDLE = "idle"
    PRESS = "press"
    TRANSLATE = "translate"
    ROTATE = "rotate"
    CLAMPED = "clamped"

@dataclass(frozen=True)
class PointerSample:
    held: bool
    x: float
    y: float

    def position(self) -> Tuple[float, float]:
        return (float(self.x), float(self.y))

@dataclass(frozen=True)
class RigStep:
    mode: RigMode
    delta: Tuple[float, float]
    vertical_input: float

IDLE_STEP = RigStep(mode=RigMode.IDLE, delta=(0.0, 0.0), vertical_input=0.0)
PRESS_STEP = RigStep(mode=RigMode.PRESS, delta=(0.0, 0.0), vertical_input=0.0)
