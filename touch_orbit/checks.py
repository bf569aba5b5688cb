from __future__ import annotations
from dataclasses import dataclass

import numpy as np

HEIGHT_TOL = 1e-6
TILT_SLACK_DEG = 1e-6


class InvariantViolation(AssertionError):
    """Raised only in debug runs when a geometry post-condition fails."""


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    message: str = ""


PASS = CheckResult(True)


def check_height_unchanged(before: np.ndarray, after: np.ndarray, tol: float = HEIGHT_TOL) -> CheckResult:
    dy = abs(float(after[1]) - float(before[1]))
    if dy <= tol:
        return PASS
    return CheckResult(False, f"horizontal rotation changed height by {dy:.3g}")


def check_xz_unchanged(before: np.ndarray, after: np.ndarray, tol: float = HEIGHT_TOL) -> CheckResult:
    dx = abs(float(after[0]) - float(before[0]))
    dz = abs(float(after[2]) - float(before[2]))
    if dx <= tol and dz <= tol:
        return PASS
    return CheckResult(False, f"vertical translation moved x/z by ({dx:.3g}, {dz:.3g})")


def check_tilt_within(angle_deg: float, max_vertical_rotation_angle: float, slack: float = TILT_SLACK_DEG) -> CheckResult:
    lo = 90.0 - float(max_vertical_rotation_angle)
    hi = 90.0 + float(max_vertical_rotation_angle)
    a = float(angle_deg)
    if lo - slack <= a <= hi + slack:
        return PASS
    return CheckResult(False, f"tilt {a:.4f} deg outside [{lo:.4f}, {hi:.4f}]")


def check_rotation_limit(value: float) -> CheckResult:
    v = float(value)
    if 0.0 < v < 90.0:
        return PASS
    return CheckResult(False, f"max_vertical_rotation_angle must be in (0, 90), got {v}")


def enforce(result: CheckResult, caller: object = None):
    if result.ok:
        return
    if caller is None:
        raise InvariantViolation(result.message)
    raise InvariantViolation(f"{type(caller).__name__}: {result.message}")
