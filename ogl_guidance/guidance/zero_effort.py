"""
Zero-effort predictions in a constant gravity field.

Closed-form ZEM and ZEV (Guo, Hawkins & Wie, 2012), assuming no control is
applied from now until arrival:

    ZEM = r_f - (r + v t_go + ½ g t_go²)
    ZEV = v_f - (v + g t_go)

These are the inputs consumed by the Optimal Guidance Law.
"""

from __future__ import annotations

import numpy as np
from typing import Optional

from ..core.constants import VECTOR3_SIZE
from ..core.types import ZeroEffortErrors


def _as_vector3(name: str, value) -> np.ndarray:
    vec = np.asarray(value, dtype=float)
    if vec.shape != (VECTOR3_SIZE,):
        raise ValueError(f"{name} must have shape ({VECTOR3_SIZE},), got {vec.shape}")
    return vec


def _gravity_vector(gravity: Optional[np.ndarray]) -> np.ndarray:
    if gravity is None:
        return np.zeros(VECTOR3_SIZE)
    return _as_vector3("gravity", gravity)


def zero_effort_miss(position: np.ndarray,
                     velocity: np.ndarray,
                     target_position: np.ndarray,
                     time_to_go: float,
                     gravity: Optional[np.ndarray] = None) -> np.ndarray:
    """Zero-effort-miss vector.

    Args:
        position: Current position [m], shape (3,).
        velocity: Current velocity [m/s], shape (3,).
        target_position: Desired arrival position [m], shape (3,).
        time_to_go: Time remaining to arrival [s].
        gravity: Constant gravitational acceleration [m/s²], shape (3,).
            None for a field-free case.

    Returns:
        ZEM [m], shape (3,).
    """
    r = _as_vector3("position", position)
    v = _as_vector3("velocity", velocity)
    r_f = _as_vector3("target_position", target_position)
    g = _gravity_vector(gravity)

    t_go = float(time_to_go)
    return r_f - (r + v * t_go + 0.5 * g * t_go * t_go)


def zero_effort_velocity(velocity: np.ndarray,
                         target_velocity: np.ndarray,
                         time_to_go: float,
                         gravity: Optional[np.ndarray] = None) -> np.ndarray:
    """Zero-effort-velocity vector.

    Args:
        velocity: Current velocity [m/s], shape (3,).
        target_velocity: Desired arrival velocity [m/s], shape (3,).
        time_to_go: Time remaining to arrival [s].
        gravity: Constant gravitational acceleration [m/s²], shape (3,).

    Returns:
        ZEV [m/s], shape (3,).
    """
    v = _as_vector3("velocity", velocity)
    v_f = _as_vector3("target_velocity", target_velocity)
    g = _gravity_vector(gravity)

    return v_f - (v + g * float(time_to_go))


def zero_effort_errors(position: np.ndarray,
                       velocity: np.ndarray,
                       target_position: np.ndarray,
                       target_velocity: np.ndarray,
                       time_to_go: float,
                       gravity: Optional[np.ndarray] = None) -> ZeroEffortErrors:
    """Bundle ZEM, ZEV and time-to-go for one law evaluation."""
    return ZeroEffortErrors(
        zem=zero_effort_miss(position, velocity, target_position, time_to_go, gravity),
        zev=zero_effort_velocity(velocity, target_velocity, time_to_go, gravity),
        time_to_go=float(time_to_go)
    )
