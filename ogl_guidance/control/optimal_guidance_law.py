"""
Optimal Guidance Law (OGL) control authority.

The OGL is the optimal control authority for the case of constant gravity
(Ebrahimi et al., 2008; Furfaro et al., 2011; Guo et al., 2012; Guo et al., 2013):

    u(t) = k_r / t_go² * ZEM(t) + k_v / t_go * ZEV(t)

with k_r = 6 and k_v = -2 for the optimal case. ZEM(t) is the miss between the
target position and the arrival position reached with no further control from
the current time, and ZEV(t) is the corresponding velocity miss. Other gain
pairs give the generalized ZEM/ZEV family (Guo et al., 2013).

Time-to-go is not validated. A zero or negative value yields whatever IEEE
division produces (inf / NaN); keeping t_go > 0 is up to the caller.

References:
    Ebrahimi, B., Bahrami, M., Roshanian, J. (2008) Optimal sliding-mode guidance
        with terminal velocity constraint for fixed-interval propulsive maneuvers,
        Acta Astronautica, vol. 62, pp. 556-562.
    Furfaro, R., Gaudet, B., Wibben, D.R., Simo, J. (2011) Development of
        Non-Linear Guidance Algorithms for Asteroids Close-Proximity Operations,
        AIAA GNC Conference.
    Guo, Y., Hawkins, M., Wie, B. (2012) Optimal feedback guidance algorithms for
        planetary landing and asteroid intercept, Advances in the Astronautical
        Sciences, vol. 142, pp. 2913-2931.
    Guo, Y., Hawkins, M., Wie, B. (2013) Applications of Generalized
        Zero-Effort-Miss/Zero-Effort-Velocity Feedback Guidance Algorithm,
        Journal of Guidance, Control, and Dynamics, vol. 36, pp. 810-820.
"""

from __future__ import annotations

import copy
import logging
import math
from typing import Optional

import numpy as np

from ..core.config import GuidanceConfig
from ..core.constants import OPTIMAL_ZEM_GAIN, OPTIMAL_ZEV_GAIN, VECTOR3_SIZE
from ..core.types import Vector3, VectorFactory, ZeroEffortErrors

logger = logging.getLogger(__name__)


def _new_vector_like(template: Vector3,
                     vector_factory: Optional[VectorFactory]) -> Vector3:
    """Allocate a fresh 3-vector to hold the control authority."""
    if vector_factory is not None:
        return vector_factory(VECTOR3_SIZE)
    if isinstance(template, np.ndarray):
        return np.empty(VECTOR3_SIZE, dtype=np.result_type(template.dtype, np.float64))
    if isinstance(template, list):
        # Same list type as the caller's; every element is overwritten
        return copy.copy(template)
    return np.empty(VECTOR3_SIZE)


def _log_degenerate_time_to_go(time_to_go: float) -> None:
    if not (math.isfinite(time_to_go) and time_to_go > 0.0):
        logger.debug("OGL evaluated with time-to-go %r; control authority "
                     "will follow IEEE division semantics", time_to_go)


def compute_optimal_guidance_law(zero_effort_miss: Vector3,
                                 zero_effort_velocity: Vector3,
                                 time_to_go: float,
                                 zero_effort_miss_gain: float = OPTIMAL_ZEM_GAIN,
                                 zero_effort_velocity_gain: float = OPTIMAL_ZEV_GAIN,
                                 vector_factory: Optional[VectorFactory] = None
                                 ) -> Vector3:
    """Compute control authority for the Optimal Guidance Law.

    Args:
        zero_effort_miss: Miss distance vector between target and computed
            final state, 3 components.
        zero_effort_velocity: Miss velocity vector between target and computed
            final state, 3 components.
        time_to_go: Time remaining to reach the target.
        zero_effort_miss_gain: Control gain k_r for the ZEM term (default 6.0).
        zero_effort_velocity_gain: Control gain k_v for the ZEV term (default -2.0).
        vector_factory: Optional callable(size) building the result vector.
            Without it the result is a float64 array for array input, a copy
            of the input list for list input, and a float64 array otherwise.

    Returns:
        Newly allocated control authority vector, 3 components.
    """
    _log_degenerate_time_to_go(time_to_go)

    t_go = np.float64(time_to_go)
    control = _new_vector_like(zero_effort_miss, vector_factory)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        zem_premultiplier = np.float64(zero_effort_miss_gain) / (t_go * t_go)
        zev_premultiplier = np.float64(zero_effort_velocity_gain) / t_go

        for i in range(VECTOR3_SIZE):
            control[i] = float(zem_premultiplier * zero_effort_miss[i]
                               + zev_premultiplier * zero_effort_velocity[i])

    return control


def compute_optimal_guidance_law_batch(zero_effort_miss: np.ndarray,
                                       zero_effort_velocity: np.ndarray,
                                       time_to_go: np.ndarray | float,
                                       zero_effort_miss_gain: float = OPTIMAL_ZEM_GAIN,
                                       zero_effort_velocity_gain: float = OPTIMAL_ZEV_GAIN
                                       ) -> np.ndarray:
    """Vectorized OGL over N independent cases.

    Element-wise arithmetic matches compute_optimal_guidance_law exactly.

    Args:
        zero_effort_miss: ZEM vectors, shape (N, 3) or (3,).
        zero_effort_velocity: ZEV vectors, same shape as zero_effort_miss.
        time_to_go: Time-to-go per case, shape (N,) or scalar.
        zero_effort_miss_gain: k_r.
        zero_effort_velocity_gain: k_v.

    Returns:
        Control authority, same shape as zero_effort_miss.

    Raises:
        ValueError: If the ZEM/ZEV shapes disagree, the trailing axis is not
            of length 3, or time_to_go does not match the leading axes.
    """
    zem = np.asarray(zero_effort_miss, dtype=float)
    zev = np.asarray(zero_effort_velocity, dtype=float)
    t_go = np.asarray(time_to_go, dtype=float)

    if zem.shape != zev.shape:
        raise ValueError(f"ZEM shape {zem.shape} does not match ZEV shape {zev.shape}")
    if zem.ndim == 0 or zem.shape[-1] != VECTOR3_SIZE:
        raise ValueError(f"Expected trailing axis of length {VECTOR3_SIZE}, "
                         f"got shape {zem.shape}")
    if t_go.ndim > 0 and t_go.shape != zem.shape[:-1]:
        raise ValueError(f"time_to_go shape {t_go.shape} does not match "
                         f"leading ZEM shape {zem.shape[:-1]}")

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        zem_premultiplier = np.expand_dims(zero_effort_miss_gain / (t_go * t_go), -1)
        zev_premultiplier = np.expand_dims(zero_effort_velocity_gain / t_go, -1)
        control = zem_premultiplier * zem + zev_premultiplier * zev

    return control


def gravity_compensated_command(control_authority: np.ndarray,
                                gravity: np.ndarray) -> np.ndarray:
    """Thrust acceleration to command in a constant gravity field.

    The OGL gives the net acceleration; the propulsion system supplies
    a = u - g.

    Args:
        control_authority: OGL control authority, shape (3,).
        gravity: Constant gravitational acceleration, shape (3,).

    Returns:
        Commanded thrust acceleration, shape (3,).
    """
    return np.asarray(control_authority, dtype=float) - np.asarray(gravity, dtype=float)


class GuidanceLawEvaluator:
    """Evaluates the OGL with a fixed gain configuration.

    Holds no mutable state, so one instance may be shared across threads.

    Attributes:
        config: Guidance configuration (law gains).
    """

    def __init__(self, config: Optional[GuidanceConfig] = None):
        """Initialize the evaluator.

        Args:
            config: Guidance configuration. Defaults to the optimal gains.
        """
        self.config = config if config is not None else GuidanceConfig()
        logger.debug("GuidanceLawEvaluator configured: %s", self.config.describe())

    def compute_control_authority(self,
                                  zero_effort_miss: Vector3,
                                  zero_effort_velocity: Vector3,
                                  time_to_go: float,
                                  vector_factory: Optional[VectorFactory] = None
                                  ) -> Vector3:
        """Control authority for a single case with the configured gains."""
        gains = self.config.gains
        return compute_optimal_guidance_law(
            zero_effort_miss,
            zero_effort_velocity,
            time_to_go,
            zero_effort_miss_gain=gains.zem_gain,
            zero_effort_velocity_gain=gains.zev_gain,
            vector_factory=vector_factory
        )

    def evaluate(self, errors: ZeroEffortErrors) -> np.ndarray:
        """Control authority for a bundled ZEM/ZEV/t_go input."""
        return self.compute_control_authority(
            np.asarray(errors.zem, dtype=float),
            np.asarray(errors.zev, dtype=float),
            errors.time_to_go
        )

    def compute_control_authority_batch(self,
                                        zero_effort_miss: np.ndarray,
                                        zero_effort_velocity: np.ndarray,
                                        time_to_go: np.ndarray | float
                                        ) -> np.ndarray:
        """Control authority for N cases, shape (N, 3)."""
        gains = self.config.gains
        return compute_optimal_guidance_law_batch(
            zero_effort_miss,
            zero_effort_velocity,
            time_to_go,
            zero_effort_miss_gain=gains.zem_gain,
            zero_effort_velocity_gain=gains.zev_gain
        )
