"""
Foundational data types for OGL evaluation.

Convention:
    - Distances: m
    - Time: seconds
    - Velocity: m/s
    - Acceleration: m/s²

Any consistent unit system works; the law itself is unit-agnostic.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from .constants import OPTIMAL_ZEM_GAIN, OPTIMAL_ZEV_GAIN


# ---------------------------------------------------------------------------
# Vector contract
# ---------------------------------------------------------------------------

@runtime_checkable
class Vector3(Protocol):
    """Structural contract for a 3-element numeric vector.

    Anything indexable for read and write over 0..2 qualifies: numpy arrays,
    lists, or a caller's own small vector class.
    """

    def __getitem__(self, index: int) -> float: ...

    def __setitem__(self, index: int, value: float) -> None: ...

    def __len__(self) -> int: ...


# Callable(size) -> new vector of that size
VectorFactory = Callable[[int], Vector3]


# ---------------------------------------------------------------------------
# Gains
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GuidanceGains:
    """Gain pair for the generalized ZEM/ZEV law.

        u = k_r / t_go² * ZEM + k_v / t_go * ZEV

    Attributes:
        zem_gain: k_r, gain on the zero-effort-miss term.
        zev_gain: k_v, gain on the zero-effort-velocity term.
    """
    zem_gain: float = OPTIMAL_ZEM_GAIN
    zev_gain: float = OPTIMAL_ZEV_GAIN

    @classmethod
    def optimal(cls) -> GuidanceGains:
        """The constant-gravity optimal pair (6, -2)."""
        return cls(zem_gain=OPTIMAL_ZEM_GAIN, zev_gain=OPTIMAL_ZEV_GAIN)

    @property
    def is_optimal(self) -> bool:
        return (self.zem_gain == OPTIMAL_ZEM_GAIN
                and self.zev_gain == OPTIMAL_ZEV_GAIN)


# ---------------------------------------------------------------------------
# Law inputs
# ---------------------------------------------------------------------------

@dataclass
class ZeroEffortErrors:
    """Inputs for a single OGL evaluation.

    Attributes:
        zem: Zero-effort-miss vector [m], shape (3,).
        zev: Zero-effort-velocity vector [m/s], shape (3,).
        time_to_go: Time remaining to arrival [s].
    """
    zem: np.ndarray             # (3,) m
    zev: np.ndarray             # (3,) m/s
    time_to_go: float           # s

    @property
    def miss_distance(self) -> float:
        """Magnitude of the predicted positional miss [m]."""
        return float(np.linalg.norm(self.zem))

    @property
    def velocity_miss(self) -> float:
        """Magnitude of the predicted velocity miss [m/s]."""
        return float(np.linalg.norm(self.zev))
