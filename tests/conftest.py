"""Pytest configuration for the OGL guidance tests."""
from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

# Make the package importable when tests run from a source checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def tolerance():
    """Relative tolerance of 100 machine epsilons."""
    return 100.0 * np.finfo(float).eps


@pytest.fixture
def arbitrary_case():
    """Snapshot case: ZEM, ZEV, t_go and the expected optimal-gain control."""
    return {
        "zem": np.array([-21.163, 9.887, -0.613]),
        "zev": np.array([-1.244, -0.112, 3.119]),
        "time_to_go": 12.516,
        "expected": np.array([-0.611797225534058, 0.396587823003621,
                              -0.521881100532641]),
    }
