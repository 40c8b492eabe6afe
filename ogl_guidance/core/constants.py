"""
Guidance constants.

Sources:
    - Guo, Hawkins & Wie (2012) for the constant-gravity optimal gains
    - CGPM (1901) for standard gravity
"""

# ---------------------------------------------------------------------------
# Optimal Guidance Law gains
# ---------------------------------------------------------------------------
OPTIMAL_ZEM_GAIN = 6.0                  # k_r, multiplies ZEM / t_go^2
OPTIMAL_ZEV_GAIN = -2.0                 # k_v, multiplies ZEV / t_go

# ---------------------------------------------------------------------------
# Vector layout
# ---------------------------------------------------------------------------
VECTOR3_SIZE = 3

# ---------------------------------------------------------------------------
# General
# ---------------------------------------------------------------------------
G0 = 9.80665                            # Standard gravitational acceleration [m/s²]
