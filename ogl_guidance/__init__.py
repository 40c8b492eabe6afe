"""
OGL Guidance
============
Closed-form Optimal Guidance Law (OGL) for terminal guidance of spacecraft
and missiles.

Architecture:
    - Zero-effort-miss / zero-effort-velocity predictions under constant gravity
    - Stateless OGL control authority, generic over 3-vector types
    - Vectorized evaluation over batches of independent cases
    - Generalized ZEM/ZEV gains through dataclass configuration
"""

__version__ = "0.1.0"
