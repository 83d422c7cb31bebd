"""
JAX-based planar transforms.

This module provides JIT-compilable implementations of:
- SO(2) rotations (so2 module)
- SE(2) rigid body transforms (se2 module)

All functions are pure, stateless, and operate on JAX arrays.
"""

from . import so2
from . import se2

__all__ = [
    "so2",
    "se2",
]
