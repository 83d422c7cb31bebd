"""
JAX Planar: 2D rigid-body geometry in JAX.

This library provides immutable, JIT-compilable rotation, translation and
pose types for the plane, together with the SO(2) and SE(2) matrix
operations they are built on.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import transforms
from . import geometry
from .geometry import Pose2d, Rotation2d, Translation2d

__version__ = "0.1.0"
__all__ = ["transforms", "geometry", "Pose2d", "Rotation2d", "Translation2d"]
