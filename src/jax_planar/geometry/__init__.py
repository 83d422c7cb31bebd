"""Planar geometry value types.

This module provides the immutable, PyTree-compatible value types used to
describe rigid-body placements in the plane.
"""

from .rotation2d import Rotation2d
from .translation2d import Translation2d
from .pose2d import Pose2d

__all__ = ["Rotation2d", "Translation2d", "Pose2d"]
