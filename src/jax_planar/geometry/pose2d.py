"""Planar pose (position + orientation) as an immutable JAX PyTree.

A Pose2d owns one Translation2d and one Rotation2d. All operations are pure
and return new poses, so poses can be traced by jit and batched by vmap
like any other PyTree of arrays.
"""

from __future__ import annotations

import logging
from typing import Union

import jax
import jax.numpy as jnp
from flax import struct

from ..transforms import se2
from .rotation2d import Rotation2d
from .translation2d import Translation2d

logger = logging.getLogger(__name__)

Array = jax.Array
Scalar = Union[float, Array]


@struct.dataclass
class Pose2d:
    """Immutable rigid-body placement in the plane.

    Attributes:
        translation: Position of the pose. Defaults to the origin.
        rotation: Orientation of the pose. Defaults to facing +x.
    """
    translation: Translation2d = Translation2d.ZERO
    rotation: Rotation2d = Rotation2d.ZERO

    # Constructors
    @classmethod
    def from_xy(cls, x: Scalar, y: Scalar, rotation: Rotation2d = Rotation2d.ZERO) -> "Pose2d":
        return cls(Translation2d(x, y), rotation)

    @classmethod
    def from_matrix(cls, matrix: Array) -> "Pose2d":
        """Build from a (..., 3, 3) SE(2) homogeneous matrix."""
        matrix = jnp.asarray(matrix)
        logger.debug("Pose2d.from_matrix: input shape %s", matrix.shape)
        if matrix.ndim < 2 or matrix.shape[-2:] != (3, 3):
            logger.error("Pose2d.from_matrix: bad shape %s", matrix.shape)
            raise ValueError(f"matrix must have shape (...,3,3), got {matrix.shape}")
        return cls(
            Translation2d.from_array(se2.get_position(matrix)),
            Rotation2d.from_matrix(se2.get_rotation(matrix)),
        )

    # Convenience helpers
    @property
    def x(self) -> Scalar:
        return self.translation.x

    @property
    def y(self) -> Scalar:
        return self.translation.y

    def to_matrix(self) -> Array:
        return se2.from_position_and_rotation(self.translation.to_array(), self.rotation.to_matrix())

    # Scaling
    def times(self, scalar: Scalar) -> "Pose2d":
        """Scale translation component-wise and rotation angle by *scalar*."""
        return Pose2d(self.translation.times(scalar), self.rotation.times(scalar))

    def div(self, scalar: Scalar) -> "Pose2d":
        # IEEE semantics: div(0) gives inf / nan components, no exception
        return self.times(jnp.divide(1.0, scalar))

    # Rotations
    def rotate_by(self, rotation: Rotation2d) -> "Pose2d":
        """Rotate the whole pose about the origin."""
        return Pose2d(self.translation.rotate_by(rotation), self.rotation.rotate_by(rotation))

    def rotate_around(self, point: Translation2d, rotation: Rotation2d) -> "Pose2d":
        """Rotate the whole pose about *point*."""
        return Pose2d(self.translation.rotate_around(point, rotation), self.rotation.rotate_by(rotation))

    # Rigid-body algebra
    def transform_by(self, other: "Pose2d") -> "Pose2d":
        """Self ∘ other (move by *other* expressed in this pose's frame)."""
        return Pose2d(
            self.translation.plus(other.translation.rotate_by(self.rotation)),
            self.rotation.rotate_by(other.rotation),
        )

    def inverse(self) -> "Pose2d":
        rotation = self.rotation.inverse()
        return Pose2d((-self.translation).rotate_by(rotation), rotation)

    def relative_to(self, other: "Pose2d") -> "Pose2d":
        """This pose expressed in the frame of *other*."""
        return other.inverse().transform_by(self)

    # Operators
    def __mul__(self, scalar: Scalar) -> "Pose2d":
        return self.times(scalar)

    def __truediv__(self, scalar: Scalar) -> "Pose2d":
        return self.div(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pose2d):
            return NotImplemented
        return self.translation == other.translation and self.rotation == other.rotation

    def __hash__(self) -> int:
        return hash((self.translation, self.rotation))

    def __str__(self) -> str:
        return f"Pose2d({self.translation}, {self.rotation})"


Pose2d.ZERO = Pose2d()
