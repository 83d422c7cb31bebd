"""Planar translation value type.

Translation2d is a flax struct dataclass, so it is an immutable PyTree that
can be passed straight through jit, vmap and grad.
"""

from __future__ import annotations

import logging
from typing import Union

import jax
import jax.numpy as jnp
from flax import struct

from .rotation2d import Rotation2d

logger = logging.getLogger(__name__)

Array = jax.Array
Scalar = Union[float, Array]


@struct.dataclass
class Translation2d:
    """Immutable 2D vector from the origin.

    Attributes:
        x: The x component, a Python float or an array.
        y: The y component, same shape as ``x``.
    """
    x: Scalar = 0.0
    y: Scalar = 0.0

    @classmethod
    def from_polar(cls, distance: Scalar, angle: Rotation2d) -> "Translation2d":
        return cls(distance * angle.cos, distance * angle.sin)

    @classmethod
    def from_array(cls, array: Array) -> "Translation2d":
        """Build from a (..., 2) array of [x, y] components."""
        array = jnp.asarray(array)
        logger.debug("Translation2d.from_array: input shape %s", array.shape)
        if array.ndim < 1 or array.shape[-1] != 2:
            logger.error("Translation2d.from_array: bad shape %s", array.shape)
            raise ValueError(f"array must have shape (...,2), got {array.shape}")
        return cls(array[..., 0], array[..., 1])

    def to_array(self) -> Array:
        return jnp.stack([jnp.asarray(self.x), jnp.asarray(self.y)], axis=-1)

    @property
    def norm(self) -> Array:
        return jnp.hypot(self.x, self.y)

    @property
    def angle(self) -> Rotation2d:
        return Rotation2d.from_vector(self.x, self.y)

    def distance(self, other: "Translation2d") -> Array:
        return jnp.hypot(other.x - self.x, other.y - self.y)

    def plus(self, other: "Translation2d") -> "Translation2d":
        return Translation2d(self.x + other.x, self.y + other.y)

    def minus(self, other: "Translation2d") -> "Translation2d":
        return Translation2d(self.x - other.x, self.y - other.y)

    def times(self, scalar: Scalar) -> "Translation2d":
        return Translation2d(self.x * scalar, self.y * scalar)

    def div(self, scalar: Scalar) -> "Translation2d":
        return self.times(jnp.divide(1.0, scalar))

    def rotate_by(self, rotation: Rotation2d) -> "Translation2d":
        """Rotate the vector counterclockwise about the origin."""
        c, s = rotation.cos, rotation.sin
        return Translation2d(self.x * c - self.y * s, self.x * s + self.y * c)

    def rotate_around(self, point: "Translation2d", rotation: Rotation2d) -> "Translation2d":
        """Rotate the vector about *point* instead of the origin."""
        return self.minus(point).rotate_by(rotation).plus(point)

    def __add__(self, other: "Translation2d") -> "Translation2d":
        return self.plus(other)

    def __sub__(self, other: "Translation2d") -> "Translation2d":
        return self.minus(other)

    def __neg__(self) -> "Translation2d":
        return Translation2d(-self.x, -self.y)

    def __mul__(self, scalar: Scalar) -> "Translation2d":
        return self.times(scalar)

    def __truediv__(self, scalar: Scalar) -> "Translation2d":
        return self.div(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Translation2d):
            return NotImplemented
        return bool(jnp.all(self.x == other.x) & jnp.all(self.y == other.y))

    def __hash__(self) -> int:
        return hash((float(self.x), float(self.y)))

    def __str__(self) -> str:
        return f"Translation2d(x={self.x}, y={self.y})"


Translation2d.ZERO = Translation2d(0.0, 0.0)
