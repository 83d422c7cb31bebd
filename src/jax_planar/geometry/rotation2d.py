"""Planar rotation value type implemented with JAX."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import jax
import jax.numpy as jnp
from jax.tree_util import register_pytree_node_class

from ..transforms import so2

logger = logging.getLogger(__name__)

Array = jax.Array
Scalar = Union[float, Array]


@register_pytree_node_class  # let Rotation2d work with jit / grad / vmap …
@dataclass(frozen=True)
class Rotation2d:
    """Immutable rotation in the plane, stored as an angle in radians.

    Counterclockwise is positive. The angle is kept exactly as given, so
    ``Rotation2d(0.0)`` and ``Rotation2d(2 * pi)`` point the same way but do
    not compare equal; use :meth:`is_close` or :meth:`normalized` when full
    turns should not matter.
    """
    radians: Scalar = 0.0

    # Constructors
    @classmethod
    def from_degrees(cls, degrees: Scalar) -> "Rotation2d":
        return cls(degrees * jnp.pi / 180.0)

    @classmethod
    def from_radians(cls, radians: Scalar) -> "Rotation2d":
        return cls(radians)

    @classmethod
    def from_rotations(cls, rotations: Scalar) -> "Rotation2d":
        return cls(rotations * 2.0 * jnp.pi)

    @classmethod
    def from_vector(cls, x: Scalar, y: Scalar) -> "Rotation2d":
        """Rotation pointing along the vector (x, y)."""
        return cls(jnp.arctan2(y, x))

    @classmethod
    def from_matrix(cls, matrix: Array) -> "Rotation2d":
        matrix = jnp.asarray(matrix)
        logger.debug("Rotation2d.from_matrix: input shape %s", matrix.shape)
        if matrix.ndim < 2 or matrix.shape[-2:] != (2, 2):
            logger.error("Rotation2d.from_matrix: bad shape %s", matrix.shape)
            raise ValueError(f"matrix must have shape (...,2,2), got {matrix.shape}")
        return cls(so2.log(matrix))

    # PyTree boiler-plate
    def tree_flatten(self):
        return (self.radians,), None

    @classmethod
    def tree_unflatten(cls, aux, children):
        (radians,) = children
        return cls(radians)

    # Accessors
    @property
    def heading(self) -> Scalar:
        return self.radians

    @property
    def degrees(self) -> Scalar:
        return self.radians * 180.0 / jnp.pi

    @property
    def rotations(self) -> Scalar:
        return self.radians / (2.0 * jnp.pi)

    @property
    def cos(self) -> Array:
        return jnp.cos(self.radians)

    @property
    def sin(self) -> Array:
        return jnp.sin(self.radians)

    @property
    def tan(self) -> Array:
        return jnp.tan(self.radians)

    # Basic operations
    def times(self, scalar: Scalar) -> "Rotation2d":
        """Scale the angle by *scalar*."""
        return Rotation2d(self.radians * scalar)

    def div(self, scalar: Scalar) -> "Rotation2d":
        return self.times(jnp.divide(1.0, scalar))

    def rotate_by(self, other: "Rotation2d") -> "Rotation2d":
        """Compose with *other*; planar composition is angle addition."""
        return Rotation2d(self.radians + other.radians)

    def minus(self, other: "Rotation2d") -> "Rotation2d":
        return Rotation2d(self.radians - other.radians)

    def inverse(self) -> "Rotation2d":
        return Rotation2d(-self.radians)

    def interpolate(self, end: "Rotation2d", t: Scalar) -> "Rotation2d":
        """Linear interpolation towards *end*; t=0 gives self, t=1 gives end."""
        return self.rotate_by(end.minus(self).times(t))

    def normalized(self) -> "Rotation2d":
        """Same direction with the angle wrapped into [-pi, pi]."""
        return Rotation2d(so2.wrap_angle(self.radians))

    def is_close(self, other: "Rotation2d", atol: float = 1e-9) -> bool:
        """Whether both rotations point the same way, ignoring full turns."""
        diff = so2.wrap_angle(self.radians - other.radians)
        return bool(jnp.all(jnp.abs(diff) <= atol))

    def to_matrix(self) -> Array:
        return so2.exp(self.radians)

    # Operators
    def __add__(self, other: "Rotation2d") -> "Rotation2d":
        return self.rotate_by(other)

    def __sub__(self, other: "Rotation2d") -> "Rotation2d":
        return self.minus(other)

    def __neg__(self) -> "Rotation2d":
        return self.inverse()

    def __mul__(self, scalar: Scalar) -> "Rotation2d":
        return self.times(scalar)

    def __truediv__(self, scalar: Scalar) -> "Rotation2d":
        return self.div(scalar)

    # Equality compares raw angles, no wrapping
    def __eq__(self, other) -> bool:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return bool(jnp.all(self.radians == other.radians))

    def __hash__(self) -> int:
        return hash(float(self.radians))

    def __str__(self) -> str:
        return f"Rotation2d(rad={self.radians}, deg={self.degrees})"


Rotation2d.ZERO = Rotation2d(0.0)
Rotation2d.CW_90DEG = Rotation2d(-jnp.pi / 2)
Rotation2d.CCW_90DEG = Rotation2d(jnp.pi / 2)
Rotation2d.DEG_180 = Rotation2d(jnp.pi)
Rotation2d.DEG_360 = Rotation2d.from_radians(2 * jnp.pi)

Rotation2d.CW_PI_2 = Rotation2d.CW_90DEG
Rotation2d.CCW_PI_2 = Rotation2d.CCW_90DEG
Rotation2d.PI = Rotation2d.DEG_180
Rotation2d.TWO_PI = Rotation2d.DEG_360
