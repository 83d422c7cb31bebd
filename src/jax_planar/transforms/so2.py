"""SO(2) Lie group operations in JAX.

This module implements planar rotations using angles and 2x2 rotation
matrices. All functions are pure, JIT-able, and operate on JAX arrays.
"""

import jax
import jax.numpy as jnp

Array = jax.Array


def exp(angle: Array) -> Array:
    """
    SO(2) exponential map: convert angle to rotation matrix.

    Args:
        angle: (...) array of angles in radians

    Returns:
        (..., 2, 2) array of rotation matrices
    """
    angle = jnp.asarray(angle)
    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.stack([
        jnp.stack([c, -s], axis=-1),
        jnp.stack([s, c], axis=-1)
    ], axis=-2)


def log(R: Array) -> Array:
    """
    SO(2) logarithm map: convert rotation matrix to angle.

    This is the inverse of exp() up to full turns.

    Args:
        R: (..., 2, 2) array of rotation matrices

    Returns:
        (...) array of angles in radians, in (-pi, pi]
    """
    return jnp.arctan2(R[..., 1, 0], R[..., 0, 0])


def multiply(R1: Array, R2: Array) -> Array:
    """
    Multiply two rotation matrices.

    Args:
        R1: (..., 2, 2) first rotation matrix
        R2: (..., 2, 2) second rotation matrix

    Returns:
        (..., 2, 2) result of R1 @ R2
    """
    return jnp.matmul(R1, R2)


def inverse(R: Array) -> Array:
    """
    Compute inverse of rotation matrix.

    For rotation matrices, the inverse is simply the transpose.

    Args:
        R: (..., 2, 2) rotation matrix

    Returns:
        (..., 2, 2) inverse rotation matrix
    """
    return jnp.swapaxes(R, -1, -2)


def apply(R: Array, v: Array) -> Array:
    """
    Apply rotation to vector(s).

    Args:
        R: (..., 2, 2) rotation matrix
        v: (..., 2) or (..., N, 2) vector(s) to rotate

    Returns:
        (..., 2) or (..., N, 2) rotated vector(s)
    """
    if v.ndim == R.ndim - 1:  # Single vector case
        return jnp.einsum('...ij,...j->...i', R, v)
    else:  # Multiple vectors case
        return jnp.einsum('...ij,...nj->...ni', R, v)


def wrap_angle(angle: Array) -> Array:
    """
    Wrap angle(s) into [-pi, pi].

    Subtracts the nearest multiple of 2*pi, so integer multiples of a
    full turn map exactly to zero.

    Args:
        angle: (...) array of angles in radians

    Returns:
        (...) array of wrapped angles
    """
    two_pi = 2.0 * jnp.pi
    return angle - two_pi * jnp.round(angle / two_pi)
