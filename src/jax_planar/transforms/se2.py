"""SE(2) rigid-body transforms implemented with JAX.

This module implements planar rigid body transforms using 3x3 homogeneous
matrices. All functions are pure, JIT-able, and operate on JAX arrays.
"""

import jax
import jax.numpy as jnp

Array = jax.Array


def from_position_and_rotation(p: Array, R: Array) -> Array:
    """
    Construct SE(2) transform from position and rotation.

    Args:
        p: (..., 2) position vector
        R: (..., 2, 2) rotation matrix

    Returns:
        (..., 3, 3) homogeneous transformation matrix
    """
    # Ensure consistent batch shapes
    batch_shape = jnp.broadcast_shapes(p.shape[:-1], R.shape[:-2])
    dtype = jnp.result_type(p, R)
    p = jnp.broadcast_to(p, batch_shape + (2,))
    R = jnp.broadcast_to(R, batch_shape + (2, 2))

    T = jnp.zeros(batch_shape + (3, 3), dtype=dtype)
    T = T.at[..., :2, :2].set(R)
    T = T.at[..., :2, 2].set(p)
    T = T.at[..., 2, 2].set(1.0)

    return T


def multiply(T1: Array, T2: Array) -> Array:
    """
    Multiply two SE(2) transformation matrices.

    Args:
        T1: (..., 3, 3) first transformation matrix
        T2: (..., 3, 3) second transformation matrix

    Returns:
        (..., 3, 3) result of T1 @ T2
    """
    return jnp.matmul(T1, T2)


def inverse(T: Array) -> Array:
    """
    Compute inverse of SE(2) transformation matrix.

    Uses the block structure for efficient computation:
    T^-1 = [[R^T, -R^T @ t], [0, 1]]

    Args:
        T: (..., 3, 3) transformation matrix

    Returns:
        (..., 3, 3) inverse transformation matrix
    """
    R = T[..., :2, :2]
    t = T[..., :2, 2]

    R_inv = jnp.swapaxes(R, -1, -2)
    t_inv = -jnp.einsum("...ij,...j->...i", R_inv, t)

    return from_position_and_rotation(t_inv, R_inv)


def apply(T: Array, points: Array) -> Array:
    """
    Apply SE(2) transformation to points.

    Args:
        T: (..., 3, 3) transformation matrix
        points: (..., 2) or (..., N, 2) points to transform

    Returns:
        (..., 2) or (..., N, 2) transformed points
    """
    ones = jnp.ones_like(points[..., 0:1])
    points_h = jnp.concatenate([points, ones], axis=-1)

    if points.ndim == T.ndim - 1:  # Single point case
        transformed_h = jnp.einsum("...ij,...j->...i", T, points_h)
    else:
        transformed_h = jnp.einsum("...ij,...nj->...ni", T, points_h)

    # The homogeneous coordinate is always 1 for SE(2) transforms
    return transformed_h[..., :2]


def get_position(T: Array) -> Array:
    """
    Extract position from SE(2) transformation matrix.

    Args:
        T: (..., 3, 3) transformation matrix

    Returns:
        (..., 2) position vector
    """
    return T[..., :2, 2]


def get_rotation(T: Array) -> Array:
    """
    Extract rotation matrix from SE(2) transformation matrix.

    Args:
        T: (..., 3, 3) transformation matrix

    Returns:
        (..., 2, 2) rotation matrix
    """
    return T[..., :2, :2]
