"""Tests for the transforms module."""

import hypothesis
import jax
import jax.numpy as jnp
import numpy as np
from hypothesis import given, settings
from hypothesis import strategies as st

from jax_planar.transforms import se2, so2

# Use hypothesis profile for CI
hypothesis.settings.register_profile("ci", max_examples=10, deadline=None)


# SO(2) Lie Group Tests
def test_so2_exp_identity():
    """Test SO(2) exp with zero angle gives identity."""
    R = so2.exp(0.0)
    np.testing.assert_allclose(R, jnp.eye(2), rtol=1e-12, atol=1e-12)


def test_so2_exp_quarter_turn():
    """Test SO(2) exp for 90° counterclockwise."""
    R = so2.exp(jnp.pi / 2)
    expected = jnp.array([[0.0, -1.0], [1.0, 0.0]])
    np.testing.assert_allclose(R, expected, rtol=1e-12, atol=1e-12)


def test_so2_log_identity():
    """Test SO(2) log with identity matrix gives zero angle."""
    angle = so2.log(jnp.eye(2))
    np.testing.assert_allclose(angle, 0.0, atol=1e-12)


def test_so2_log_range():
    """Test SO(2) log wraps angles into (-pi, pi]."""
    angle = so2.log(so2.exp(3 * jnp.pi / 2))
    np.testing.assert_allclose(angle, -jnp.pi / 2, atol=1e-12)


def test_so2_multiply_adds_angles():
    """Test SO(2) multiplication is angle addition."""
    R = so2.multiply(so2.exp(0.3), so2.exp(0.5))
    np.testing.assert_allclose(R, so2.exp(0.8), rtol=1e-12, atol=1e-12)


def test_so2_inverse():
    """Test SO(2) inverse."""
    R = so2.exp(0.7)
    I = so2.multiply(R, so2.inverse(R))
    np.testing.assert_allclose(I, jnp.eye(2), rtol=1e-12, atol=1e-12)


def test_so2_apply():
    """Test SO(2) apply on single and multiple vectors."""
    R = so2.exp(jnp.pi / 2)

    v = jnp.array([1.0, 0.0])
    np.testing.assert_allclose(so2.apply(R, v), jnp.array([0.0, 1.0]), atol=1e-12)

    vs = jnp.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    expected = jnp.array([[0.0, 1.0], [-1.0, 0.0], [-1.0, 1.0]])
    np.testing.assert_allclose(so2.apply(R, vs), expected, atol=1e-12)


def test_so2_wrap_angle():
    """Test angle wrapping is exact for full turns."""
    assert so2.wrap_angle(2 * jnp.pi) == 0.0
    assert so2.wrap_angle(-4 * jnp.pi) == 0.0
    np.testing.assert_allclose(so2.wrap_angle(3 * jnp.pi / 2), -jnp.pi / 2, atol=1e-12)
    np.testing.assert_allclose(so2.wrap_angle(0.25), 0.25, atol=1e-15)


def test_so2_batch_operations():
    """Test SO(2) operations work with batched inputs."""
    batch_size = 5
    angles = jax.random.uniform(jax.random.PRNGKey(42), (batch_size,), minval=-3.0, maxval=3.0)

    R_batch = so2.exp(angles)
    angles_back = so2.log(R_batch)

    assert R_batch.shape == (batch_size, 2, 2)
    assert angles_back.shape == (batch_size,)
    np.testing.assert_allclose(angles, angles_back, rtol=1e-10, atol=1e-10)


def test_so2_jit_compatibility():
    """Test SO(2) functions are JIT compatible."""
    jitted_exp = jax.jit(so2.exp)
    jitted_log = jax.jit(so2.log)

    angle = jnp.array(0.4)
    np.testing.assert_allclose(jitted_log(jitted_exp(angle)), angle, atol=1e-12)


@given(st.floats(min_value=-3.0, max_value=3.0))
@settings(deadline=None)
def test_so2_log_inverts_exp(angle):
    """Test log(exp(a)) = a inside (-pi, pi)."""
    np.testing.assert_allclose(so2.log(so2.exp(angle)), angle, atol=1e-10)


# SE(2) Tests
def test_se2_from_position_and_rotation():
    """Test SE(2) construction from position and rotation."""
    T = se2.from_position_and_rotation(jnp.array([1.0, 2.0]), jnp.eye(2))

    expected = jnp.array([[1.0, 0.0, 1.0], [0.0, 1.0, 2.0], [0.0, 0.0, 1.0]])
    np.testing.assert_allclose(T, expected, rtol=1e-12, atol=1e-12)


def test_se2_from_position_and_rotation_broadcasts():
    """Test SE(2) construction broadcasts a single rotation over positions."""
    positions = jnp.array([[1.0, 0.0], [0.0, 1.0], [2.0, 2.0]])
    T = se2.from_position_and_rotation(positions, so2.exp(0.5))

    assert T.shape == (3, 3, 3)
    np.testing.assert_allclose(se2.get_position(T), positions, atol=1e-12)
    np.testing.assert_allclose(T[..., 2, :], jnp.tile(jnp.array([0.0, 0.0, 1.0]), (3, 1)), atol=1e-12)


def test_se2_multiply():
    """Test SE(2) multiplication of two translations."""
    T1 = se2.from_position_and_rotation(jnp.array([1.0, 0.0]), jnp.eye(2))
    T2 = se2.from_position_and_rotation(jnp.array([0.0, 1.0]), jnp.eye(2))

    T_combined = se2.multiply(T1, T2)
    np.testing.assert_allclose(se2.get_position(T_combined), jnp.array([1.0, 1.0]), atol=1e-12)


def test_se2_compose_with_rotation():
    """Test composition of a translation and a rotated transform."""
    t1 = se2.from_position_and_rotation(jnp.array([1.0, 0.0]), jnp.eye(2))
    t2 = se2.from_position_and_rotation(jnp.array([0.0, 1.0]), so2.exp(jnp.pi / 2))

    result = se2.multiply(t1, t2)
    transformed = se2.apply(result, jnp.array([1.0, 0.0]))

    np.testing.assert_allclose(transformed, jnp.array([1.0, 2.0]), atol=1e-12)


def test_se2_inverse():
    """Test SE(2) inverse."""
    T = se2.from_position_and_rotation(jnp.array([0.3, -1.2]), so2.exp(0.9))
    I = se2.multiply(T, se2.inverse(T))
    np.testing.assert_allclose(I, jnp.eye(3), rtol=1e-12, atol=1e-12)


def test_se2_apply_multiple_points():
    """Test SE(2) apply function with multiple points."""
    T = se2.from_position_and_rotation(jnp.array([1.0, 2.0]), jnp.eye(2))
    points = jnp.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])

    transformed = se2.apply(T, points)
    np.testing.assert_allclose(transformed, points + jnp.array([1.0, 2.0]), atol=1e-12)


def test_se2_get_position_rotation():
    """Test SE(2) position and rotation extraction."""
    p = jnp.array([1.0, 2.0])
    R = so2.exp(0.3)
    T = se2.from_position_and_rotation(p, R)

    np.testing.assert_allclose(se2.get_position(T), p, atol=1e-12)
    np.testing.assert_allclose(se2.get_rotation(T), R, atol=1e-12)


@given(st.integers(min_value=0, max_value=100))
@settings(deadline=None)
def test_se2_inverse_property(seed):
    """Test that applying T and then T^-1 gives the original points."""
    key1, key2, key3 = jax.random.split(jax.random.PRNGKey(seed), 3)

    batch_size = 5
    num_points = 10

    positions = jax.random.uniform(key1, (batch_size, 2), minval=-5.0, maxval=5.0)
    angles = jax.random.uniform(key2, (batch_size,), minval=-jnp.pi, maxval=jnp.pi)
    transforms = se2.from_position_and_rotation(positions, so2.exp(angles))
    inverse_transforms = jax.vmap(se2.inverse)(transforms)

    points = jax.random.uniform(key3, (num_points, 2), minval=-10.0, maxval=10.0)

    transformed = jax.vmap(lambda T: se2.apply(T, points))(transforms)
    back_to_original = jax.vmap(se2.apply)(inverse_transforms, transformed)

    original_batched = jnp.broadcast_to(points[None], (batch_size, num_points, 2))
    np.testing.assert_allclose(back_to_original, original_batched, rtol=1e-9, atol=1e-9)
