"""Shared fixtures for tests."""

import jax

# Exactness properties are checked to 1e-6 and tighter
jax.config.update("jax_enable_x64", True)

import pytest
import jax.numpy as jnp
import jax.random as random

from nystroem.kernels.dot import LinearKernel
from nystroem.kernels.rbf import GaussianKernel


@pytest.fixture
def rng_key():
    """Random number generator key."""
    return random.PRNGKey(42)


@pytest.fixture
def small_data(rng_key):
    """Five uniform points in five dimensions."""
    return random.uniform(rng_key, (5, 5))


@pytest.fixture
def sample_data(rng_key):
    """Forty points in three dimensions."""
    key, _ = random.split(rng_key)
    return random.normal(key, (40, 3))


@pytest.fixture
def linear_kernel():
    """Linear kernel for testing."""
    return LinearKernel()


@pytest.fixture
def gaussian_kernel():
    """Gaussian kernel for testing."""
    return GaussianKernel(sigma=1.0)


@pytest.fixture
def rank_deficient_data():
    """Three points spanning only two dimensions."""
    return jnp.array([
        [1.0, 0.0],
        [0.0, 1.0],
        [1.0, 1.0],
    ])
