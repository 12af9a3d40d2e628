"""Radial kernels: Gaussian (RBF), Laplacian and Epanechnikov."""

import jax.numpy as jnp
from jaxtyping import Array, Float

from .base import PairwiseKernel
from ..errors import InvalidArgumentError


def _squared_distance(x: Float[Array, "d"], y: Float[Array, "d"]) -> Float[Array, ""]:
    diff = x - y
    return jnp.dot(diff, diff)


class _RadialKernel(PairwiseKernel):
    """Shared bandwidth handling for distance-based kernels."""
    
    def __init__(self, sigma: float = 1.0):
        if sigma <= 0:
            raise InvalidArgumentError("sigma must be positive")
        self._sigma = float(sigma)
    
    @property
    def sigma(self) -> float:
        """Kernel bandwidth parameter."""
        return self._sigma


class GaussianKernel(_RadialKernel):
    """
    Radial Basis Function (Gaussian) kernel.
    
    k(x, y) = exp(-||x - y||² / (2σ²))
    
    Parameters:
        sigma: Bandwidth parameter (length scale)
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        return jnp.exp(-_squared_distance(x, y) / (2 * self._sigma ** 2))
    

class LaplacianKernel(_RadialKernel):
    """
    Laplacian kernel.
    
    k(x, y) = exp(-||x - y|| / σ)
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        distance = jnp.sqrt(_squared_distance(x, y))
        return jnp.exp(-distance / self._sigma)


class EpanechnikovKernel(_RadialKernel):
    """
    Epanechnikov kernel.
    
    k(x, y) = max(0, 1 - ||x - y||² / σ²)
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        return jnp.maximum(0.0, 1.0 - _squared_distance(x, y) / self._sigma ** 2)
