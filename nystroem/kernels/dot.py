"""Inner-product kernels: linear, polynomial, hyperbolic tangent and cosine."""

import jax.numpy as jnp
from jaxtyping import Array, Float

from .base import PairwiseKernel


class LinearKernel(PairwiseKernel):
    """
    Linear kernel.
    
    k(x, y) = <x, y>
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        return jnp.dot(x, y)


class PolynomialKernel(PairwiseKernel):
    """
    Polynomial kernel.
    
    k(x, y) = (<x, y> + offset)^degree
    
    Parameters:
        degree: Polynomial degree
        offset: Constant added to the inner product
    """
    
    def __init__(self, degree: float = 2.0, offset: float = 0.0):
        # integral degrees stay exact for negative inner products
        self._degree = int(degree) if float(degree).is_integer() else float(degree)
        self._offset = float(offset)
    
    @property
    def degree(self) -> float:
        return self._degree
    
    @property
    def offset(self) -> float:
        return self._offset
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        return (jnp.dot(x, y) + self._offset) ** self._degree


class HyperbolicTangentKernel(PairwiseKernel):
    """
    Hyperbolic tangent (sigmoid) kernel.
    
    k(x, y) = tanh(scale * <x, y> + offset)
    
    Not positive semi-definite for every parameter choice; the
    reconstruction drops components that fall below the zero threshold.
    """
    
    def __init__(self, scale: float = 1.0, offset: float = 0.0):
        self._scale = float(scale)
        self._offset = float(offset)
    
    @property
    def scale(self) -> float:
        return self._scale
    
    @property
    def offset(self) -> float:
        return self._offset
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        return jnp.tanh(self._scale * jnp.dot(x, y) + self._offset)


class CosineKernel(PairwiseKernel):
    """
    Cosine similarity kernel.
    
    k(x, y) = <x, y> / (||x|| ||y||), and 0 when either point is zero.
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        denominator = jnp.linalg.norm(x) * jnp.linalg.norm(y)
        safe = jnp.where(denominator == 0, 1.0, denominator)
        return jnp.where(denominator == 0, 0.0, jnp.dot(x, y) / safe)
