"""Accuracy measures for low-rank kernel approximations."""

import jax.numpy as jnp
from jaxtyping import Array, Float

from ..data.formats import as_dataset
from ..errors import InvalidArgumentError
from ..kernels.base import Kernel, pairwise


def full_kernel_matrix(
    data: Float[Array, "n d"],
    kernel: Kernel
) -> Float[Array, "n n"]:
    """
    Exact n×n kernel matrix of a dataset.
    
    Only practical for small n; used as the reference for error measures.
    """
    X = as_dataset(data)
    return pairwise(kernel.evaluate, X, X)


def _kernel_and_factor(data, kernel, factor):
    K = full_kernel_matrix(data, kernel)
    G = jnp.asarray(factor)
    if G.ndim != 2 or G.shape[0] != K.shape[0]:
        raise InvalidArgumentError(
            f"Factor of shape {G.shape} does not match a dataset of {K.shape[0]} points"
        )
    return K, G


def approximation_error(
    data: Float[Array, "n d"],
    kernel: Kernel,
    factor: Float[Array, "n r"],
    relative: bool = True
) -> float:
    """
    Frobenius norm of K - G Gᵀ.
    
    Parameters:
        data: Dataset, shape (n, d)
        kernel: Kernel the factor approximates
        factor: Low-rank factor G, shape (n, r)
        relative: Divide by the Frobenius norm of K
    
    Returns:
        Approximation error
    """
    K, G = _kernel_and_factor(data, kernel, factor)
    error = jnp.linalg.norm(K - G @ G.T)
    if relative:
        norm = jnp.linalg.norm(K)
        if norm == 0:
            return float(error)
        error = error / norm
    return float(error)


def max_abs_error(
    data: Float[Array, "n d"],
    kernel: Kernel,
    factor: Float[Array, "n r"]
) -> float:
    """Largest entrywise deviation between K and G Gᵀ."""
    K, G = _kernel_and_factor(data, kernel, factor)
    return float(jnp.max(jnp.abs(K - G @ G.T)))
