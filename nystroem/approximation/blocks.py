"""Construction of the reduced kernel blocks (mini-kernel and semi-kernel)."""

import logging
from typing import NamedTuple, Optional

import jax.numpy as jnp
from jaxtyping import Array, Float

from ..data.formats import LandmarkSet, as_dataset, landmark_coordinates
from ..errors import InvalidArgumentError
from ..kernels.base import Kernel, pairwise

logger = logging.getLogger(__name__)


class KernelBlocks(NamedTuple):
    """Reduced kernel blocks of one approximation."""
    mini: Float[Array, "rank rank"]  # k(landmark_i, landmark_j)
    semi: Float[Array, "n rank"]  # k(point_i, landmark_j)


def build_blocks(
    data: Float[Array, "n d"],
    kernel: Kernel,
    landmarks: LandmarkSet,
    rank: Optional[int] = None,
    batch_size: Optional[int] = None
) -> KernelBlocks:
    """
    Evaluate the kernel on landmark pairs and on (point, landmark) pairs.
    
    Every cell of both blocks is evaluated exactly once, independently of
    all other cells, by vectorizing `kernel.evaluate` over the output grid.
    Synthesized landmark points are not retained once the blocks exist.
    
    Parameters:
        data: Dataset, shape (n, d)
        kernel: Pairwise kernel exposing `evaluate(x, y)`
        landmarks: Index-based or synthesized landmark set
        rank: Expected number of landmarks (checked when given)
        batch_size: Number of dataset rows per semi-kernel chunk;
            None evaluates all rows at once
    
    Returns:
        KernelBlocks with mini of shape (rank, rank) and semi of shape (n, rank)
    """
    X = as_dataset(data)
    if rank is not None and rank != landmarks.rank:
        raise InvalidArgumentError(
            f"Landmark set has {landmarks.rank} points, expected rank {rank}"
        )
    if landmarks.rank == 0:
        raise InvalidArgumentError("Landmark set is empty")
    if batch_size is not None and batch_size <= 0:
        raise InvalidArgumentError("batch_size must be positive")
    
    L = landmark_coordinates(X, landmarks)
    
    mini = pairwise(kernel.evaluate, L, L)
    
    n = X.shape[0]
    if batch_size is None or batch_size >= n:
        semi = pairwise(kernel.evaluate, X, L)
    else:
        chunks = [
            pairwise(kernel.evaluate, X[start:start + batch_size], L)
            for start in range(0, n, batch_size)
        ]
        semi = jnp.concatenate(chunks, axis=0)
    
    logger.debug(
        "Built kernel blocks: mini %s, semi %s (%d kernel evaluations)",
        mini.shape, semi.shape, mini.size + semi.size,
    )
    return KernelBlocks(mini=mini, semi=semi)
