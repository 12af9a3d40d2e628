"""Ordered (first-k) landmark selection."""

import jax.numpy as jnp
from jaxtyping import Array, Float

from .base import check_rank
from ..data.formats import LandmarkIndices


class OrderedSelection:
    """
    Select the first `rank` points of the dataset, in their original order.
    
    Deterministic; intended for reproducible baselines and tests.
    """
    
    def select(
        self,
        data: Float[Array, "n d"],
        rank: int
    ) -> LandmarkIndices:
        rank = check_rank(rank, data.shape[0])
        return LandmarkIndices(jnp.arange(rank))
    
    def __repr__(self) -> str:
        return "OrderedSelection()"
