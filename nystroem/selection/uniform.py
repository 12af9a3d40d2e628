"""Uniform random landmark selection."""

import threading
from typing import Optional

import jax.random as random
import numpy as np
from jaxtyping import Array, Float

from .base import check_rank
from ..data.formats import LandmarkIndices


class RandomSelection:
    """
    Select `rank` distinct points uniformly at random, without replacement.
    
    The policy owns a PRNG key that is split on every call, so repeated
    selections differ while the whole sequence stays reproducible for a
    fixed seed.
    
    Parameters:
        seed: Random seed; None draws a fresh seed from system entropy
    """
    
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int(np.random.SeedSequence().generate_state(1)[0])
        self._seed = seed
        self._key = random.PRNGKey(seed)
        self._lock = threading.Lock()
    
    @property
    def seed(self) -> int:
        """Seed the key stream was started from."""
        return self._seed
    
    def _next_key(self):
        with self._lock:
            self._key, subkey = random.split(self._key)
        return subkey
    
    def select(
        self,
        data: Float[Array, "n d"],
        rank: int
    ) -> LandmarkIndices:
        n = data.shape[0]
        rank = check_rank(rank, n)
        indices = random.choice(self._next_key(), n, shape=(rank,), replace=False)
        return LandmarkIndices(indices)
    
    def __repr__(self) -> str:
        return f"RandomSelection(seed={self._seed})"
