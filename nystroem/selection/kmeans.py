"""Clustering-based landmark selection with k-means centroids."""

import logging
from typing import Optional

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float
from sklearn.cluster import KMeans

from .base import check_rank
from ..data.formats import LandmarkPoints
from ..errors import ConvergenceError

logger = logging.getLogger(__name__)


class KMeansSelection:
    """
    Use the centroids of a k-means clustering as landmarks.
    
    The centroids are synthesized points, generally not rows of the dataset,
    so the result is a LandmarkPoints set.
    Only a short Lloyd run is made by default.
    
    Parameters:
        max_iter: Maximum Lloyd iterations per k-means run
        n_init: Number of k-means restarts (best inertia is kept)
        seed: Random seed for centroid initialization; None for a fresh draw
            on every call
    """
    
    def __init__(
        self,
        max_iter: int = 5,
        n_init: int = 1,
        seed: Optional[int] = None
    ):
        if max_iter <= 0:
            raise ValueError("max_iter must be positive")
        if n_init <= 0:
            raise ValueError("n_init must be positive")
        self.max_iter = max_iter
        self.n_init = n_init
        self.seed = seed
    
    def select(
        self,
        data: Float[Array, "n d"],
        rank: int
    ) -> LandmarkPoints:
        rank = check_rank(rank, data.shape[0], allow_exceeding=True)
        X = np.asarray(data, dtype=np.float64)
        
        n_distinct = np.unique(X, axis=0).shape[0]
        if n_distinct < rank:
            raise ConvergenceError(
                f"Cannot form {rank} clusters from {n_distinct} distinct points"
            )
        
        kmeans = KMeans(
            n_clusters=rank,
            max_iter=self.max_iter,
            n_init=self.n_init,
            random_state=self.seed,
        )
        kmeans.fit(X)
        
        n_clusters_found = np.unique(kmeans.labels_).size
        if n_clusters_found < rank:
            raise ConvergenceError(
                f"k-means assigned points to only {n_clusters_found} of {rank} clusters"
            )
        centroids = kmeans.cluster_centers_
        if not np.all(np.isfinite(centroids)):
            raise ConvergenceError("k-means produced non-finite centroids")
        if np.unique(centroids, axis=0).shape[0] < rank:
            raise ConvergenceError(
                f"k-means produced fewer than {rank} distinct centroids"
            )
        
        logger.debug(
            "k-means selection: %d centroids after %d iterations (inertia %.6g)",
            rank, kmeans.n_iter_, kmeans.inertia_,
        )
        return LandmarkPoints(jnp.asarray(centroids, dtype=data.dtype))
    
    def __repr__(self) -> str:
        return (
            f"KMeansSelection(max_iter={self.max_iter}, "
            f"n_init={self.n_init}, seed={self.seed})"
        )
