"""Core data structures: datasets and landmark sets."""

from dataclasses import dataclass
from typing import Union

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float, Int

from ..errors import InvalidArgumentError


def as_dataset(data) -> Float[Array, "n d"]:
    """
    Validate and convert a dataset to a JAX array.

    Points are rows: a dataset of n points in d dimensions has shape (n, d).

    Parameters:
        data: Array-like of shape (n, d)

    Returns:
        Floating point JAX array of shape (n, d)
    """
    X = jnp.asarray(data)
    if X.ndim != 2:
        raise InvalidArgumentError(
            f"Dataset must be 2-dimensional (n_points, n_features), got shape {X.shape}"
        )
    if X.shape[0] == 0:
        raise InvalidArgumentError("Dataset has zero points")
    if not jnp.issubdtype(X.dtype, jnp.floating):
        X = X.astype(jnp.result_type(float))
    return X


@dataclass(frozen=True)
class LandmarkIndices:
    """
    Landmarks given as rows of the dataset.

    Attributes:
        indices: Pairwise distinct, non-negative row indices, shape (rank,)
    """
    indices: Int[Array, "rank"]

    def __post_init__(self):
        idx = np.asarray(self.indices)
        if idx.ndim != 1:
            raise InvalidArgumentError(
                f"Landmark indices must be 1-dimensional, got shape {idx.shape}"
            )
        if idx.size > 0 and not np.issubdtype(idx.dtype, np.integer):
            raise InvalidArgumentError("Landmark indices must be integers")
        if np.any(idx < 0):
            raise InvalidArgumentError("Landmark indices must be non-negative")
        if np.unique(idx).size != idx.size:
            raise InvalidArgumentError("Landmark indices must be pairwise distinct")
        index_dtype = jnp.result_type(int)
        if idx.size > 0 and int(idx.max()) > np.iinfo(index_dtype).max:
            raise InvalidArgumentError(
                f"Landmark index {int(idx.max())} does not fit in {np.dtype(index_dtype).name}"
            )
        object.__setattr__(self, "indices", jnp.asarray(idx, dtype=index_dtype))

    @property
    def rank(self) -> int:
        """Number of landmarks."""
        return int(self.indices.shape[0])


@dataclass(frozen=True)
class LandmarkPoints:
    """
    Landmarks synthesized outside the dataset (e.g. cluster centroids).

    Attributes:
        points: Landmark coordinates, shape (rank, d)
    """
    points: Float[Array, "rank d"]

    def __post_init__(self):
        points = jnp.asarray(self.points)
        if points.ndim != 2:
            raise InvalidArgumentError(
                f"Landmark points must be 2-dimensional, got shape {points.shape}"
            )
        object.__setattr__(self, "points", points)

    @property
    def rank(self) -> int:
        """Number of landmarks."""
        return int(self.points.shape[0])


LandmarkSet = Union[LandmarkIndices, LandmarkPoints]


def landmark_coordinates(
    data: Float[Array, "n d"],
    landmarks: LandmarkSet
) -> Float[Array, "rank d"]:
    """
    Resolve a landmark set to the coordinates of its points.

    Parameters:
        data: Dataset, shape (n, d)
        landmarks: Index-based or synthesized landmarks

    Returns:
        Landmark coordinates, shape (rank, d)
    """
    if isinstance(landmarks, LandmarkIndices):
        n = data.shape[0]
        if landmarks.rank > 0 and int(jnp.max(landmarks.indices)) >= n:
            raise InvalidArgumentError(
                f"Landmark index out of range for a dataset of {n} points"
            )
        return data[landmarks.indices]
    if isinstance(landmarks, LandmarkPoints):
        if landmarks.points.shape[1] != data.shape[1]:
            raise InvalidArgumentError(
                f"Landmark points have {landmarks.points.shape[1]} features, "
                f"dataset has {data.shape[1]}"
            )
        return landmarks.points.astype(data.dtype)
    raise InvalidArgumentError(
        f"Expected LandmarkIndices or LandmarkPoints, got {type(landmarks).__name__}"
    )
