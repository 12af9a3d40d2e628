"""Landmark selection policy protocol and shared argument checks."""

import numbers
from typing import Protocol, runtime_checkable

from jaxtyping import Array, Float

from ..data.formats import LandmarkSet
from ..errors import InvalidArgumentError


@runtime_checkable
class PointSelectionPolicy(Protocol):
    """Protocol for strategies that choose the landmarks of an approximation."""
    
    def select(
        self,
        data: Float[Array, "n d"],
        rank: int
    ) -> LandmarkSet:
        """
        Choose `rank` landmarks for the dataset.
        
        Parameters:
            data: Dataset, shape (n, d)
            rank: Number of landmarks
        
        Returns:
            LandmarkIndices into `data`, or synthesized LandmarkPoints
        """
        ...


def check_rank(rank: int, n_points: int, allow_exceeding: bool = False) -> int:
    """
    Validate a requested landmark count against the dataset size.
    
    Parameters:
        rank: Requested number of landmarks
        n_points: Number of points in the dataset
        allow_exceeding: Skip the `rank <= n_points` check (clustering-based
            selection reports that case as a convergence failure instead)
    
    Returns:
        The rank as a plain int
    """
    if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
        raise InvalidArgumentError(f"rank must be an integer, got {rank!r}")
    rank = int(rank)
    if rank <= 0:
        raise InvalidArgumentError(f"rank must be positive, got {rank}")
    if n_points == 0:
        raise InvalidArgumentError("Dataset has zero points")
    if not allow_exceeding and rank > n_points:
        raise InvalidArgumentError(
            f"rank ({rank}) cannot exceed the number of points ({n_points})"
        )
    return rank
