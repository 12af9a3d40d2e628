"""Data structures for datasets and landmark sets."""

from .formats import (
    LandmarkIndices,
    LandmarkPoints,
    LandmarkSet,
    as_dataset,
    landmark_coordinates,
)

__all__ = [
    "LandmarkIndices",
    "LandmarkPoints",
    "LandmarkSet",
    "as_dataset",
    "landmark_coordinates",
]
