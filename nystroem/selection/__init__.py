"""Landmark selection policies."""

from .base import PointSelectionPolicy, check_rank
from .kmeans import KMeansSelection
from .ordered import OrderedSelection
from .uniform import RandomSelection
from .registry import POLICIES, make_policy

__all__ = [
    "PointSelectionPolicy",
    "check_rank",
    "OrderedSelection",
    "RandomSelection",
    "KMeansSelection",
    "POLICIES",
    "make_policy",
]
