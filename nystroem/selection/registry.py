"""Landmark selection policy lookup by sampling-scheme name."""

from typing import Dict, Type

from .kmeans import KMeansSelection
from .ordered import OrderedSelection
from .uniform import RandomSelection
from ..errors import InvalidArgumentError


POLICIES: Dict[str, Type] = {
    "kmeans": KMeansSelection,
    "random": RandomSelection,
    "ordered": OrderedSelection,
}


def make_policy(name: str, **params):
    """
    Instantiate a selection policy from its sampling-scheme name.
    
    Parameters:
        name: "kmeans", "random" or "ordered"
        **params: Keyword arguments for the policy constructor
            (e.g. ``seed`` or ``max_iter``)
    
    Returns:
        PointSelectionPolicy instance
    """
    try:
        policy_cls = POLICIES[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown sampling scheme '{name}'; expected one of {sorted(POLICIES)}"
        ) from None
    try:
        return policy_cls(**params)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid parameters for sampling '{name}': {e}") from e
