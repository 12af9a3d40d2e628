"""Kernel lookup by name."""

from typing import Dict, Type

from .base import PairwiseKernel
from .dot import CosineKernel, HyperbolicTangentKernel, LinearKernel, PolynomialKernel
from .rbf import EpanechnikovKernel, GaussianKernel, LaplacianKernel
from ..errors import InvalidArgumentError


KERNELS: Dict[str, Type[PairwiseKernel]] = {
    "linear": LinearKernel,
    "polynomial": PolynomialKernel,
    "hyptan": HyperbolicTangentKernel,
    "cosine": CosineKernel,
    "gaussian": GaussianKernel,
    "laplacian": LaplacianKernel,
    "epanechnikov": EpanechnikovKernel,
}


def make_kernel(name: str, **params) -> PairwiseKernel:
    """
    Instantiate a kernel from its name.

    Parameters:
        name: One of the keys of `KERNELS`
        **params: Keyword arguments for the kernel constructor
            (e.g. ``sigma`` for the radial kernels, ``degree`` and ``offset``
            for the polynomial kernel)

    Returns:
        Kernel instance
    """
    try:
        kernel_cls = KERNELS[name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown kernel '{name}'; expected one of {sorted(KERNELS)}"
        ) from None
    try:
        return kernel_cls(**params)
    except TypeError as e:
        raise InvalidArgumentError(f"Invalid parameters for kernel '{name}': {e}") from e
