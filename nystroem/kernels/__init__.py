"""Kernel implementations for the Nystroem approximation."""

from .base import Kernel, PairwiseKernel, pairwise
from .dot import CosineKernel, HyperbolicTangentKernel, LinearKernel, PolynomialKernel
from .rbf import EpanechnikovKernel, GaussianKernel, LaplacianKernel
from .registry import KERNELS, make_kernel

__all__ = [
    "Kernel",
    "PairwiseKernel",
    "pairwise",
    "LinearKernel",
    "PolynomialKernel",
    "HyperbolicTangentKernel",
    "CosineKernel",
    "GaussianKernel",
    "LaplacianKernel",
    "EpanechnikovKernel",
    "KERNELS",
    "make_kernel",
]
