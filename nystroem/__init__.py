"""
nystroem - Nystroem low-rank approximation of kernel matrices

A Python/JAX implementation of landmark-based kernel matrix approximation:
K ≈ G Gᵀ with an n×rank factor G.
"""

__version__ = "0.1.0"

# Errors
from .errors import (
    NystroemError,
    InvalidArgumentError,
    ConvergenceError,
    NumericalDegeneracyError,
)

# Data structures
from .data.formats import LandmarkIndices, LandmarkPoints, LandmarkSet

# Kernels
from .kernels import (
    Kernel,
    LinearKernel,
    PolynomialKernel,
    HyperbolicTangentKernel,
    CosineKernel,
    GaussianKernel,
    LaplacianKernel,
    EpanechnikovKernel,
    make_kernel,
)

# Landmark selection
from .selection import (
    PointSelectionPolicy,
    OrderedSelection,
    RandomSelection,
    KMeansSelection,
    make_policy,
)

# Approximation
from .approximation import (
    KernelBlocks,
    build_blocks,
    ReconstructionDiagnostics,
    reconstruct,
    NystroemMethod,
)

# High-level API
from .api import Nystroem

__all__ = [
    # Version
    "__version__",
    # Errors
    "NystroemError",
    "InvalidArgumentError",
    "ConvergenceError",
    "NumericalDegeneracyError",
    # Data structures
    "LandmarkIndices",
    "LandmarkPoints",
    "LandmarkSet",
    # Kernels
    "Kernel",
    "LinearKernel",
    "PolynomialKernel",
    "HyperbolicTangentKernel",
    "CosineKernel",
    "GaussianKernel",
    "LaplacianKernel",
    "EpanechnikovKernel",
    "make_kernel",
    # Selection
    "PointSelectionPolicy",
    "OrderedSelection",
    "RandomSelection",
    "KMeansSelection",
    "make_policy",
    # Approximation
    "KernelBlocks",
    "build_blocks",
    "ReconstructionDiagnostics",
    "reconstruct",
    "NystroemMethod",
    # High-level API
    "Nystroem",
]
