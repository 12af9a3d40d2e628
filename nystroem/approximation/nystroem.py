"""Nystroem low-rank approximation of a kernel matrix."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from jaxtyping import Array, Float

from .blocks import KernelBlocks, build_blocks
from .reconstruction import DegeneracyPolicy, ReconstructionDiagnostics, reconstruct
from ..data.formats import LandmarkSet, as_dataset
from ..errors import InvalidArgumentError
from ..kernels.base import Kernel
from ..selection.base import PointSelectionPolicy, check_rank
from ..selection.kmeans import KMeansSelection

logger = logging.getLogger(__name__)


@dataclass
class NystroemMethod:
    """
    Nystroem approximation of the kernel matrix of a dataset.
    
    Approximates the n×n kernel matrix K with K ≈ G Gᵀ, where G is an
    n×rank factor built from `rank` landmarks:
    
        1. the selection policy chooses the landmarks,
        2. the kernel is evaluated on landmark pairs (mini-kernel, rank×rank)
           and between every point and every landmark (semi-kernel, n×rank),
        3. G = semi @ U @ diag(1/sqrt(s)) @ Vᵀ from the SVD of the mini-kernel.
    
    The object holds only its configuration; every call to `apply()` selects
    landmarks afresh and builds new blocks.
    
    Example usage:
    
        method = NystroemMethod(X, GaussianKernel(sigma=0.5), rank=50)
        G = method.apply()          # shape (n, 50)
        K_approx = G @ G.T
    
    Parameters:
        data: Dataset, shape (n, d); rows are points
        kernel: Pairwise kernel exposing `evaluate(x, y)`
        rank: Number of landmarks, 1 <= rank <= n
        selection: Landmark selection policy (default: k-means centroids)
        rtol: Relative zero threshold for mini-kernel singular values
        on_degenerate: "drop" degenerate components or "raise"
            NumericalDegeneracyError
        batch_size: Dataset rows per semi-kernel chunk (None: all at once)
        observer: Optional callback receiving ReconstructionDiagnostics
    """
    data: Float[Array, "n d"] = field(repr=False)
    kernel: Kernel
    rank: int
    selection: PointSelectionPolicy = field(default_factory=KMeansSelection)
    rtol: Optional[float] = None
    on_degenerate: DegeneracyPolicy = "drop"
    batch_size: Optional[int] = None
    observer: Optional[Callable[[ReconstructionDiagnostics], None]] = field(
        default=None, repr=False
    )
    
    def __post_init__(self):
        """Validate the configuration."""
        self.data = as_dataset(self.data)
        self.rank = check_rank(self.rank, self.n_points)
        if not callable(getattr(self.kernel, "evaluate", None)):
            raise InvalidArgumentError("kernel must provide an evaluate(x, y) method")
        if not callable(getattr(self.selection, "select", None)):
            raise InvalidArgumentError("selection must provide a select(data, rank) method")
        if self.on_degenerate not in ("drop", "raise"):
            raise InvalidArgumentError(
                f"on_degenerate must be 'drop' or 'raise', got {self.on_degenerate!r}"
            )
        if self.batch_size is not None and self.batch_size <= 0:
            raise InvalidArgumentError("batch_size must be positive")
    
    @property
    def n_points(self) -> int:
        """Number of points in the dataset."""
        return int(self.data.shape[0])
    
    def select_landmarks(self) -> LandmarkSet:
        """Run the selection policy once."""
        landmarks = self.selection.select(self.data, self.rank)
        if landmarks.rank != self.rank:
            raise InvalidArgumentError(
                f"{self.selection!r} returned {landmarks.rank} landmarks, expected {self.rank}"
            )
        return landmarks
    
    def blocks(self) -> KernelBlocks:
        """Select landmarks and build the mini-kernel and semi-kernel."""
        return build_blocks(
            self.data,
            self.kernel,
            self.select_landmarks(),
            rank=self.rank,
            batch_size=self.batch_size,
        )
    
    def apply(self) -> Float[Array, "n rank"]:
        """
        Compute the low-rank factor.
        
        Returns:
            Factor G of shape (n, rank) with G @ G.T ≈ K
        """
        logger.debug(
            "Nystroem approximation: n=%d, rank=%d, selection=%r",
            self.n_points, self.rank, self.selection,
        )
        mini, semi = self.blocks()
        return reconstruct(
            mini,
            semi,
            rtol=self.rtol,
            on_degenerate=self.on_degenerate,
            observer=self.observer,
        )
