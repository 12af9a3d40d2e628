"""High-level API for Nystroem kernel approximation."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from jaxtyping import Array, Float

from .approximation.nystroem import NystroemMethod
from .approximation.reconstruction import DegeneracyPolicy
from .errors import InvalidArgumentError
from .kernels.base import PairwiseKernel
from .kernels.registry import make_kernel
from .selection.registry import make_policy


@dataclass
class Nystroem:
    """
    Name-configured interface to the Nystroem approximation.
    
    Example usage:
    
        approx = Nystroem(
            kernel="gaussian",
            rank=100,
            sampling="kmeans",
            kernel_params={"sigma": 2.0},
            seed=0,
        )
        G = approx.approximate(X)          # (n, 100) factor
        K = approx.approximate_kernel(X)   # (n, n), equals G @ G.T
    
    Parameters:
        kernel: Kernel name: linear, polynomial, hyptan, cosine, gaussian,
            laplacian or epanechnikov
        rank: Number of landmarks
        sampling: Landmark selection: kmeans, random or ordered
        kernel_params: Keyword arguments for the kernel
        seed: Random seed for random and kmeans sampling
        kmeans_max_iter: Lloyd iterations for kmeans sampling
        rtol: Relative zero threshold for mini-kernel singular values
        on_degenerate: "drop" or "raise" for degenerate singular values
        batch_size: Dataset rows per semi-kernel chunk
    """
    kernel: str = "gaussian"
    rank: int = 10
    sampling: str = "kmeans"
    kernel_params: Dict[str, Any] = field(default_factory=dict)
    seed: Optional[int] = None
    kmeans_max_iter: int = 5
    rtol: Optional[float] = None
    on_degenerate: DegeneracyPolicy = "drop"
    batch_size: Optional[int] = None
    
    _kernel: Optional[PairwiseKernel] = field(default=None, init=False, repr=False)
    _policy: Any = field(default=None, init=False, repr=False)
    
    def __post_init__(self):
        """Initialize kernel and selection policy."""
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank <= 0:
            raise InvalidArgumentError(f"rank must be a positive integer, got {self.rank!r}")
        if self.on_degenerate not in ("drop", "raise"):
            raise InvalidArgumentError(
                f"on_degenerate must be 'drop' or 'raise', got {self.on_degenerate!r}"
            )
        
        self._kernel = make_kernel(self.kernel, **self.kernel_params)
        
        if self.sampling == "ordered":
            self._policy = make_policy("ordered")
        elif self.sampling == "random":
            self._policy = make_policy("random", seed=self.seed)
        else:
            self._policy = make_policy(
                self.sampling, max_iter=self.kmeans_max_iter, seed=self.seed
            )
    
    def method(self, data: Float[Array, "n d"]) -> NystroemMethod:
        """Configured NystroemMethod for a dataset."""
        return NystroemMethod(
            data=data,
            kernel=self._kernel,
            rank=self.rank,
            selection=self._policy,
            rtol=self.rtol,
            on_degenerate=self.on_degenerate,
            batch_size=self.batch_size,
        )
    
    def approximate(self, data: Float[Array, "n d"]) -> Float[Array, "n rank"]:
        """
        Low-rank factor G of the dataset's kernel matrix.
        
        Parameters:
            data: Dataset, shape (n, d)
        
        Returns:
            Factor of shape (n, rank) with G @ G.T ≈ K
        """
        return self.method(data).apply()
    
    def approximate_kernel(self, data: Float[Array, "n d"]) -> Float[Array, "n n"]:
        """Approximate kernel matrix G @ G.T (n×n; only for moderate n)."""
        G = self.approximate(data)
        return G @ G.T
