"""Benchmark Nystroem approximation against the exact kernel matrix."""

import time
import jax.random as random
from nystroem.approximation.nystroem import NystroemMethod
from nystroem.kernels.rbf import GaussianKernel
from nystroem.selection import KMeansSelection, OrderedSelection, RandomSelection
from nystroem.utils.validation import approximation_error, full_kernel_matrix


def benchmark_exact_kernel(n_samples: int = 1000, n_features: int = 10):
    """Benchmark exact Gaussian kernel matrix construction."""
    key = random.PRNGKey(42)
    X = random.normal(key, (n_samples, n_features))
    
    kernel = GaussianKernel(sigma=1.0)
    
    # Warm up
    full_kernel_matrix(X, kernel).block_until_ready()
    
    start = time.time()
    full_kernel_matrix(X, kernel).block_until_ready()
    elapsed = time.time() - start
    
    print(f"Exact kernel: {n_samples}x{n_samples} matrix, {n_features} features")
    print(f"Time: {elapsed:.4f} seconds")
    
    return elapsed


def benchmark_nystroem(
    n_samples: int = 1000,
    n_features: int = 10,
    rank: int = 100,
    selection=None
):
    """Benchmark one Nystroem factorization and report its error."""
    key = random.PRNGKey(42)
    X = random.normal(key, (n_samples, n_features))
    
    kernel = GaussianKernel(sigma=3.0)
    method = NystroemMethod(X, kernel, rank, selection=selection or RandomSelection(seed=0))
    
    # Warm up
    method.apply().block_until_ready()
    
    start = time.time()
    G = method.apply().block_until_ready()
    elapsed = time.time() - start
    
    error = approximation_error(X, kernel, G)
    print(f"Nystroem ({method.selection!r}): rank {rank}, {n_samples} points")
    print(f"Time: {elapsed:.4f} seconds, relative error: {error:.3e}")
    
    return elapsed, error


def compare_selection_policies(n_samples: int = 1000, rank: int = 100):
    """Compare selection policies at a fixed rank."""
    print("=" * 60)
    print("Selection policy comparison")
    print("=" * 60)
    
    for policy in (OrderedSelection(), RandomSelection(seed=0), KMeansSelection(seed=0)):
        benchmark_nystroem(n_samples=n_samples, rank=rank, selection=policy)
        print("-" * 60)


def compare_nystroem_vs_exact():
    """Compare Nystroem vs exact kernel construction time."""
    sizes = [500, 1000, 2000, 4000]
    
    print("=" * 60)
    print("Nystroem vs Exact Kernel Comparison")
    print("=" * 60)
    
    for n in sizes:
        print(f"\nSize: {n}x{n}")
        print("-" * 60)
        
        exact_time = benchmark_exact_kernel(n_samples=n)
        nystroem_time, _ = benchmark_nystroem(n_samples=n, rank=100)
        
        speedup = exact_time / nystroem_time
        print(f"Speedup: {speedup:.2f}x")


if __name__ == "__main__":
    compare_nystroem_vs_exact()
    compare_selection_policies()
