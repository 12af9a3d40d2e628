"""Base kernel protocols and interfaces."""

from functools import partial
from typing import Callable, Protocol, runtime_checkable

from jax import jit, vmap
from jaxtyping import Array, Float


@runtime_checkable
class Kernel(Protocol):
    """
    Protocol for pairwise kernel functions.
    
    `evaluate` must be symmetric, free of side effects and traceable by JAX,
    since kernel blocks are built by vectorizing it over all cells.
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        """
        Evaluate the kernel on a single pair of points.
        
        Parameters:
            x: First point, shape (d,)
            y: Second point, shape (d,)
        
        Returns:
            Scalar kernel value
        """
        ...
    
    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute kernel matrix between X and Y.
        
        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)
        
        Returns:
            Kernel matrix of shape (n, m)
        """
        ...


def pairwise(
    evaluate: Callable[[Array, Array], Array],
    X: Float[Array, "n d"],
    Y: Float[Array, "m d"]
) -> Float[Array, "n m"]:
    """
    Evaluate a pairwise kernel function on every (row of X, row of Y) pair.
    
    Each output cell is computed exactly once and independently of the
    others, so the nested vmap is a parallel-for over the (n, m) grid.
    
    Parameters:
        evaluate: Scalar kernel function k(x, y)
        X: First set of points, shape (n, d)
        Y: Second set of points, shape (m, d)
    
    Returns:
        Matrix of shape (n, m) with entry (i, j) = k(X[i], Y[j])
    """
    against_rows = vmap(evaluate, in_axes=(None, 0))
    return vmap(against_rows, in_axes=(0, None))(X, Y)


class PairwiseKernel:
    """
    Base class for kernels defined by a scalar `evaluate` function.
    
    Subclasses implement `evaluate`; the matrix form is derived from it.
    """
    
    def evaluate(
        self,
        x: Float[Array, "d"],
        y: Float[Array, "d"]
    ) -> Float[Array, ""]:
        raise NotImplementedError
    
    @partial(jit, static_argnums=(0,))
    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute kernel matrix between X and Y.
        
        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)
        
        Returns:
            Kernel matrix of shape (n, m)
        """
        return pairwise(self.evaluate, X, Y)
    
    def __repr__(self) -> str:
        params = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"
