"""Spectral reconstruction of the low-rank factor from the kernel blocks."""

import logging
import warnings
from typing import Callable, Literal, NamedTuple, Optional, Tuple

import jax.numpy as jnp
from jaxtyping import Array, Float

from ..errors import InvalidArgumentError, NumericalDegeneracyError

logger = logging.getLogger(__name__)

DegeneracyPolicy = Literal["drop", "raise"]


class ReconstructionDiagnostics(NamedTuple):
    """Intermediate quantities of one reconstruction, passed to observers."""
    singular_values: Float[Array, "rank"]
    threshold: float  # singular values at or below this are degenerate
    n_dropped: int
    reconstruction_error: float  # relative Frobenius error of the rebuilt mini-kernel


def spectral_decomposition(
    mini: Float[Array, "rank rank"]
) -> Tuple[Float[Array, "rank rank"], Float[Array, "rank"], Float[Array, "rank rank"]]:
    """
    Singular value decomposition of the mini-kernel, as given.
    
    The matrix is not symmetrized first; floating point evaluation may leave
    it only approximately symmetric.
    
    Parameters:
        mini: Mini-kernel, shape (rank, rank)
    
    Returns:
        (U, s, Vh) with mini = U @ diag(s) @ Vh and s in descending order
    """
    return jnp.linalg.svd(mini, full_matrices=False)


def default_rtol(rank: int, dtype) -> float:
    """Relative zero threshold for singular values: rank * machine epsilon."""
    return rank * float(jnp.finfo(dtype).eps)


def reconstruct(
    mini: Float[Array, "rank rank"],
    semi: Float[Array, "n rank"],
    rtol: Optional[float] = None,
    on_degenerate: DegeneracyPolicy = "drop",
    observer: Optional[Callable[[ReconstructionDiagnostics], None]] = None
) -> Float[Array, "n rank"]:
    """
    Assemble the low-rank factor G with G @ G.T approximating the kernel matrix.
    
    With mini = U diag(s) Vh, the factor is
    
        G = semi @ U @ diag(1 / sqrt(s)) @ Vh
    
    so that G @ G.T = semi @ pinv(mini) @ semi.T for a symmetric
    positive semi-definite mini-kernel.
    
    Singular values at or below rtol * max(s) are degenerate. Under the
    "drop" policy their normalization is set to zero (a rank-deficient
    reconstruction of unchanged shape) and a warning is issued; under the
    "raise" policy NumericalDegeneracyError is raised. A spectrum with no
    usable component, or with non-finite values, always raises.
    
    Parameters:
        mini: Mini-kernel, shape (rank, rank)
        semi: Semi-kernel, shape (n, rank)
        rtol: Relative zero threshold (default: rank * machine epsilon)
        on_degenerate: "drop" or "raise"
        observer: Optional callback receiving ReconstructionDiagnostics
    
    Returns:
        Factor of shape (n, rank)
    """
    mini = jnp.asarray(mini)
    semi = jnp.asarray(semi)
    
    if mini.ndim != 2 or mini.shape[0] != mini.shape[1]:
        raise InvalidArgumentError(f"Mini-kernel must be square, got shape {mini.shape}")
    if semi.ndim != 2 or semi.shape[1] != mini.shape[0]:
        raise InvalidArgumentError(
            f"Semi-kernel shape {semi.shape} does not match mini-kernel shape {mini.shape}"
        )
    if mini.shape[0] == 0:
        raise InvalidArgumentError("Kernel blocks are empty")
    if on_degenerate not in ("drop", "raise"):
        raise InvalidArgumentError(
            f"on_degenerate must be 'drop' or 'raise', got {on_degenerate!r}"
        )
    if rtol is not None and rtol < 0:
        raise InvalidArgumentError("rtol must be non-negative")
    
    rank = mini.shape[0]
    if not bool(jnp.all(jnp.isfinite(mini))) or not bool(jnp.all(jnp.isfinite(semi))):
        raise NumericalDegeneracyError("Kernel blocks contain non-finite values")
    
    U, s, Vh = spectral_decomposition(mini)
    if not bool(jnp.all(jnp.isfinite(s))):
        raise NumericalDegeneracyError("Mini-kernel has non-finite singular values")
    
    if rtol is None:
        rtol = default_rtol(rank, mini.dtype)
    threshold = float(rtol * s[0])
    keep = s > threshold
    n_dropped = rank - int(jnp.sum(keep))
    
    if n_dropped == rank:
        raise NumericalDegeneracyError(
            f"All {rank} singular values of the mini-kernel are at or below {threshold:.3g}"
        )
    if n_dropped > 0:
        message = (
            f"{n_dropped} of {rank} singular values of the mini-kernel are at or "
            f"below {threshold:.3g}"
        )
        if on_degenerate == "raise":
            raise NumericalDegeneracyError(message)
        warnings.warn(f"{message}; dropping those components")
    
    # Degenerate entries are replaced before the division so no inf is formed
    normalization = jnp.where(keep, 1.0 / jnp.sqrt(jnp.where(keep, s, 1.0)), 0.0)
    factor = semi @ (U * normalization[None, :]) @ Vh
    
    if observer is not None:
        rebuilt = (U * jnp.where(keep, s, 0.0)[None, :]) @ Vh
        error = float(jnp.linalg.norm(mini - rebuilt) / jnp.linalg.norm(mini))
        observer(ReconstructionDiagnostics(
            singular_values=s,
            threshold=threshold,
            n_dropped=n_dropped,
            reconstruction_error=error,
        ))
    
    logger.debug(
        "Reconstructed factor %s from %d components (%d dropped)",
        factor.shape, rank - n_dropped, n_dropped,
    )
    return factor
