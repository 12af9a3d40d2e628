"""Nystroem approximation: kernel blocks, spectral reconstruction, orchestration."""

from .blocks import KernelBlocks, build_blocks
from .reconstruction import (
    ReconstructionDiagnostics,
    default_rtol,
    reconstruct,
    spectral_decomposition,
)
from .nystroem import NystroemMethod

__all__ = [
    "KernelBlocks",
    "build_blocks",
    "ReconstructionDiagnostics",
    "default_rtol",
    "reconstruct",
    "spectral_decomposition",
    "NystroemMethod",
]
