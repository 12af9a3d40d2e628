"""Utility functions for measuring approximation quality."""

from .validation import approximation_error, full_kernel_matrix, max_abs_error

__all__ = [
    "approximation_error",
    "full_kernel_matrix",
    "max_abs_error",
]
