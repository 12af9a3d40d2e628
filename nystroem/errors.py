"""Exception hierarchy for the Nystroem approximation."""


class NystroemError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(NystroemError, ValueError):
    """
    An input cannot be used for an approximation.
    
    Raised for a non-positive rank, a rank larger than the dataset (for
    index-based landmark selection), an empty dataset, malformed landmarks,
    mismatched kernel blocks and unknown kernel or sampling names.
    """


class ConvergenceError(NystroemError, RuntimeError):
    """Clustering-based selection could not produce `rank` valid centroids."""


class NumericalDegeneracyError(NystroemError, ArithmeticError):
    """
    The mini-kernel spectrum cannot be inverted.
    
    Raised when singular values fall at or below the zero threshold and the
    degeneracy policy is ``"raise"``, or when no component survives the
    threshold at all.
    """
