"""Custom exceptions for weight equalization.

This module defines exception classes for the failure modes of the
equalization pipeline. Every stage before rescaling is total over
well-formed input, so the only errors are malformed weight sets and a
zero post-correction sum.
"""


class EqualizerError(Exception):
    """
    Base exception for equalization failures.

    Attributes:
        message: Human-readable error description.
        context: Optional dictionary with additional error context.

    Examples:
        >>> raise EqualizerError("Weights sum to zero", context={"count": 3})
        Traceback (most recent call last):
        ...
        EqualizerError: Weights sum to zero (count=3)
    """

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ZeroSumError(EqualizerError):
    """Raised when the corrected weights sum to zero and cannot be rescaled."""


class InvalidWeightError(EqualizerError):
    """Raised when a weight set is empty or holds non-finite values."""
