"""
Exceptions raised while generating a sweep.

All of them derive from ``SweepError`` so callers can catch the family
in one place.  Configuration and frame problems are also ``ValueError``
instances; an ``IndexConsistencyError`` is an internal invariant
violation and derives from ``AssertionError``.
"""

from typing import Optional


class SweepError(Exception):
    """Base exception for sweep generation errors."""
    pass


class ConfigurationError(SweepError, ValueError):
    """Invalid static parameter; generation is aborted before it starts."""
    pass


class DegenerateFrameError(SweepError, ValueError):
    """No orthonormal frame can be built at a path sample."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        if index is not None:
            message = f"sample {index}: {message}"
        super().__init__(message)


class IndexConsistencyError(SweepError, AssertionError):
    """Ring, profile or buffer sizes disagree; indicates a programming error."""
    pass


__all__ = [
    "SweepError",
    "ConfigurationError",
    "DegenerateFrameError",
    "IndexConsistencyError",
]
