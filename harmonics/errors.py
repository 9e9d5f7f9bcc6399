from __future__ import annotations


class HarmonicsError(Exception):
    """Base error for the harmonics library."""


class InvalidParameterError(HarmonicsError, ValueError):
    """Raised when a frequency, rate, count, or preset is out of its domain."""


class IndexOutOfRangeError(HarmonicsError, IndexError):
    """Raised when a partial index falls outside the harmonic series."""
