"""Exception hierarchy for quantarrays.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from QuantArrayError for easy catching of any quantarrays-specific error.
"""

from __future__ import annotations


class QuantArrayError(Exception):
    """Base exception for all quantarrays errors."""

    pass


class RangeError(QuantArrayError, ValueError):
    """Raised when values cannot be mapped onto an integer range.

    Examples:
        - Non-finite bound in a supplied or computed linear range
        - NaN or infinite element in linear input
        - Negative or non-finite element in logarithmic input
        - Range cannot be derived from an empty array
    """

    pass


class InvalidArgumentError(QuantArrayError, ValueError):
    """Raised when an option or argument is not recognised.

    Examples:
        - Unknown rounding mode selector
        - Slab dimension out of bounds for the array rank
        - Unsupported integer kind or bit width
        - Malformed extrema tuple
    """

    pass


class DecodeError(QuantArrayError):
    """Raised when quantized data cannot be reconstructed.

    Examples:
        - Empty slab collection (no shape to restack)
        - Requested output dtype is not a floating-point type
        - Bit width does not match the stored integer kind
    """

    pass
