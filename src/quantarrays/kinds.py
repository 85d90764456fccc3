"""Integer kind descriptors.

An IntKind describes one of the fixed-width integer targets a float array can
be quantized into. The representable range is derived explicitly from the bit
count and signedness instead of relying on numpy promotion rules, so 24-bit
kinds (stored in 32-bit containers) behave exactly like the native widths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from .exceptions import DecodeError, InvalidArgumentError


@dataclass(frozen=True)
class IntKind:
    """Descriptor for a fixed-width integer code type.

    Attributes:
        name: Canonical name (e.g. "uint8", "int24")
        bits: Number of bits per code (8, 16, 24 or 32)
        signed: Whether codes are two's complement signed integers
        dtype: numpy dtype used to store the codes
    """

    name: str
    bits: int
    signed: bool
    dtype: np.dtype

    @property
    def min_value(self) -> int:
        """Smallest representable code."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Largest representable code."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def as_float_range(self) -> Tuple[float, float]:
        """Return (Tmin, Tmax) as float64 scalars."""
        return float(self.min_value), float(self.max_value)

    def __str__(self) -> str:
        return self.name


UINT8 = IntKind("uint8", 8, False, np.dtype(np.uint8))
UINT16 = IntKind("uint16", 16, False, np.dtype(np.uint16))
UINT24 = IntKind("uint24", 24, False, np.dtype(np.uint32))
UINT32 = IntKind("uint32", 32, False, np.dtype(np.uint32))
INT8 = IntKind("int8", 8, True, np.dtype(np.int8))
INT16 = IntKind("int16", 16, True, np.dtype(np.int16))
INT24 = IntKind("int24", 24, True, np.dtype(np.int32))
INT32 = IntKind("int32", 32, True, np.dtype(np.int32))

UNSIGNED_KINDS = (UINT8, UINT16, UINT24, UINT32)
SIGNED_KINDS = (INT8, INT16, INT24, INT32)
ALL_KINDS = UNSIGNED_KINDS + SIGNED_KINDS

_BY_NAME: Dict[str, IntKind] = {}
for _kind in ALL_KINDS:
    _BY_NAME[_kind.name] = _kind
    # Short aliases: u8, i24, ...
    _BY_NAME[("i" if _kind.signed else "u") + str(_kind.bits)] = _kind


def resolve_kind(kind: Any) -> IntKind:
    """Resolve an integer kind from a descriptor, name or numpy dtype.

    Args:
        kind: IntKind, name ("uint8", "u8", "int24", ...) or numpy integer dtype

    Returns:
        Matching IntKind

    Raises:
        InvalidArgumentError: If the kind is not one of the supported widths

    Example:
        >>> resolve_kind("u16") is UINT16
        True
        >>> resolve_kind(np.int8) is INT8
        True
    """
    if isinstance(kind, IntKind):
        return kind

    if isinstance(kind, str):
        try:
            return _BY_NAME[kind.lower()]
        except KeyError as err:
            raise InvalidArgumentError(
                f"Unknown integer kind {kind!r}. Supported: "
                f"{', '.join(k.name for k in ALL_KINDS)}"
            ) from err

    try:
        dtype = np.dtype(kind)
    except TypeError as err:
        raise InvalidArgumentError(f"Cannot interpret {kind!r} as an integer kind") from err

    if dtype.kind not in "iu" or dtype.itemsize not in (1, 2, 4):
        raise InvalidArgumentError(
            f"Unsupported integer dtype {dtype}; expected 8, 16 or 32-bit integers"
        )
    return _BY_NAME[dtype.name]


def default_float_dtype(kind: IntKind) -> np.dtype:
    """Default float dtype for decoding codes of the given kind.

    Codes of up to 24 bits fit the float32 mantissa; 32-bit codes decode to float64.
    """
    if kind.bits > 24:
        return np.dtype(np.float64)
    return np.dtype(np.float32)


def resolve_float_dtype(kind: IntKind, dtype: Any = None) -> np.dtype:
    """Resolve the output dtype for decoding.

    Args:
        kind: Integer kind of the stored codes
        dtype: Requested float dtype, or None for the kind's default

    Returns:
        numpy floating-point dtype

    Raises:
        DecodeError: If the requested dtype is not a floating-point type
    """
    if dtype is None:
        return default_float_dtype(kind)

    try:
        resolved = np.dtype(dtype)
    except TypeError as err:
        raise DecodeError(f"Cannot interpret {dtype!r} as a float dtype") from err

    if resolved.kind != "f":
        raise DecodeError(f"Decoding requires a floating-point dtype, got {resolved}")
    return resolved
