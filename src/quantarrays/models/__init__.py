"""Value types and option models for quantarrays."""

from __future__ import annotations

from .arrays import LinQuantArray, LogQuantArray, QuantizedBuffer
from .options import LinearOptions, LogOptions, RoundMode, SlabOptions, parse_options

__all__ = [
    "QuantizedBuffer",
    "LinQuantArray",
    "LogQuantArray",
    "RoundMode",
    "LinearOptions",
    "LogOptions",
    "SlabOptions",
    "parse_options",
]
