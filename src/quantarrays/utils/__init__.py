"""Utility functions for quantarrays.

This module provides payload size calculation and related helpers.
"""

from __future__ import annotations

from .sizing import (
    METADATA_BYTES,
    compression_ratio,
    payload_bits,
    payload_nbytes,
    quantization_step,
)

__all__ = [
    "METADATA_BYTES",
    "payload_bits",
    "payload_nbytes",
    "compression_ratio",
    "quantization_step",
]
