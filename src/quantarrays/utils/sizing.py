"""Payload size calculation utilities.

This module provides functions to calculate the storage needed for quantized
arrays and slab collections without serializing them.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ..codec.slabs import SlabCollection
from ..exceptions import InvalidArgumentError
from ..models.arrays import LinQuantArray, LogQuantArray, QuantizedBuffer

# Two float64 scalars per quantized buffer
METADATA_BYTES = 16


def payload_bits(quantized: QuantizedBuffer | SlabCollection) -> int:
    """Calculate the number of code bits (without metadata).

    24-bit kinds count 24 bits per element even though they are stored in
    32-bit containers in memory.

    Example:
        >>> payload_bits(lin_quant24(np.zeros(10)))
        240
    """
    if isinstance(quantized, SlabCollection):
        return sum(payload_bits(slab) for slab in quantized)
    return quantized.size * quantized.kind.bits


def payload_nbytes(quantized: QuantizedBuffer | SlabCollection) -> int:
    """Calculate the packed size in bytes including range metadata.

    Each buffer contributes ceil(bits / 8) bytes of codes plus 16 bytes for
    its two float64 metadata scalars.
    """
    if isinstance(quantized, SlabCollection):
        return sum(payload_nbytes(slab) for slab in quantized)
    return (payload_bits(quantized) + 7) // 8 + METADATA_BYTES


def compression_ratio(values: Any, quantized: QuantizedBuffer | SlabCollection) -> float:
    """Ratio of the source array size to the packed quantized size.

    Example:
        >>> a = np.random.rand(1000)  # float64, 8000 bytes
        >>> round(compression_ratio(a, lin_quant8(a)), 2)
        7.87
    """
    source_nbytes = np.asarray(values).nbytes
    packed = payload_nbytes(quantized)
    return source_nbytes / packed


def quantization_step(quantized: QuantizedBuffer) -> float:
    """Spacing between adjacent codes.

    For linear arrays this is the step in value space; for logarithmic arrays
    it is the step in log space (adjacent codes differ by a factor exp(step)).

    Raises:
        InvalidArgumentError: If the buffer type is not recognised
    """
    if isinstance(quantized, LinQuantArray):
        tmin, tmax = quantized.kind.as_float_range()
        return (quantized.max - quantized.min) / (tmax - tmin)

    if isinstance(quantized, LogQuantArray):
        return (quantized.logmax - quantized.logmin) / (2.0 ** quantized.kind.bits - 2)

    raise InvalidArgumentError(f"Unknown quantized buffer type {type(quantized).__name__}")
