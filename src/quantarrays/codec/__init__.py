"""Linear and logarithmic quantization codecs.

This module provides the elementary codecs, the per-slab driver and the
encode()/decode() entry points that dispatch between them.
"""

from __future__ import annotations

from .api import decode, encode
from .linear import (
    lin_dequantize,
    lin_quant8,
    lin_quant16,
    lin_quant24,
    lin_quant32,
    lin_quant_int8,
    lin_quant_int16,
    lin_quant_int24,
    lin_quant_int32,
    lin_quantize,
)
from .logarithmic import (
    log_dequant8,
    log_dequant16,
    log_dequant24,
    log_dequant32,
    log_dequantize,
    log_quant8,
    log_quant16,
    log_quant24,
    log_quant32,
    log_quantize,
    minpos,
)
from .slabs import SlabCollection, dequantize_slabs, quantize_slabs

__all__ = [
    "encode",
    "decode",
    # Linear
    "lin_quantize",
    "lin_dequantize",
    "lin_quant8",
    "lin_quant16",
    "lin_quant24",
    "lin_quant32",
    "lin_quant_int8",
    "lin_quant_int16",
    "lin_quant_int24",
    "lin_quant_int32",
    # Logarithmic
    "minpos",
    "log_quantize",
    "log_dequantize",
    "log_quant8",
    "log_quant16",
    "log_quant24",
    "log_quant32",
    "log_dequant8",
    "log_dequant16",
    "log_dequant24",
    "log_dequant32",
    # Slabs
    "SlabCollection",
    "quantize_slabs",
    "dequantize_slabs",
]
