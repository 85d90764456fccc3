"""quantarrays: Lossy quantization of float arrays into fixed-width integers

A Python library that maps arrays of floating-point values onto compact 8, 16,
24 or 32-bit integer codes and back. Two encoding families are provided:

- Linear: uniform affine remap of the value range onto the integer range
- Logarithmic: uniform remap in log space, with code 0 reserved for exact zeros

Both can be applied to a whole array or independently to every slab along one
dimension, giving each slab its own range.

Key Features:
- numpy-based bulk transforms
- Explicit integer kind descriptors, including 24-bit kinds
- Round-to-nearest in linear or log space for logarithmic quantization
- Pydantic-validated codec options

Quick Start:
    >>> import numpy as np
    >>> from quantarrays import encode, decode
    >>>
    >>> a = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    >>> q = encode("uint8", a)
    >>> q.codes.tolist()
    [0, 64, 128, 191, 255]
    >>> restored = decode(q)  # float32, within one step of a

The caller is responsible for storing the integer codes together with the two
float64 range scalars (``min``/``max`` or ``logmin``/``logmax``).
"""

from __future__ import annotations

from .codec import (
    SlabCollection,
    decode,
    dequantize_slabs,
    encode,
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
    quantize_slabs,
)
from .exceptions import DecodeError, InvalidArgumentError, QuantArrayError, RangeError
from .kinds import (
    INT8,
    INT16,
    INT24,
    INT32,
    UINT8,
    UINT16,
    UINT24,
    UINT32,
    IntKind,
    default_float_dtype,
    resolve_kind,
)
from .models import (
    LinearOptions,
    LinQuantArray,
    LogOptions,
    LogQuantArray,
    QuantizedBuffer,
    RoundMode,
    SlabOptions,
)
from .utils import compression_ratio, payload_bits, payload_nbytes, quantization_step

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    # Value types
    "QuantizedBuffer",
    "LinQuantArray",
    "LogQuantArray",
    "SlabCollection",
    # Integer kinds
    "IntKind",
    "UINT8",
    "UINT16",
    "UINT24",
    "UINT32",
    "INT8",
    "INT16",
    "INT24",
    "INT32",
    "resolve_kind",
    "default_float_dtype",
    # Options
    "RoundMode",
    "LinearOptions",
    "LogOptions",
    "SlabOptions",
    # Linear codec
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
    # Logarithmic codec
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
    "quantize_slabs",
    "dequantize_slabs",
    # Exceptions
    "QuantArrayError",
    "RangeError",
    "InvalidArgumentError",
    "DecodeError",
    # Sizing
    "payload_bits",
    "payload_nbytes",
    "compression_ratio",
    "quantization_step",
    # Version
    "__version__",
]
