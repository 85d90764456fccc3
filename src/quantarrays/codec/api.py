"""Top-level encode/decode entry points.

encode() dispatches to the linear or logarithmic codec, optionally per slab
along a dimension. decode() accepts anything encode() returns.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from ..exceptions import DecodeError, InvalidArgumentError
from ..kinds import IntKind
from ..models.arrays import LinQuantArray, LogQuantArray, QuantizedBuffer
from ..models.options import LinearOptions, LogOptions, parse_options
from .linear import lin_dequantize, lin_quantize
from .logarithmic import log_dequantize, log_quantize
from .slabs import SlabCollection, dequantize_slabs, quantize_slabs

Quantized = Union[QuantizedBuffer, SlabCollection]


def encode(
    kind: IntKind | str,
    values: Any,
    *,
    codec: str = "linear",
    dim: Optional[int] = None,
    workers: Optional[int] = None,
    **options: Any,
) -> Quantized:
    """Quantize an array with the linear or logarithmic codec.

    Args:
        kind: Target integer kind (IntKind or name such as "uint16")
        values: Array-like of real numbers
        codec: "linear" (default) or "log"
        dim: If given, quantize every slab along this dimension independently
        workers: Threads used for per-slab quantization (only with ``dim``)
        **options: ``extrema`` for linear, ``round_mode`` for log

    Returns:
        LinQuantArray / LogQuantArray, or a SlabCollection when ``dim`` is given

    Raises:
        InvalidArgumentError: If the codec or options are invalid
        RangeError: If the values cannot be represented by the codec

    Examples:
        ```python
        import numpy as np
        from quantarrays import encode, decode

        a = np.random.rand(10, 20)

        q = encode("uint8", a)                              # linear
        q = encode("uint16", a, codec="log", round_mode="logspace")
        slabs = encode("uint8", a, dim=0)                   # one range per row

        restored = decode(q)
        ```
    """
    if dim is not None:
        return quantize_slabs(codec, kind, values, dim, workers=workers, **options)

    if workers is not None:
        raise InvalidArgumentError("workers is only supported together with dim")

    if codec == "linear":
        parsed_linear = parse_options(LinearOptions, **options)
        return lin_quantize(kind, values, extrema=parsed_linear.extrema)

    if codec == "log":
        parsed_log = parse_options(LogOptions, **options)
        return log_quantize(kind, values, parsed_log.round_mode)

    raise InvalidArgumentError(f"Unknown codec {codec!r}. Supported: linear, log")


def decode(quantized: Quantized, dtype: Any = None) -> np.ndarray:
    """Reconstruct float values from a quantized buffer or slab collection.

    Args:
        quantized: Result of encode()
        dtype: Output float dtype; defaults to float32 for 8/16/24-bit kinds
            and float64 for 32-bit kinds

    Returns:
        numpy float array. For a SlabCollection the slab dimension is last.

    Raises:
        DecodeError: If the input cannot be decoded
    """
    if isinstance(quantized, SlabCollection):
        return dequantize_slabs(quantized, dtype)

    if isinstance(quantized, LinQuantArray):
        return lin_dequantize(quantized, dtype)

    if isinstance(quantized, LogQuantArray):
        return log_dequantize(quantized.kind.bits, quantized, dtype)

    raise DecodeError(f"Cannot decode object of type {type(quantized).__name__}")
