"""Linear quantization.

Values are mapped with a uniform affine transform from their (min, max) range
onto the full range of the target integer kind: the minimum becomes the
smallest representable code and the maximum the largest.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Tuple

import numpy as np

from ..exceptions import RangeError
from ..kinds import (
    INT8,
    INT16,
    INT24,
    INT32,
    UINT8,
    UINT16,
    UINT24,
    UINT32,
    IntKind,
    resolve_float_dtype,
    resolve_kind,
)
from ..models.arrays import LinQuantArray
from ..models.options import LinearOptions, parse_options
from ._arrays import as_real_array

logger = logging.getLogger(__name__)


def lin_quantize(
    kind: IntKind | str,
    values: Any,
    extrema: Optional[Tuple[float, float]] = None,
) -> LinQuantArray:
    """Quantize an array linearly into integer codes.

    Args:
        kind: Target integer kind (e.g. UINT8, "int16")
        values: Array-like of real numbers
        extrema: Optional explicit (min, max) range. Values outside it saturate
            to the boundary codes. Defaults to the extrema of ``values``.

    Returns:
        LinQuantArray holding the codes and the (min, max) of the range

    Raises:
        RangeError: If the array or range contains non-finite values
        InvalidArgumentError: If the kind or extrema are malformed

    Example:
        >>> q = lin_quantize(UINT8, [0, 1, 2, 3, 4])
        >>> q.codes.tolist()
        [0, 64, 128, 191, 255]
    """
    kind = resolve_kind(kind)
    options = parse_options(LinearOptions, extrema=extrema)
    array = as_real_array(values)

    if not np.isfinite(array).all():
        raise RangeError("Linear quantization only for finite values (no NaN or Inf)")

    if options.extrema is None:
        if array.size == 0:
            raise RangeError("Cannot derive a range from an empty array; pass extrema")
        amin, amax = float(array.min()), float(array.max())
    else:
        amin, amax = options.extrema

    if not (math.isfinite(amin) and math.isfinite(amax)):
        raise RangeError(f"Linear quantization only in (-inf, inf), got range ({amin}, {amax})")

    span = amax - amin
    if not math.isfinite(span):
        raise RangeError(f"Range ({amin}, {amax}) spans more than float64 can represent")

    tmin, tmax = kind.as_float_range()

    # Inverse spacing, zero for a degenerate range
    inv_delta = 0.0 if amin == amax else (tmax - tmin) / span
    if not math.isfinite(inv_delta):
        raise RangeError(f"Range ({amin}, {amax}) is too narrow to resolve with {kind.name}")
    if amin == amax:
        logger.debug("Degenerate range %r for %s; all codes map to %d", amin, kind, kind.min_value)

    scaled = tmin + (array - amin) * inv_delta
    # Saturate instead of wrapping: explicit extrema may not bound the data
    codes = np.rint(np.clip(scaled, tmin, tmax)).astype(kind.dtype)

    logger.debug(
        "Linear quantization to %s: shape=%s range=(%r, %r) explicit=%s",
        kind,
        array.shape,
        amin,
        amax,
        options.extrema is not None,
    )
    return LinQuantArray(codes, kind, amin, amax, copy=False)


def lin_dequantize(quantized: LinQuantArray, dtype: Any = None) -> np.ndarray:
    """Reconstruct float values from a LinQuantArray.

    Args:
        quantized: Linearly quantized array
        dtype: Output float dtype. Defaults to float32 for 8/16/24-bit kinds
            and float64 for 32-bit kinds.

    Returns:
        numpy array of the requested float dtype

    Raises:
        DecodeError: If ``dtype`` is not a floating-point type
    """
    out_dtype = resolve_float_dtype(quantized.kind, dtype)
    tmin, tmax = quantized.kind.as_float_range()
    delta = (quantized.max - quantized.min) / (tmax - tmin)

    # Arithmetic in float64, cast on output
    values = quantized.min + (quantized.codes.astype(np.float64) - tmin) * delta
    return values.astype(out_dtype)


def _lin_wrapper(kind: IntKind, values: Any, dims: Optional[int], extrema: Any) -> Any:
    if dims is None:
        return lin_quantize(kind, values, extrema=extrema)

    # Import here to avoid circular dependency
    from .slabs import quantize_slabs

    return quantize_slabs("linear", kind, values, dims, extrema=extrema)


def lin_quant8(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to unsigned 8-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(UINT8, values, dims, extrema)


def lin_quant16(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to unsigned 16-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(UINT16, values, dims, extrema)


def lin_quant24(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to unsigned 24-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(UINT24, values, dims, extrema)


def lin_quant32(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to unsigned 32-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(UINT32, values, dims, extrema)


def lin_quant_int8(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to signed 8-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(INT8, values, dims, extrema)


def lin_quant_int16(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to signed 16-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(INT16, values, dims, extrema)


def lin_quant_int24(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to signed 24-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(INT24, values, dims, extrema)


def lin_quant_int32(values: Any, *, dims: Optional[int] = None, extrema: Any = None) -> Any:
    """Linear quantization to signed 32-bit codes (per slab if ``dims`` is given)."""
    return _lin_wrapper(INT32, values, dims, extrema)
