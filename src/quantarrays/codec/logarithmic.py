"""Logarithmic quantization.

Non-negative values are mapped uniformly in log space onto unsigned integer
codes. Code 0 is reserved for exact zeros; the smallest positive value maps to
code 1 and the maximum to the largest code ``2^bits - 1``.

Two round-to-nearest policies are available (see RoundMode):

- LINSPACE: the rounding offset is chosen so that each value is rounded to the
  code whose reconstruction is nearest in the linear domain
- LOGSPACE: the offset simply aligns log(minpos) with code 1, rounding to
  nearest in the log domain
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

import numpy as np

from ..exceptions import DecodeError, InvalidArgumentError, RangeError
from ..kinds import UINT8, UINT16, UINT24, UINT32, IntKind, resolve_float_dtype, resolve_kind
from ..models.arrays import LogQuantArray
from ..models.options import LogOptions, RoundMode, parse_options
from ._arrays import as_real_array

logger = logging.getLogger(__name__)

SUPPORTED_BITS = (8, 16, 24, 32)


def minpos(values: Any) -> float:
    """Return the smallest strictly positive element, ignoring zeros and negatives.

    Returns 0.0 if the array has no positive element.

    Example:
        >>> minpos([0.0, -3.0, 2.5, 0.1])
        0.1
    """
    array = as_real_array(values)
    positive = array[array > 0]
    if positive.size == 0:
        return 0.0
    return float(positive.min())


def log_quantize(
    kind: IntKind | str,
    values: Any,
    round_mode: RoundMode | str = RoundMode.LINSPACE,
) -> LogQuantArray:
    """Quantize a non-negative array logarithmically into unsigned codes.

    Args:
        kind: Unsigned target kind (UINT8, UINT16, UINT24 or UINT32)
        values: Array-like of non-negative finite numbers
        round_mode: Round to nearest in linear ("linspace") or log ("logspace") space

    Returns:
        LogQuantArray holding the codes and (log(minpos), log(max))

    Raises:
        RangeError: If any element is negative or non-finite
        InvalidArgumentError: If the kind is signed or the round mode is unknown
    """
    kind = resolve_kind(kind)
    if kind.signed:
        raise InvalidArgumentError(
            f"Logarithmic quantization requires an unsigned kind, got {kind.name}"
        )
    options = parse_options(LogOptions, round_mode=round_mode)
    array = as_real_array(values)

    if not np.isfinite(array).all() or (array < 0).any():
        raise RangeError("Logarithmic quantization only for positive and zero entries")

    mi = minpos(array)
    top = float((1 << kind.bits) - 1)
    codes = np.zeros(array.shape, dtype=kind.dtype)

    if mi == 0.0:
        # Only zeros (or empty): every code is the zero sentinel
        logger.debug("No positive values for %s; storing zero sentinels only", kind)
        return LogQuantArray(codes, kind, 0.0, 0.0, copy=False)

    logmin = math.log(mi)
    logmax = math.log(float(array.max()))

    if logmin == logmax:
        inv_delta = 0.0
        c = 0.0
        logger.debug("Degenerate log range %r for %s; nonzero values map to 1", logmin, kind)
    else:
        # Map minpos to 1 and max to 2^bits - 1, 0 is reserved for 0
        inv_delta = (2.0 ** kind.bits - 2) / (logmax - logmin)

        if options.round_mode is RoundMode.LINSPACE:
            c = 0.5 - inv_delta * math.log(mi * (math.exp(1.0 / inv_delta) + 1.0) / 2.0)
        else:
            c = -logmin * inv_delta

    positive = array > 0
    scaled = np.rint(c + inv_delta * np.log(array[positive])) + 1.0
    # Rounding at the top boundary can overshoot by one code
    codes[positive] = np.clip(scaled, 1.0, top).astype(kind.dtype)

    logger.debug(
        "Log quantization to %s: shape=%s logrange=(%r, %r) round_mode=%s",
        kind,
        array.shape,
        logmin,
        logmax,
        options.round_mode.value,
    )
    return LogQuantArray(codes, kind, logmin, logmax, copy=False)


def log_dequantize(bits: int, quantized: LogQuantArray, dtype: Any = None) -> np.ndarray:
    """Reconstruct float values from a LogQuantArray.

    Args:
        bits: Bit width of the codes (8, 16, 24 or 32); must match the stored kind
        quantized: Logarithmically quantized array
        dtype: Output float dtype. Defaults to float32 for 8/16/24-bit codes
            and float64 for 32-bit codes.

    Returns:
        numpy array of the requested float dtype; code 0 decodes to exactly 0

    Raises:
        InvalidArgumentError: If ``bits`` is not a supported width
        DecodeError: If ``bits`` does not match the stored kind or dtype is not float
    """
    if bits not in SUPPORTED_BITS:
        raise InvalidArgumentError(f"bits must be one of {SUPPORTED_BITS}, got {bits}")
    if bits != quantized.kind.bits:
        raise DecodeError(f"bits={bits} does not match stored kind {quantized.kind.name}")

    out_dtype = resolve_float_dtype(quantized.kind, dtype)

    # -2 as code 0 is reserved for 0
    delta = (quantized.logmax - quantized.logmin) / (2.0 ** bits - 2)

    codes = quantized.codes
    values = np.zeros(codes.shape, dtype=np.float64)
    nonzero = codes != 0
    values[nonzero] = np.exp(quantized.logmin + (codes[nonzero].astype(np.float64) - 1.0) * delta)
    return values.astype(out_dtype)


def _log_wrapper(
    kind: IntKind, values: Any, round_mode: RoundMode | str, dims: Optional[int]
) -> Any:
    if dims is None:
        return log_quantize(kind, values, round_mode)

    # Import here to avoid circular dependency
    from .slabs import quantize_slabs

    return quantize_slabs("log", kind, values, dims, round_mode=round_mode)


def log_quant8(
    values: Any, round_mode: RoundMode | str = RoundMode.LINSPACE, *, dims: Optional[int] = None
) -> Any:
    """Logarithmic quantization to 8-bit codes (per slab if ``dims`` is given)."""
    return _log_wrapper(UINT8, values, round_mode, dims)


def log_quant16(
    values: Any, round_mode: RoundMode | str = RoundMode.LINSPACE, *, dims: Optional[int] = None
) -> Any:
    """Logarithmic quantization to 16-bit codes (per slab if ``dims`` is given)."""
    return _log_wrapper(UINT16, values, round_mode, dims)


def log_quant24(
    values: Any, round_mode: RoundMode | str = RoundMode.LINSPACE, *, dims: Optional[int] = None
) -> Any:
    """Logarithmic quantization to 24-bit codes (per slab if ``dims`` is given)."""
    return _log_wrapper(UINT24, values, round_mode, dims)


def log_quant32(
    values: Any, round_mode: RoundMode | str = RoundMode.LINSPACE, *, dims: Optional[int] = None
) -> Any:
    """Logarithmic quantization to 32-bit codes (per slab if ``dims`` is given)."""
    return _log_wrapper(UINT32, values, round_mode, dims)


def log_dequant8(quantized: LogQuantArray, dtype: Any = None) -> np.ndarray:
    return log_dequantize(8, quantized, dtype)


def log_dequant16(quantized: LogQuantArray, dtype: Any = None) -> np.ndarray:
    return log_dequantize(16, quantized, dtype)


def log_dequant24(quantized: LogQuantArray, dtype: Any = None) -> np.ndarray:
    return log_dequantize(24, quantized, dtype)


def log_dequant32(quantized: LogQuantArray, dtype: Any = None) -> np.ndarray:
    return log_dequantize(32, quantized, dtype)
