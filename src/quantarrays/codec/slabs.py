"""Per-slab quantization along one array dimension.

The array is sliced along ``dim`` and every slab is quantized independently,
so each slab gets its own range metadata. Decoding restacks the slabs along a
new trailing dimension; the quantized dimension therefore always comes last
and callers who need the original axis order must move it back, e.g. with
``np.moveaxis(decoded, -1, collection.dim)``.
"""

from __future__ import annotations

import logging
import operator
from concurrent.futures import ThreadPoolExecutor
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    overload,
)

import numpy as np

from ..exceptions import DecodeError, InvalidArgumentError, RangeError
from ..kinds import IntKind, resolve_float_dtype, resolve_kind
from ..models.arrays import LinQuantArray, LogQuantArray, QuantizedBuffer
from ..models.options import LinearOptions, LogOptions, SlabOptions, parse_options
from ._arrays import as_real_array
from .linear import lin_dequantize, lin_quantize
from .logarithmic import log_dequantize, log_quantize

logger = logging.getLogger(__name__)

SlabEncoder = Callable[[np.ndarray], QuantizedBuffer]


class SlabCollection(Sequence[QuantizedBuffer]):
    """Ordered, immutable sequence of independently quantized slabs.

    All slabs share the same shape, integer kind and codec. Index ``i`` holds
    the slab taken at position ``i`` along the source dimension ``dim``.

    Attributes:
        dim: Source dimension the slabs were taken along (None if unknown)
    """

    def __init__(self, slabs: Iterable[QuantizedBuffer], dim: Optional[int] = None) -> None:
        items: Tuple[QuantizedBuffer, ...] = tuple(slabs)

        for slab in items:
            if not isinstance(slab, QuantizedBuffer):
                raise InvalidArgumentError(
                    f"Slabs must be quantized buffers, got {type(slab).__name__}"
                )

        if items:
            first = items[0]
            for index, slab in enumerate(items[1:], start=1):
                if type(slab) is not type(first):
                    raise InvalidArgumentError(
                        f"Slab {index} is a {type(slab).__name__}, "
                        f"expected {type(first).__name__}"
                    )
                if slab.kind != first.kind:
                    raise InvalidArgumentError(
                        f"Slab {index} has kind {slab.kind.name}, expected {first.kind.name}"
                    )
                if slab.shape != first.shape:
                    raise InvalidArgumentError(
                        f"Slab {index} has shape {slab.shape}, expected {first.shape}"
                    )

        self._slabs = items
        self.dim = dim

    @property
    def kind(self) -> Optional[IntKind]:
        return self._slabs[0].kind if self._slabs else None

    @property
    def slab_shape(self) -> Optional[Tuple[int, ...]]:
        return self._slabs[0].shape if self._slabs else None

    @overload
    def __getitem__(self, index: int) -> QuantizedBuffer: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[QuantizedBuffer]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._slabs[index]

    def __len__(self) -> int:
        return len(self._slabs)

    def __iter__(self) -> Iterator[QuantizedBuffer]:
        return iter(self._slabs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlabCollection):
            return NotImplemented
        return self._slabs == other._slabs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = self.kind.name if self.kind is not None else None
        return (
            f"SlabCollection(n={len(self._slabs)}, kind={kind}, "
            f"slab_shape={self.slab_shape}, dim={self.dim})"
        )


def _run(func: Callable[[Any], Any], items: Sequence[Any], workers: Optional[int]) -> List[Any]:
    """Apply ``func`` to every item, preserving order."""
    if workers is None or workers <= 1 or len(items) <= 1:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(func, items))


def _linear_encoder(
    kind: IntKind, array: np.ndarray, axis: int, **options: Any
) -> SlabEncoder:
    parsed = parse_options(LinearOptions, **options)
    if not np.isfinite(array).all():
        raise RangeError("Linear quantization only for finite values (no NaN or Inf)")
    if parsed.extrema is not None:
        lo, hi = parsed.extrema
        if not (np.isfinite(parsed.extrema).all() and np.isfinite(hi - lo)):
            raise RangeError(f"Linear quantization only in (-inf, inf), got range {parsed.extrema}")
    elif array.size:
        others = tuple(i for i in range(array.ndim) if i != axis)
        with np.errstate(over="ignore"):
            spans = array.max(axis=others) - array.min(axis=others)
        if not np.isfinite(spans).all():
            raise RangeError("Slab range spans more than float64 can represent")
    return lambda slab: lin_quantize(kind, slab, extrema=parsed.extrema)


def _log_encoder(kind: IntKind, array: np.ndarray, axis: int, **options: Any) -> SlabEncoder:
    parsed = parse_options(LogOptions, **options)
    if kind.signed:
        raise InvalidArgumentError(
            f"Logarithmic quantization requires an unsigned kind, got {kind.name}"
        )
    if not np.isfinite(array).all() or (array < 0).any():
        raise RangeError("Logarithmic quantization only for positive and zero entries")
    return lambda slab: log_quantize(kind, slab, parsed.round_mode)


_ENCODERS: Dict[str, Callable[..., SlabEncoder]] = {
    "linear": _linear_encoder,
    "log": _log_encoder,
}


def quantize_slabs(
    codec: str,
    kind: IntKind | str,
    values: Any,
    dim: int,
    *,
    workers: Optional[int] = None,
    **options: Any,
) -> SlabCollection:
    """Quantize every slab along ``dim`` independently.

    Args:
        codec: "linear" or "log"
        kind: Target integer kind
        values: N-dimensional array-like
        dim: Dimension to slice along (negative values count from the end)
        workers: Number of threads to quantize slabs concurrently
        **options: Codec options (``extrema`` for linear, shared by every slab;
            ``round_mode`` for log)

    Returns:
        SlabCollection with one quantized buffer per index along ``dim``

    Raises:
        InvalidArgumentError: If the codec, dimension or options are invalid
        RangeError: If the values cannot be quantized with the codec

    Example:
        >>> slabs = quantize_slabs("linear", "uint8", np.arange(12.0).reshape(3, 4), dim=1)
        >>> len(slabs), slabs[0].shape
        (4, (3,))
    """
    try:
        make_encoder = _ENCODERS[codec]
    except KeyError as err:
        raise InvalidArgumentError(
            f"Unknown codec {codec!r}. Supported: {', '.join(_ENCODERS)}"
        ) from err

    kind = resolve_kind(kind)
    array = as_real_array(values)

    try:
        dim = operator.index(dim)
    except TypeError as err:
        raise InvalidArgumentError(f"dim must be an integer, got {dim!r}") from err
    slab_options = parse_options(SlabOptions, dim=dim, workers=workers)

    ndim = array.ndim
    if not -ndim <= slab_options.dim < ndim:
        raise InvalidArgumentError(
            f"Can't quantize a {ndim}-dimensional array in dim={slab_options.dim}"
        )
    axis = slab_options.dim % ndim

    # Validate everything up front so no slab is encoded on bad input
    encode = make_encoder(kind, array, axis, **options)

    slabs = [np.take(array, i, axis=axis) for i in range(array.shape[axis])]
    logger.debug(
        "Quantizing %d slabs along dim=%d with %s codec to %s", len(slabs), axis, codec, kind
    )
    return SlabCollection(_run(encode, slabs, slab_options.workers), dim=axis)


def _decode_slab(quantized: QuantizedBuffer, dtype: np.dtype) -> np.ndarray:
    if isinstance(quantized, LinQuantArray):
        return lin_dequantize(quantized, dtype)
    if isinstance(quantized, LogQuantArray):
        return log_dequantize(quantized.kind.bits, quantized, dtype)
    raise DecodeError(f"Don't know how to decode {type(quantized).__name__}")


def dequantize_slabs(
    collection: SlabCollection, dtype: Any = None, *, workers: Optional[int] = None
) -> np.ndarray:
    """Decode every slab and stack them along a new trailing dimension.

    The result has the slab dimension last regardless of where it was in the
    source array.

    Args:
        collection: Slabs produced by quantize_slabs()
        dtype: Output float dtype; defaults to the kind's default float dtype
        workers: Number of threads to decode slabs concurrently

    Returns:
        Array of shape ``slab_shape + (len(collection),)``

    Raises:
        DecodeError: If the collection is empty or dtype is not a float type
    """
    if not isinstance(collection, SlabCollection):
        collection = SlabCollection(collection)
    if len(collection) == 0:
        raise DecodeError("Cannot dequantize an empty slab collection")
    if workers is not None and workers < 1:
        raise InvalidArgumentError(f"workers must be >= 1, got {workers}")

    out_dtype = resolve_float_dtype(collection[0].kind, dtype)

    decoded = _run(lambda slab: _decode_slab(slab, out_dtype), list(collection), workers)
    return np.stack(decoded, axis=-1)
