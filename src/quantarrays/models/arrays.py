"""Quantized array value types.

A quantized array owns a contiguous buffer of integer codes together with the
two float64 scalars needed to reconstruct the original values. The buffer is
copied on construction (unless the caller hands it over with ``copy=False``)
and marked read-only; the types expose shape and indexed reads but no
mutation.
"""

from __future__ import annotations

import math
from typing import Any, ClassVar, Iterator, Tuple

import numpy as np

from ..exceptions import InvalidArgumentError, RangeError
from ..kinds import IntKind, resolve_kind


class QuantizedBuffer:
    """Immutable N-dimensional array of integer codes plus range metadata.

    Subclasses name the two metadata scalars (``min``/``max`` for linear,
    ``logmin``/``logmax`` for logarithmic quantization).

    Attributes:
        kind: Integer kind of the stored codes
        lo: First metadata scalar
        hi: Second metadata scalar
    """

    codec: ClassVar[str] = ""

    __slots__ = ("_codes", "_kind", "_lo", "_hi")

    def __init__(
        self, codes: Any, kind: IntKind | str, lo: float, hi: float, *, copy: bool = True
    ) -> None:
        kind = resolve_kind(kind)
        lo = float(lo)
        hi = float(hi)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise RangeError(f"Range metadata must be finite, got ({lo}, {hi})")

        array = np.asarray(codes)
        if array.dtype.kind not in "iu":
            raise InvalidArgumentError(f"Codes must be integers, got dtype {array.dtype}")
        if array.size and (array.min() < kind.min_value or array.max() > kind.max_value):
            raise RangeError(
                f"Codes out of range for {kind.name} "
                f"[{kind.min_value}, {kind.max_value}]"
            )

        if copy:
            owned = np.array(array, dtype=kind.dtype, order="C", copy=True)
        else:
            # Caller hands over a fresh buffer; convert only if needed
            owned = np.ascontiguousarray(array, dtype=kind.dtype)
        owned.flags.writeable = False

        self._codes = owned
        self._kind = kind
        self._lo = lo
        self._hi = hi

    @property
    def codes(self) -> np.ndarray:
        """Read-only view of the integer codes."""
        return self._codes

    @property
    def kind(self) -> IntKind:
        return self._kind

    @property
    def lo(self) -> float:
        return self._lo

    @property
    def hi(self) -> float:
        return self._hi

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._codes.shape

    @property
    def ndim(self) -> int:
        return self._codes.ndim

    @property
    def size(self) -> int:
        return self._codes.size

    @property
    def dtype(self) -> np.dtype:
        return self._codes.dtype

    def __len__(self) -> int:
        return len(self._codes)

    def __getitem__(self, index: Any) -> Any:
        item = self._codes[index]
        if isinstance(item, np.ndarray):
            # Fancy indexing returns a copy; keep it read-only as well
            item.flags.writeable = False
        return item

    def __iter__(self) -> Iterator[Any]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantizedBuffer) or type(other) is not type(self):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._lo == other._lo
            and self._hi == other._hi
            and np.array_equal(self._codes, other._codes)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind.name}, shape={self.shape}, "
            f"{self._meta_repr()})"
        )

    def _meta_repr(self) -> str:
        return f"lo={self._lo!r}, hi={self._hi!r}"


class LinQuantArray(QuantizedBuffer):
    """Linearly quantized array; metadata is the (min, max) of the source range."""

    codec = "linear"

    __slots__ = ()

    @property
    def min(self) -> float:
        return self._lo

    @property
    def max(self) -> float:
        return self._hi

    def _meta_repr(self) -> str:
        return f"min={self._lo!r}, max={self._hi!r}"


class LogQuantArray(QuantizedBuffer):
    """Logarithmically quantized array; metadata is (log(minpos), log(max)).

    Code 0 is reserved for exact zeros. Only unsigned kinds are allowed.
    """

    codec = "log"

    __slots__ = ()

    def __init__(
        self, codes: Any, kind: IntKind | str, lo: float, hi: float, *, copy: bool = True
    ) -> None:
        kind = resolve_kind(kind)
        if kind.signed:
            raise InvalidArgumentError(
                f"Logarithmic quantization requires an unsigned kind, got {kind.name}"
            )
        super().__init__(codes, kind, lo, hi, copy=copy)

    @property
    def logmin(self) -> float:
        return self._lo

    @property
    def logmax(self) -> float:
        return self._hi

    def _meta_repr(self) -> str:
        return f"logmin={self._lo!r}, logmax={self._hi!r}"
