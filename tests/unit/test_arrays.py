"""Tests for quantized array value types."""

from __future__ import annotations

import numpy as np
import pytest

from quantarrays import (
    INT8,
    UINT8,
    UINT16,
    InvalidArgumentError,
    LinQuantArray,
    LogQuantArray,
    RangeError,
)


class TestLinQuantArray:
    """Test the linear value type."""

    def test_metadata_and_shape(self) -> None:
        """Test metadata names and array capabilities."""
        q = LinQuantArray(np.arange(6).reshape(2, 3), UINT8, -1.0, 2.0)

        assert q.min == -1.0
        assert q.max == 2.0
        assert q.shape == (2, 3)
        assert q.ndim == 2
        assert q.size == 6
        assert len(q) == 2
        assert q.dtype == np.uint8
        assert q.kind is UINT8
        assert q.codec == "linear"

    def test_codes_are_read_only(self) -> None:
        """Test the codes cannot be modified."""
        q = LinQuantArray([1, 2, 3], UINT8, 0.0, 1.0)

        with pytest.raises(ValueError):
            q.codes[0] = 7

        row = q[1:]
        with pytest.raises(ValueError):
            row[0] = 7

        picked = q[[0, 2]]
        with pytest.raises(ValueError):
            picked[0] = 7

    def test_buffer_is_copied(self) -> None:
        """Test the buffer owns its codes."""
        source = np.array([1, 2, 3], dtype=np.uint8)
        q = LinQuantArray(source, UINT8, 0.0, 1.0)
        source[0] = 99

        assert q[0] == 1

    def test_handover_without_copy(self) -> None:
        """Test copy=False takes over a matching buffer and still freezes it."""
        source = np.array([1, 2, 3], dtype=np.uint8)
        q = LinQuantArray(source, UINT8, 0.0, 1.0, copy=False)

        assert np.shares_memory(q.codes, source)
        assert not q.codes.flags.writeable

    def test_handover_converts_mismatched_dtype(self) -> None:
        """Test copy=False still converts codes to the kind's container."""
        source = np.array([1, 2, 3], dtype=np.int64)
        q = LinQuantArray(source, UINT16, 0.0, 1.0, copy=False)

        assert q.dtype == np.uint16
        assert not np.shares_memory(q.codes, source)
        assert source.flags.writeable

    def test_indexing_and_iteration(self) -> None:
        """Test indexed reads and iteration."""
        q = LinQuantArray([[1, 2], [3, 4]], UINT16, 0.0, 1.0)

        assert q[1, 0] == 3
        assert [row.tolist() for row in q] == [[1, 2], [3, 4]]

    def test_equality(self) -> None:
        """Test equality compares codes, kind and metadata."""
        a = LinQuantArray([1, 2], UINT8, 0.0, 1.0)

        assert a == LinQuantArray([1, 2], UINT8, 0.0, 1.0)
        assert a != LinQuantArray([1, 2], UINT8, 0.0, 2.0)
        assert a != LinQuantArray([1, 2], UINT16, 0.0, 1.0)
        assert a != LinQuantArray([1, 3], UINT8, 0.0, 1.0)
        assert a != LogQuantArray([1, 2], UINT8, 0.0, 1.0)

    def test_repr(self) -> None:
        """Test repr names the metadata."""
        text = repr(LinQuantArray([1], INT8, 0.5, 1.5))

        assert "LinQuantArray" in text
        assert "int8" in text
        assert "min=0.5" in text

    def test_codes_out_of_range(self) -> None:
        """Test codes must fit the kind."""
        with pytest.raises(RangeError):
            LinQuantArray([0, 256], UINT8, 0.0, 1.0)
        with pytest.raises(RangeError):
            LinQuantArray([-129], INT8, 0.0, 1.0)

    def test_non_finite_metadata(self) -> None:
        """Test metadata scalars must be finite."""
        with pytest.raises(RangeError):
            LinQuantArray([0], UINT8, 0.0, float("inf"))
        with pytest.raises(RangeError):
            LinQuantArray([0], UINT8, float("nan"), 1.0)

    def test_float_codes_rejected(self) -> None:
        """Test non-integer codes are rejected."""
        with pytest.raises(InvalidArgumentError):
            LinQuantArray([0.5], UINT8, 0.0, 1.0)


class TestLogQuantArray:
    """Test the logarithmic value type."""

    def test_metadata(self) -> None:
        """Test logmin/logmax accessors."""
        q = LogQuantArray([0, 1, 255], UINT8, -2.0, 3.0)

        assert q.logmin == -2.0
        assert q.logmax == 3.0
        assert q.codec == "log"
        assert "logmin=-2.0" in repr(q)

    def test_signed_kind_rejected(self) -> None:
        """Test logarithmic arrays are unsigned only."""
        with pytest.raises(InvalidArgumentError):
            LogQuantArray([0], INT8, 0.0, 1.0)
