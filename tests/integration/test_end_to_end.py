"""Integration tests for complete quantize/store/restore workflows."""

from __future__ import annotations

import numpy as np
import pytest

from quantarrays import (
    INT24,
    UINT16,
    UINT24,
    LinQuantArray,
    LogQuantArray,
    compression_ratio,
    decode,
    encode,
    lin_quant24,
    log_quant16,
    payload_nbytes,
)


def _store(q):
    """Mimic a host application persisting the codes and the two scalars."""
    return q.codes.tobytes(), q.codes.dtype.str, q.shape, q.lo, q.hi


class TestStoreAndRestore:
    """Test that the codes plus two scalars are enough to rebuild the data."""

    def test_linear_field(self, rng: np.random.Generator) -> None:
        """Test a temperature-like field stored in 16 bits."""
        field = 15.0 + 8.0 * rng.standard_normal((24, 36))
        q = encode(UINT16, field)

        raw, dtype, shape, lo, hi = _store(q)
        rebuilt = LinQuantArray(np.frombuffer(raw, dtype=dtype).reshape(shape), UINT16, lo, hi)

        assert rebuilt == q
        np.testing.assert_allclose(decode(rebuilt), field, atol=(hi - lo) / 65535)

    def test_log_field(self, rng: np.random.Generator) -> None:
        """Test a precipitation-like field with many exact zeros."""
        field = rng.gamma(0.5, 2.0, size=(30, 30))
        field[rng.random((30, 30)) < 0.4] = 0.0
        q = log_quant16(field)

        raw, dtype, shape, lo, hi = _store(q)
        rebuilt = LogQuantArray(np.frombuffer(raw, dtype=dtype).reshape(shape), "uint16", lo, hi)
        restored = decode(rebuilt, np.float64)

        np.testing.assert_array_equal(restored == 0.0, field == 0.0)
        np.testing.assert_allclose(restored, field, rtol=1e-3)

    def test_signed_24bit(self, rng: np.random.Generator) -> None:
        """Test signed 24-bit codes survive storage in 32-bit containers."""
        field = rng.uniform(-1.0, 1.0, size=(8, 8))
        q = encode(INT24, field)

        assert q.codes.min() == INT24.min_value
        assert q.codes.max() == INT24.max_value
        np.testing.assert_allclose(decode(q), field, atol=2.0 / 16777215 + 1e-6)


class TestSlabWorkflow:
    """Test per-level quantization of a layered field."""

    def test_levels_keep_their_range(self, rng: np.random.Generator) -> None:
        """Test every vertical level is quantized with its own range."""
        scales = np.array([1e-3, 1.0, 1e3])
        field = rng.uniform(0.0, 1.0, size=(3, 16, 32)) * scales[:, None, None]

        slabs = lin_quant24(field, dims=0)
        restored = decode(slabs)
        assert restored.shape == (16, 32, 3)

        restored = np.moveaxis(restored, -1, 0)
        for level, scale in enumerate(scales):
            error = np.abs(restored[level] - field[level]).max()
            assert error <= scale * 1e-6

    def test_slabs_cost_more_metadata(self, rng: np.random.Generator) -> None:
        """Test slabs pay one metadata record each."""
        field = rng.uniform(size=(10, 100))

        whole = encode(UINT24, field)
        slabs = encode(UINT24, field, dim=0)

        assert payload_nbytes(slabs) - payload_nbytes(whole) == pytest.approx(9 * 16)
        assert compression_ratio(field, whole) > compression_ratio(field, slabs)
