"""Tests for codec option models."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from quantarrays import InvalidArgumentError, LinearOptions, LogOptions, RoundMode, SlabOptions
from quantarrays.models import parse_options


class TestLinearOptions:
    """Test linear options."""

    def test_default(self) -> None:
        """Test extrema default to None."""
        assert LinearOptions().extrema is None

    def test_numpy_scalars(self) -> None:
        """Test numpy scalars are coerced to floats."""
        options = LinearOptions(extrema=(np.float32(0.5), np.int64(3)))

        assert options.extrema == (0.5, 3.0)

    def test_non_finite_passes_validation(self) -> None:
        """Test infinite bounds are left for the codec to reject."""
        options = LinearOptions(extrema=(0.0, float("inf")))

        assert options.extrema[1] == float("inf")

    def test_wrong_length(self) -> None:
        """Test extrema must be a pair."""
        with pytest.raises(ValidationError):
            LinearOptions(extrema=(0.0, 1.0, 2.0))

    def test_frozen(self) -> None:
        """Test options cannot be reassigned."""
        options = LinearOptions(extrema=(0.0, 1.0))

        with pytest.raises(ValidationError):
            options.extrema = (1.0, 2.0)


class TestLogOptions:
    """Test logarithmic options."""

    def test_default(self) -> None:
        """Test the default round mode is linspace."""
        assert LogOptions().round_mode is RoundMode.LINSPACE

    @pytest.mark.parametrize("value", ["logspace", "LogSpace", RoundMode.LOGSPACE])
    def test_accepts_strings(self, value) -> None:
        """Test round modes can be given by value, case-insensitively."""
        assert LogOptions(round_mode=value).round_mode is RoundMode.LOGSPACE

    def test_unknown_mode(self) -> None:
        """Test unknown round modes are rejected."""
        with pytest.raises(ValidationError):
            LogOptions(round_mode="nearest")


class TestSlabOptions:
    """Test slab options."""

    def test_workers_must_be_positive(self) -> None:
        """Test workers >= 1."""
        with pytest.raises(ValidationError):
            SlabOptions(dim=0, workers=0)

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            SlabOptions(dim=0, axis=1)


class TestParseOptions:
    """Test validation error translation."""

    def test_translates_validation_error(self) -> None:
        """Test ValidationError becomes InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="round_mode") as exc_info:
            parse_options(LogOptions, round_mode="cubic")

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_returns_model(self) -> None:
        """Test valid values produce the model."""
        options = parse_options(LinearOptions, extrema=(0, 1))

        assert options.extrema == (0.0, 1.0)
