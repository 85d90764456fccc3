"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible arrays."""
    return np.random.default_rng(20240611)


@pytest.fixture
def ramp() -> np.ndarray:
    """Small evenly spaced array."""
    return np.array([0.0, 1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def log_uniform(rng: np.random.Generator) -> np.ndarray:
    """Positive values spread over six orders of magnitude."""
    return 10.0 ** rng.uniform(-3.0, 3.0, size=(40, 25))
