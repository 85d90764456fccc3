"""Input array coercion shared by the codecs."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..exceptions import InvalidArgumentError


def as_real_array(values: Any) -> np.ndarray:
    """Convert array-like input to a float64 numpy array.

    Args:
        values: Array-like of booleans, integers or floats

    Returns:
        float64 numpy array (a copy only when conversion requires one)

    Raises:
        InvalidArgumentError: If the input is not real-valued
    """
    array = np.asarray(values)
    if array.dtype.kind not in "biuf":
        raise InvalidArgumentError(
            f"Quantization requires real-valued input, got dtype {array.dtype}"
        )
    return array.astype(np.float64, copy=False)
