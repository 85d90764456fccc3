#!/usr/bin/env python3
"""Basic usage example for quantarrays.

This example demonstrates:
1. Linear quantization of a smooth field
2. Logarithmic quantization of a field with many zeros
3. Per-slab quantization along one dimension
4. Calculating payload sizes
"""

from __future__ import annotations

import numpy as np

from quantarrays import (
    UINT8,
    UINT16,
    compression_ratio,
    decode,
    encode,
    payload_nbytes,
    quantization_step,
)


def main() -> None:
    """Run the basic usage example."""
    rng = np.random.default_rng(42)

    print("=" * 60)
    print("quantarrays Basic Usage Example")
    print("=" * 60)
    print()

    # Linear quantization
    print("1. Linear quantization of a temperature field...")
    temperature = 15.0 + 8.0 * rng.standard_normal((90, 180))
    q = encode(UINT16, temperature)
    restored = decode(q)

    print(f"   Range: [{q.min:.3f}, {q.max:.3f}]")
    print(f"   Step: {quantization_step(q):.2e}")
    print(f"   Max error: {np.abs(restored - temperature).max():.2e}")
    print(f"   Compression ratio: {compression_ratio(temperature, q):.1f}x")
    print()

    # Logarithmic quantization
    print("2. Logarithmic quantization of a precipitation field...")
    precipitation = rng.gamma(0.5, 2.0, size=(90, 180))
    precipitation[rng.random((90, 180)) < 0.5] = 0.0
    q_log = encode(UINT8, precipitation, codec="log")
    restored = decode(q_log, np.float64)

    positive = precipitation > 0
    relative = np.abs(restored[positive] / precipitation[positive] - 1.0)
    print(f"   log-range: [{q_log.logmin:.3f}, {q_log.logmax:.3f}]")
    print(f"   Zeros preserved: {np.array_equal(restored == 0, ~positive)}")
    print(f"   Max relative error: {relative.max():.2%}")
    print()

    # Per-slab quantization
    print("3. Per-level quantization of a layered field...")
    levels = rng.uniform(size=(4, 90, 180)) * np.array([1e-3, 1.0, 1e3, 1e6])[:, None, None]
    slabs = encode(UINT8, levels, dim=0)
    restored = np.moveaxis(decode(slabs), -1, slabs.dim)

    for i, slab in enumerate(slabs):
        error = np.abs(restored[i] - levels[i]).max()
        print(f"   Level {i}: range [{slab.min:.2e}, {slab.max:.2e}], max error {error:.2e}")
    print()

    # Sizes
    print("4. Payload sizes...")
    print(f"   Whole array, 16-bit: {payload_nbytes(q)} bytes")
    print(f"   Slabs, 8-bit: {payload_nbytes(slabs)} bytes")
    print(f"   Source float64: {levels.nbytes} bytes")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
