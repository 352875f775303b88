"""
Benchmark color conversions: compiled gufuncs vs pure NumPy
"""

import time
from collections.abc import Callable

import numpy as np

from shadercolor import LabAdjust, rgb2hsl, rgb2lab, rgb2xyz


def benchmark_function(func: Callable, warmup: int = 3, iterations: int = 20) -> tuple[float, float]:
    """Benchmark a function and return average time in milliseconds."""
    # Warmup (includes JIT compilation on first call)
    for _ in range(warmup):
        func()

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        end = time.perf_counter()
        times.append((end - start) * 1000)  # Convert to ms

    return np.mean(times), np.std(times)


def rgb2xyz_numpy(rgb: np.ndarray) -> np.ndarray:
    """Vectorized NumPy baseline for rgb2xyz."""
    linear = np.where(rgb > 0.04045, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92)
    matrix = np.array(
        [
            [0.4124, 0.3576, 0.1805],
            [0.2126, 0.7152, 0.0722],
            [0.0193, 0.1192, 0.9505],
        ],
        dtype=rgb.dtype,
    )
    return 100.0 * linear @ matrix.T


def benchmark_conversions():
    """Benchmark the conversion entry points."""
    print("=" * 80)
    print("Color Conversion Benchmark")
    print("=" * 80)

    batch_sizes = [10_000, 100_000, 1_000_000]
    rng = np.random.default_rng(0)

    for batch_size in batch_sizes:
        print(f"\n--- Batch Size: {batch_size:,} colors ---")
        colors = rng.random((batch_size, 3), dtype=np.float32)

        cases = {
            "rgb2xyz (numpy)": lambda: rgb2xyz_numpy(colors),
            "rgb2xyz": lambda: rgb2xyz(colors),
            "rgb2hsl": lambda: rgb2hsl(colors),
            "rgb2lab": lambda: rgb2lab(colors),
            "LabAdjust": lambda: LabAdjust().expose(0.2).contrast(0.3)(colors),
        }

        for name, func in cases.items():
            mean_time, std_time = benchmark_function(func)
            throughput = (batch_size / mean_time) * 1000
            print(f"  {name:<18} {mean_time:8.3f} ± {std_time:6.3f} ms  {throughput:14,.0f} colors/sec")


if __name__ == "__main__":
    benchmark_conversions()
