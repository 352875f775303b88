"""
Example: shadercolor conversion and adjustment usage.

Demonstrates how to use shadercolor for:
- Converting between sRGB, HSL, HSV, XYZ and Lab
- Perceptual contrast/exposure in normalized Lab
- Chaining adjustments with LabAdjust and LabPreset
- Packing shared rendering records
"""

import logging

import numpy as np

from shadercolor import (
    LabAdjust,
    LabPreset,
    contrast_lab_color,
    hsv2rgb,
    lab2rgb,
    rectangles_from_rects,
    rgb2hsv,
    rgb2lab,
    rgb2xyz,
)

# Configure logging to see pipeline statistics
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def generate_sample_colors(n: int = 10000) -> np.ndarray:
    """Generate random sRGB colors for demonstration."""
    rng = np.random.default_rng(42)
    return rng.random((n, 3), dtype=np.float32)


def example_1_conversions():
    """Example 1: Color space conversions."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Conversions")
    print("=" * 70)

    white = np.array([1.0, 1.0, 1.0], dtype=np.float32)
    print(f"White in XYZ: {rgb2xyz(white)}")
    print(f"White in normalized Lab: {rgb2lab(white)}")

    colors = generate_sample_colors()
    hsv = rgb2hsv(colors)

    # Rotate hue by a third of the wheel
    hsv[:, 0] = (hsv[:, 0] + 1.0 / 3.0) % 1.0
    rotated = hsv2rgb(hsv)

    print(f"Rotated {len(rotated)} colors, dtype={rotated.dtype}")


def example_2_lab_adjustment():
    """Example 2: Direct Lab adjustment."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Contrast in normalized Lab")
    print("=" * 70)

    colors = generate_sample_colors()

    lab = rgb2lab(colors)
    lab = contrast_lab_color(lab, 0.5)
    graded = np.clip(lab2rgb(lab), 0.0, 1.0)

    print(f"Mean L before: {rgb2lab(colors)[:, 0].mean():.4f}")
    print(f"L std before: {rgb2lab(colors)[:, 0].std():.4f}, after: {rgb2lab(graded)[:, 0].std():.4f}")


def example_3_pipeline():
    """Example 3: LabAdjust pipeline and presets."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: LabAdjust pipeline")
    print("=" * 70)

    colors = generate_sample_colors()

    pipeline = LabAdjust().expose(0.2).contrast(0.3)
    print(f"Pipeline: {pipeline}")
    graded = pipeline(colors)

    # Presets are pipelines with a name
    for preset in (LabPreset.punchy(), LabPreset.soft(), LabPreset.dim()):
        result = preset.apply(colors)
        print(f"{preset}: mean L = {rgb2lab(result)[:, 0].mean():.4f}")

    # In-place application reuses the caller's buffer
    pipeline.apply(colors, inplace=True)
    print(f"In-place result matches copy: {np.array_equal(colors, graded)}")


def example_4_shared_records():
    """Example 4: Packing rectangles for upload."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Shared rendering records")
    print("=" * 70)

    rects = rectangles_from_rects([[0.1, 0.1, 0.3, 0.2], [0.5, 0.5, 0.25, 0.25]])
    print(f"{len(rects)} rectangles, {rects.nbytes} bytes")
    print(f"Bottom-right corners: {rects['bottomRight']}")


if __name__ == "__main__":
    example_1_conversions()
    example_2_lab_adjustment()
    example_3_pipeline()
    example_4_shared_records()
