"""
Color space conversions and Lab adjustments for NumPy arrays.

Every function takes an array-like of color triples with shape [..., 3] and
returns a new array of the same shape. Inputs are never modified.

Element types:
- float32 and float64 run through compiled kernels directly
- float16 is computed in float32 and returned as float16
- integer input is promoted to float32

Conversions never raise on values: out-of-range inputs are saturated where
the conversion saturates, and NaN/Inf propagate. The only error raised is
ValueError for a malformed shape.

Spaces (see shadercolor.constants for the coefficients):
- sRGB:  gamma-encoded (r, g, b) in [0, 1]
- HSL / HSV: (h, s, l) / (h, s, v), all in [0, 1]
- XYZ:   CIE 1931, D65, Y in [0, 100]
- Lab:   rgb2lab/lab2rgb use normalized Lab (L/100, a/254 + 0.5, b/254 + 0.5);
         xyz2lab/lab2xyz use raw Lab (L in [0, 100], a and b around [-128, 127])
"""

import numpy as np

from shadercolor.color import kernels
from shadercolor.utils import ArrayLike, as_color_array

# Scalar helper, re-exported as-is
hue2rgb = kernels.hue2rgb


def _convert(gufunc, colors: ArrayLike, *args: float) -> np.ndarray:
    """Run a color gufunc and hand back the caller's element type."""
    arr, out_dtype = as_color_array(colors)
    if arr.size == 0:
        return np.empty(arr.shape, dtype=out_dtype)
    scalars = tuple(arr.dtype.type(a) for a in args)
    # Irregular values propagate as NaN/Inf; no floating-point warnings
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        result = gufunc(arr, *scalars)
        return result.astype(out_dtype, copy=False)


# ============================================================================
# HSL / HSV
# ============================================================================


def rgb2hsl(colors: ArrayLike) -> np.ndarray:
    """
    Convert sRGB to HSL.

    Input is saturated to [0, 1] first. To keep the hue and saturation
    denominators non-zero, MAX is raised to at least MIN + 1e-6, so grays
    come back with a tiny positive saturation instead of exactly 0.

    Example:
        >>> rgb2hsl([1.0, 0.0, 0.0])
        array([0. , 1. , 0.5])
    """
    return _convert(kernels.rgb2hsl_gufunc, colors)


def hsl2rgb(colors: ArrayLike) -> np.ndarray:
    """Convert HSL to sRGB. Input is saturated to [0, 1] first."""
    return _convert(kernels.hsl2rgb_gufunc, colors)


def rgb2hsv(colors: ArrayLike) -> np.ndarray:
    """
    Convert sRGB to HSV.

    Input is saturated to [0, 1] first. Uses the branchless formulation;
    denominators carry a 1e-10 guard, so black and grays have hue 0.
    """
    return _convert(kernels.rgb2hsv_gufunc, colors)


def hsv2rgb(colors: ArrayLike) -> np.ndarray:
    """Convert HSV to sRGB. Input is saturated to [0, 1] first."""
    return _convert(kernels.hsv2rgb_gufunc, colors)


# ============================================================================
# XYZ / Lab
# ============================================================================


def rgb2xyz(colors: ArrayLike) -> np.ndarray:
    """
    Convert sRGB to CIE XYZ (D65), scaled so white has Y = 100.

    Applies the sRGB EOTF per channel, then the sRGB -> XYZ matrix.

    Example:
        >>> rgb2xyz([1.0, 1.0, 1.0]).round(2)
        array([ 95.05, 100.  , 108.9 ])
    """
    return _convert(kernels.rgb2xyz_gufunc, colors)


def xyz2rgb(colors: ArrayLike) -> np.ndarray:
    """
    Convert CIE XYZ (D65, Y in [0, 100]) to sRGB.

    The result is not clamped; out-of-gamut colors fall outside [0, 1].
    """
    return _convert(kernels.xyz2rgb_gufunc, colors)


def xyz2lab(colors: ArrayLike) -> np.ndarray:
    """Convert CIE XYZ to raw CIELAB relative to the D65 white point."""
    return _convert(kernels.xyz2lab_gufunc, colors)


def lab2xyz(colors: ArrayLike) -> np.ndarray:
    """Convert raw CIELAB to CIE XYZ (D65)."""
    return _convert(kernels.lab2xyz_gufunc, colors)


def rgb2lab(colors: ArrayLike) -> np.ndarray:
    """
    Convert sRGB to normalized Lab in [0, 1]^3.

    Returns (L / 100, 0.5 + 0.5 * a / 127, 0.5 + 0.5 * b / 127). This is the
    representation contrast_lab_color and expose_lab_color operate on.

    Example:
        >>> rgb2lab([0.0, 0.0, 0.0])
        array([0. , 0.5, 0.5])
    """
    return _convert(kernels.rgb2lab_gufunc, colors)


def lab2rgb(colors: ArrayLike) -> np.ndarray:
    """
    Convert normalized Lab back to sRGB (inverse of rgb2lab).

    The result is not clamped.
    """
    return _convert(kernels.lab2rgb_gufunc, colors)


# ============================================================================
# Lab normalization helpers
# ============================================================================


def denormalize_lab(colors: ArrayLike) -> np.ndarray:
    """
    Expand normalized a and b to (a - 0.5) * 255. L is passed through.

    Note:
        These helpers scale by 255 while rgb2lab/lab2rgb scale by 254, so
        mixing the two leaves a small systematic offset on a and b.
    """
    return _convert(kernels.denormalize_lab_gufunc, colors)


def normalize_lab(colors: ArrayLike) -> np.ndarray:
    """Inverse of denormalize_lab: a / 255 + 0.5. L is passed through."""
    return _convert(kernels.normalize_lab_gufunc, colors)


def clip_lab(colors: ArrayLike) -> np.ndarray:
    """Clamp L to [0, 1] and a, b to [-127, 127]."""
    return _convert(kernels.clip_lab_gufunc, colors)


# ============================================================================
# Perceptual adjustments
# ============================================================================


def contrast_lab_color(lab: ArrayLike, value: float) -> np.ndarray:
    """
    Apply perceptual contrast to normalized Lab colors.

    L is pushed along a tanh S-curve (midtones pulled apart, extremes
    compressed) by ``value``; negative values are damped by 0.6 and flatten.
    a and b are multiplied by a chroma factor that peaks at midtones.

    Args:
        lab: Normalized Lab colors [..., 3]
        value: Strength, typically in [-1, 1]; 0 is the identity

    Returns:
        Adjusted normalized Lab colors [..., 3], passed through clip_lab

    Note:
        The chroma factor scales a and b around 0, not around the neutral
        0.5, so grays pick up a shift whenever the factor is not 1.
    """
    return _convert(kernels.contrast_lab_gufunc, lab, value)


def expose_lab_color(lab: ArrayLike, value: float) -> np.ndarray:
    """
    Apply an exposure change to normalized Lab colors.

    Positive values lift L toward 1 along 1 - (1 - L)^2.8 and fade chroma as
    highlights brighten; negative values darken toward 0.7 * L^1.5.

    Args:
        lab: Normalized Lab colors [..., 3]
        value: Strength, typically in [-1, 1]; 0 is the identity

    Returns:
        Adjusted normalized Lab colors [..., 3], passed through clip_lab
    """
    return _convert(kernels.expose_lab_gufunc, lab, value)
