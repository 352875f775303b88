"""
Constants for shadercolor conversions and adjustments.

Centralizes the numeric definitions shared by every kernel. The coefficients
are fixed: changing any of them changes results relative to shader code using
the same tables.
"""

from __future__ import annotations

# =============================================================================
# Division guards
# =============================================================================

HSL_EPSILON = 1e-6  # MAX is raised to at least MIN + HSL_EPSILON
HSV_EPSILON = 1e-10  # Added to HSV denominators

# =============================================================================
# sRGB transfer functions
# =============================================================================

SRGB_DECODE_THRESHOLD = 0.04045  # Encoded value where the power segment starts
SRGB_ENCODE_THRESHOLD = 0.0031308  # Linear value where the power segment starts
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# =============================================================================
# sRGB <-> CIE XYZ (D65), Y scaled to [0, 100]
# =============================================================================

# Rows produce X, Y, Z from linear (r, g, b)
RGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

# Rows produce linear r, g, b from (X, Y, Z) / 100
XYZ_TO_RGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

XYZ_SCALE = 100.0

# =============================================================================
# CIE XYZ <-> CIELAB
# =============================================================================

D65_WHITE = (95.047, 100.0, 108.883)

LAB_EPSILON = 0.008856  # Linear/cube-root split on normalized XYZ
LAB_F_EPSILON = 0.206897  # Same split expressed on f(t)
LAB_KAPPA_SLOPE = 7.787
LAB_F_OFFSET = 16.0 / 116.0

# =============================================================================
# Lab normalization
# =============================================================================

LAB_L_SCALE = 100.0
LAB_AB_HALF_RANGE = 127.0  # Used by rgb2lab / lab2rgb (round trip factor 254)
LAB_AB_NORMALIZE_SCALE = 255.0  # Used by normalize_lab / denormalize_lab
LAB_AB_CLIP = 127.0  # clip_lab bounds for a and b

# =============================================================================
# Perceptual adjustments
# =============================================================================

CONTRAST_NEGATIVE_DAMPING = 0.6  # Negative contrast strength is scaled by this
CONTRAST_NEGATIVE_CHROMA = 0.35  # Chroma multiplier power for negative contrast

EXPOSE_BRIGHTEN_POWER = 2.8
EXPOSE_DARKEN_POWER = 1.5
EXPOSE_DARKEN_SCALE = 0.7
EXPOSE_DARKEN_PIVOT = 0.8
EXPOSE_DARKEN_RATE = 0.1

# Pipeline parameter ranges
DEFAULT_CONTRAST = 0.0  # No contrast change
DEFAULT_EXPOSURE = 0.0  # No exposure change
CONTRAST_MIN = -1.0
CONTRAST_MAX = 1.0
EXPOSURE_MIN = -1.0
EXPOSURE_MAX = 1.0

# =============================================================================
# General Constants
# =============================================================================

COLOR_CHANNELS = 3  # Every color triple has three components
