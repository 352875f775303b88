"""
shadercolor - Shader-compatible color conversions for NumPy

Per-color conversion and adjustment routines with the exact numeric contract
of their GPU shader counterparts, compiled with Numba for CPU arrays.

Features:
- sRGB <-> HSL, HSV, CIE XYZ (D65) and normalized CIELAB
- Lab normalization helpers (normalize_lab, denormalize_lab, clip_lab)
- Perceptual adjustments in normalized Lab (contrast, exposure)
- LabAdjust pipeline and LabPreset looks
- float16 / float32 / float64 support, any leading shape [..., 3]
- Structured dtypes for the shared rendering records (Rectangle, Line, TextMeshVertex)

Example - Conversions:
    >>> import numpy as np
    >>> from shadercolor import rgb2lab, lab2rgb
    >>>
    >>> rgb = np.random.rand(1000, 3).astype(np.float32)
    >>> lab = rgb2lab(rgb)          # normalized Lab in [0, 1]^3
    >>> back = lab2rgb(lab)         # float32, same shape

Example - Adjustments:
    >>> from shadercolor import LabAdjust, contrast_lab_color
    >>>
    >>> lab = contrast_lab_color(lab, 0.5)
    >>> graded = LabAdjust().expose(0.2).contrast(0.3)(rgb)
"""

__version__ = "0.1.0"

# Color conversions and adjustments
from shadercolor.color import (
    LabAdjust,
    LabPreset,
    clip_lab,
    contrast_lab_color,
    denormalize_lab,
    expose_lab_color,
    hsl2rgb,
    hsv2rgb,
    hue2rgb,
    lab2rgb,
    lab2xyz,
    normalize_lab,
    rgb2hsl,
    rgb2hsv,
    rgb2lab,
    rgb2xyz,
    xyz2lab,
    xyz2rgb,
)

# Shader intrinsics
from shadercolor.intrinsics import clamp, fract, mix, saturate, step

# Shared rendering records
from shadercolor.shared_types import (
    LINE_DTYPE,
    RECTANGLE_DTYPE,
    TEXT_MESH_VERTEX_DTYPE,
    lines_from_points,
    rectangles_from_rects,
    text_mesh_vertices,
)

__all__ = [
    # Version
    "__version__",
    # Pipelines
    "LabAdjust",
    "LabPreset",
    # Conversions
    "hue2rgb",
    "rgb2hsl",
    "hsl2rgb",
    "rgb2hsv",
    "hsv2rgb",
    "rgb2xyz",
    "xyz2rgb",
    "xyz2lab",
    "lab2xyz",
    "rgb2lab",
    "lab2rgb",
    # Lab helpers and adjustments
    "normalize_lab",
    "denormalize_lab",
    "clip_lab",
    "contrast_lab_color",
    "expose_lab_color",
    # Intrinsics
    "saturate",
    "clamp",
    "mix",
    "step",
    "fract",
    # Shared types
    "RECTANGLE_DTYPE",
    "LINE_DTYPE",
    "TEXT_MESH_VERTEX_DTYPE",
    "rectangles_from_rects",
    "lines_from_points",
    "text_mesh_vertices",
]
