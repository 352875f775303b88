"""
Color module.

Provides color space conversions (sRGB, HSL, HSV, XYZ, Lab), normalized-Lab
helpers, perceptual contrast/exposure operators, and a chainable pipeline
with presets built on them.
"""

from shadercolor.color.api import (
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
from shadercolor.color.pipeline import LabAdjust
from shadercolor.color.presets import LabPreset

__all__ = [
    "LabAdjust",
    "LabPreset",
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
    "normalize_lab",
    "denormalize_lab",
    "clip_lab",
    "contrast_lab_color",
    "expose_lab_color",
]
