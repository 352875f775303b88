"""
Numba-compiled kernels for color conversion and Lab adjustments.

Two layers live here:

- ``*_px`` scalar kernels: one color in, one 3-tuple out. They are the
  reference arithmetic and are inlined into everything else.
- ``*_gufunc`` generalized ufuncs: the same kernels lifted over any leading
  shape with ``guvectorize(target="parallel")``, one independent lane per
  color, compiled for float32 and float64.

fastmath is deliberately off: the hue sector test relies on exact float
equality and NaN inputs must stay NaN.
"""

import math

from numba import guvectorize, njit

from shadercolor.constants import (
    CONTRAST_NEGATIVE_CHROMA,
    CONTRAST_NEGATIVE_DAMPING,
    D65_WHITE,
    EXPOSE_BRIGHTEN_POWER,
    EXPOSE_DARKEN_PIVOT,
    EXPOSE_DARKEN_POWER,
    EXPOSE_DARKEN_RATE,
    EXPOSE_DARKEN_SCALE,
    HSL_EPSILON,
    HSV_EPSILON,
    LAB_AB_CLIP,
    LAB_AB_HALF_RANGE,
    LAB_AB_NORMALIZE_SCALE,
    LAB_EPSILON,
    LAB_F_EPSILON,
    LAB_F_OFFSET,
    LAB_KAPPA_SLOPE,
    LAB_L_SCALE,
    RGB_TO_XYZ,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
    XYZ_SCALE,
    XYZ_TO_RGB,
)
from shadercolor.intrinsics import clamp, fract, mix, saturate, step

# Numba freezes module globals at compile time; flat floats keep that trivial.
(_RX, _RY, _RZ), (_GX, _GY, _GZ), (_BX, _BY, _BZ) = RGB_TO_XYZ
(_XR, _XG, _XB), (_YR, _YG, _YB), (_ZR, _ZG, _ZB) = XYZ_TO_RGB
_XN, _YN, _ZN = D65_WHITE

_ONE_THIRD = 1.0 / 3.0
_TWO_THIRDS = 2.0 / 3.0
_ONE_SIXTH = 1.0 / 6.0
_INV_GAMMA = 1.0 / SRGB_GAMMA

_SIGNATURES = ["void(float32[:], float32[:])", "void(float64[:], float64[:])"]
_SCALAR_ARG_SIGNATURES = [
    "void(float32[:], float32, float32[:])",
    "void(float64[:], float64, float64[:])",
]


# ============================================================================
# HSL
# ============================================================================


@njit(cache=True, nogil=True)
def hue2rgb(p, q, t):
    """
    Rebuild one RGB channel from the HSL auxiliaries p, q and a hue phase t.

    t is wrapped once into [0, 1], so it must lie in (-1, 2).
    """
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < _ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < _TWO_THIRDS:
        return p + (q - p) * (_TWO_THIRDS - t) * 6.0
    return p


@njit(cache=True, nogil=True)
def rgb2hsl_px(r, g, b):
    r = saturate(r)
    g = saturate(g)
    b = saturate(b)

    max_c = max(r, max(g, b))
    min_c = min(r, min(g, b))
    # Keep MAX strictly above MIN so the denominators below are never zero
    max_c = max(min_c + HSL_EPSILON, max_c)

    delta = max_c - min_c
    l = (min_c + max_c) / 2.0
    if l < 0.5:
        s = delta / (min_c + max_c)
    else:
        s = delta / (2.0 - max_c - min_c)

    # Sector priority on ties: r, then g, then b
    if max_c == r:
        h = (g - b) / delta
    elif max_c == g:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta
    h /= 6.0
    if h < 0.0:
        h += 1.0

    return h, s, l


@njit(cache=True, nogil=True)
def hsl2rgb_px(h, s, l):
    h = saturate(h)
    s = saturate(s)
    l = saturate(l)

    if s <= 0.0:
        return l, l, l

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    return (
        hue2rgb(p, q, h + _ONE_THIRD),
        hue2rgb(p, q, h),
        hue2rgb(p, q, h - _ONE_THIRD),
    )


# ============================================================================
# HSV (branchless formulation)
# ============================================================================


@njit(cache=True, nogil=True)
def rgb2hsv_px(r, g, b):
    r = saturate(r)
    g = saturate(g)
    b = saturate(b)

    # K = (0, -1/3, 2/3, -1)
    t = step(b, g)
    px = mix(b, g, t)
    py = mix(g, b, t)
    pz = mix(-1.0, 0.0, t)
    pw = mix(_TWO_THIRDS, -_ONE_THIRD, t)

    t = step(px, r)
    qx = mix(px, r, t)
    qy = py
    qz = mix(pw, pz, t)
    qw = mix(r, px, t)

    d = qx - min(qw, qy)
    h = abs(qz + (qw - qy) / (6.0 * d + HSV_EPSILON))
    s = d / (qx + HSV_EPSILON)
    return h, s, qx


@njit(cache=True, nogil=True)
def hsv2rgb_px(h, s, v):
    h = saturate(h)
    s = saturate(s)
    v = saturate(v)

    # K = (1, 2/3, 1/3, 3)
    pr = abs(fract(h + 1.0) * 6.0 - 3.0)
    pg = abs(fract(h + _TWO_THIRDS) * 6.0 - 3.0)
    pb = abs(fract(h + _ONE_THIRD) * 6.0 - 3.0)
    return (
        v * mix(1.0, clamp(pr - 1.0, 0.0, 1.0), s),
        v * mix(1.0, clamp(pg - 1.0, 0.0, 1.0), s),
        v * mix(1.0, clamp(pb - 1.0, 0.0, 1.0), s),
    )


# ============================================================================
# sRGB <-> XYZ
# ============================================================================


@njit(cache=True, nogil=True)
def srgb_to_linear(x):
    """sRGB EOTF for one encoded channel."""
    if x > SRGB_DECODE_THRESHOLD:
        return ((x + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA
    return x / SRGB_LINEAR_SLOPE


@njit(cache=True, nogil=True)
def linear_to_srgb(v):
    """sRGB OETF for one linear channel."""
    if v > SRGB_ENCODE_THRESHOLD:
        return SRGB_SCALE * v**_INV_GAMMA - SRGB_OFFSET
    return SRGB_LINEAR_SLOPE * v


@njit(cache=True, nogil=True)
def rgb2xyz_px(r, g, b):
    lr = srgb_to_linear(r)
    lg = srgb_to_linear(g)
    lb = srgb_to_linear(b)
    return (
        XYZ_SCALE * (_RX * lr + _RY * lg + _RZ * lb),
        XYZ_SCALE * (_GX * lr + _GY * lg + _GZ * lb),
        XYZ_SCALE * (_BX * lr + _BY * lg + _BZ * lb),
    )


@njit(cache=True, nogil=True)
def xyz2rgb_px(x, y, z):
    x = x / XYZ_SCALE
    y = y / XYZ_SCALE
    z = z / XYZ_SCALE
    return (
        linear_to_srgb(_XR * x + _XG * y + _XB * z),
        linear_to_srgb(_YR * x + _YG * y + _YB * z),
        linear_to_srgb(_ZR * x + _ZG * y + _ZB * z),
    )


# ============================================================================
# XYZ <-> Lab
# ============================================================================


@njit(cache=True, nogil=True)
def _lab_f(n):
    if n > LAB_EPSILON:
        return n ** (1.0 / 3.0)
    return LAB_KAPPA_SLOPE * n + LAB_F_OFFSET


@njit(cache=True, nogil=True)
def _lab_f_inv(f):
    if f > LAB_F_EPSILON:
        return f * f * f
    return (f - LAB_F_OFFSET) / LAB_KAPPA_SLOPE


@njit(cache=True, nogil=True)
def xyz2lab_px(x, y, z):
    vx = _lab_f(x / _XN)
    vy = _lab_f(y / _YN)
    vz = _lab_f(z / _ZN)
    return 116.0 * vy - 16.0, 500.0 * (vx - vy), 200.0 * (vy - vz)


@njit(cache=True, nogil=True)
def lab2xyz_px(l, a, b):
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    return _XN * _lab_f_inv(fx), _YN * _lab_f_inv(fy), _ZN * _lab_f_inv(fz)


# ============================================================================
# sRGB <-> normalized Lab
# ============================================================================


@njit(cache=True, nogil=True)
def rgb2lab_px(r, g, b):
    x, y, z = rgb2xyz_px(r, g, b)
    l, a, bb = xyz2lab_px(x, y, z)
    return (
        l / LAB_L_SCALE,
        0.5 + 0.5 * (a / LAB_AB_HALF_RANGE),
        0.5 + 0.5 * (bb / LAB_AB_HALF_RANGE),
    )


@njit(cache=True, nogil=True)
def lab2rgb_px(l, a, b):
    x, y, z = lab2xyz_px(
        LAB_L_SCALE * l,
        2.0 * LAB_AB_HALF_RANGE * (a - 0.5),
        2.0 * LAB_AB_HALF_RANGE * (b - 0.5),
    )
    return xyz2rgb_px(x, y, z)


@njit(cache=True, nogil=True)
def denormalize_lab_px(l, a, b):
    return l, (a - 0.5) * LAB_AB_NORMALIZE_SCALE, (b - 0.5) * LAB_AB_NORMALIZE_SCALE


@njit(cache=True, nogil=True)
def normalize_lab_px(l, a, b):
    return l, a / LAB_AB_NORMALIZE_SCALE + 0.5, b / LAB_AB_NORMALIZE_SCALE + 0.5


@njit(cache=True, nogil=True)
def clip_lab_px(l, a, b):
    return (
        clamp(l, 0.0, 1.0),
        clamp(a, -LAB_AB_CLIP, LAB_AB_CLIP),
        clamp(b, -LAB_AB_CLIP, LAB_AB_CLIP),
    )


# ============================================================================
# Perceptual adjustments (normalized Lab in, normalized Lab out)
# ============================================================================


@njit(cache=True, nogil=True)
def contrast_lab_px(l, a, b, value):
    """
    Tanh-shaped contrast on L with a midtone-weighted chroma multiplier.

    Chroma is scaled around 0, not around the 0.5 neutral point of the
    normalized encoding, so any multiplier other than 1 shifts a and b.
    """
    if value <= 0.0:
        value *= CONTRAST_NEGATIVE_DAMPING

    new_l = ((math.tanh(l * math.pi * 2.0 - math.pi) + 1.0) / 2.0 + l) / 2.0
    l += (new_l - l) * value

    if value > 0.0:
        d = l - 0.5
        power = 2.0 * (0.25 - d * d)
    else:
        power = CONTRAST_NEGATIVE_CHROMA
    multiplier = 1.0 + value * power

    return clip_lab_px(l, a * multiplier, b * multiplier)


@njit(cache=True, nogil=True)
def expose_lab_px(l, a, b, value):
    """
    Exposure curve on L; chroma fades as highlights blow out.

    Like contrast_lab_px, chroma is scaled around 0 rather than 0.5.
    """
    if value > 0.0:
        new_l = 1.0 - (1.0 - l) ** EXPOSE_BRIGHTEN_POWER
    else:
        new_l = l**EXPOSE_DARKEN_POWER * EXPOSE_DARKEN_SCALE

    l += (new_l - l) * abs(value)

    if value > 0.0:
        rate = (l * l * l - 0.5) * 2.0
    else:
        rate = (l - EXPOSE_DARKEN_PIVOT) * EXPOSE_DARKEN_RATE
    multiplier = max(0.0, 1.0 - rate * value)

    return clip_lab_px(l, a * multiplier, b * multiplier)


# ============================================================================
# Generalized ufuncs: one lane per color, any leading shape
# ============================================================================


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def rgb2hsl_gufunc(c, out):
    out[0], out[1], out[2] = rgb2hsl_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def hsl2rgb_gufunc(c, out):
    out[0], out[1], out[2] = hsl2rgb_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def rgb2hsv_gufunc(c, out):
    out[0], out[1], out[2] = rgb2hsv_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def hsv2rgb_gufunc(c, out):
    out[0], out[1], out[2] = hsv2rgb_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def rgb2xyz_gufunc(c, out):
    out[0], out[1], out[2] = rgb2xyz_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def xyz2rgb_gufunc(c, out):
    out[0], out[1], out[2] = xyz2rgb_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def xyz2lab_gufunc(c, out):
    out[0], out[1], out[2] = xyz2lab_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def lab2xyz_gufunc(c, out):
    out[0], out[1], out[2] = lab2xyz_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def rgb2lab_gufunc(c, out):
    out[0], out[1], out[2] = rgb2lab_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def lab2rgb_gufunc(c, out):
    out[0], out[1], out[2] = lab2rgb_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def normalize_lab_gufunc(c, out):
    out[0], out[1], out[2] = normalize_lab_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def denormalize_lab_gufunc(c, out):
    out[0], out[1], out[2] = denormalize_lab_px(c[0], c[1], c[2])


@guvectorize(_SIGNATURES, "(n)->(n)", nopython=True, target="parallel", cache=True)
def clip_lab_gufunc(c, out):
    out[0], out[1], out[2] = clip_lab_px(c[0], c[1], c[2])


@guvectorize(_SCALAR_ARG_SIGNATURES, "(n),()->(n)", nopython=True, target="parallel", cache=True)
def contrast_lab_gufunc(c, value, out):
    out[0], out[1], out[2] = contrast_lab_px(c[0], c[1], c[2], value)


@guvectorize(_SCALAR_ARG_SIGNATURES, "(n),()->(n)", nopython=True, target="parallel", cache=True)
def expose_lab_gufunc(c, value, out):
    out[0], out[1], out[2] = expose_lab_px(c[0], c[1], c[2], value)
