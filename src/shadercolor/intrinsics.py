"""
Scalar shader intrinsics.

Small JIT-compiled helpers mirroring the GPU built-ins the color kernels are
written against. They are plain functions of floats, callable from Python
and inlined into other Numba kernels.
"""

import math

from numba import njit


@njit(cache=True, nogil=True)
def clamp(x, lo, hi):
    """Clamp x to [lo, hi]."""
    return min(max(x, lo), hi)


@njit(cache=True, nogil=True)
def saturate(x):
    """Clamp x to [0, 1]."""
    return min(max(x, 0.0), 1.0)


@njit(cache=True, nogil=True)
def mix(a, b, t):
    """Linear blend: a at t=0, b at t=1."""
    return a + (b - a) * t


@njit(cache=True, nogil=True)
def step(edge, x):
    """0.0 if x < edge, else 1.0."""
    return 0.0 if x < edge else 1.0


@njit(cache=True, nogil=True)
def fract(x):
    """Fractional part, x - floor(x). Always in [0, 1) for finite x."""
    return x - math.floor(x)
