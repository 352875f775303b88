"""
Array helpers shared by the color API and the pipelines.

Handles coercion of user input to the float layouts the compiled kernels
accept, and the dtype bookkeeping that keeps results in the caller's
element type.
"""

from typing import Union

import numpy as np

from shadercolor.constants import COLOR_CHANNELS

ArrayLike = Union[np.ndarray, tuple, list]

# Element types with a compiled kernel; anything else is computed in float32
KERNEL_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))
DEFAULT_DTYPE = np.dtype(np.float32)


def result_dtype(dtype: np.dtype) -> np.dtype:
    """
    Element type a conversion returns for inputs of the given dtype.

    Floating dtypes are preserved; integers and other numerics become float32.

    Example:
        >>> result_dtype(np.dtype(np.float16))
        dtype('float16')
        >>> result_dtype(np.dtype(np.int64))
        dtype('float32')
    """
    if np.issubdtype(dtype, np.floating):
        return np.dtype(dtype)
    return DEFAULT_DTYPE


def kernel_dtype(dtype: np.dtype) -> np.dtype:
    """Element type the kernels run in for a given result dtype."""
    return dtype if dtype in KERNEL_DTYPES else DEFAULT_DTYPE


def as_color_array(colors: ArrayLike, name: str = "colors") -> tuple[np.ndarray, np.dtype]:
    """
    Coerce input to a kernel-ready array of color triples.

    Args:
        colors: Array-like with shape [..., 3]
        name: Argument name used in error messages

    Returns:
        (kernel_array, output_dtype). kernel_array is float32 or float64 and
        may share memory with the input; callers must not write to it.

    Raises:
        ValueError: If the last axis does not hold exactly 3 components
    """
    arr = np.asarray(colors)
    if arr.ndim == 0 or arr.shape[-1] != COLOR_CHANNELS:
        raise ValueError(
            f"{name} must have shape [..., {COLOR_CHANNELS}], got {arr.shape}. "
            f"Pass a single triple like [r, g, b] or an array of triples."
        )

    out_dtype = result_dtype(arr.dtype)
    return arr.astype(kernel_dtype(out_dtype), copy=False), out_dtype
