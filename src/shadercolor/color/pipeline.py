"""
LabAdjust: Composable perceptual adjustment pipeline in normalized Lab.

Records contrast and exposure operations in order and applies them to sRGB
colors by round-tripping through normalized Lab.

Unlike brightness-style multipliers, these operators are non-linear in L and
do not commute, so repeated operations are applied one after another rather
than merged.

Example:
    >>> pipeline = (LabAdjust()
    ...     .expose(0.2)       # Lift exposure
    ...     .contrast(0.3)     # Then add midtone contrast
    ... )
    >>> graded = pipeline(colors)
"""

from __future__ import annotations

import logging
from typing import Self

import numpy as np

from shadercolor.color.kernels import (
    contrast_lab_gufunc,
    expose_lab_gufunc,
    lab2rgb_gufunc,
    rgb2lab_gufunc,
)
from shadercolor.constants import (
    CONTRAST_MAX,
    CONTRAST_MIN,
    EXPOSURE_MAX,
    EXPOSURE_MIN,
)
from shadercolor.utils import ArrayLike, as_color_array
from shadercolor.validators import validate_range

logger = logging.getLogger(__name__)

_OPERATION_KERNELS = {
    "contrast": contrast_lab_gufunc,
    "expose": expose_lab_gufunc,
}


class LabAdjust:
    """
    Ordered contrast/exposure pipeline operating in normalized Lab.

    Operations:
    - contrast: tanh S-curve on L plus midtone chroma boost (see contrast_lab_color)
    - expose: exposure curve on L with highlight chroma fade (see expose_lab_color)

    apply() converts sRGB -> normalized Lab, runs every recorded operation in
    order, converts back and saturates the result to [0, 1].
    """

    __slots__ = ("_operations",)

    def __init__(self):
        self._operations: list[tuple[str, float]] = []
        logger.debug("[LabAdjust] Initialized")

    @validate_range(CONTRAST_MIN, CONTRAST_MAX, "contrast")
    def contrast(self, contrast: float) -> Self:
        """
        Add a contrast operation.

        Args:
            contrast: Strength in [-1, 1]; 0 is no change, negative flattens

        Returns:
            Self for chaining
        """
        self._operations.append(("contrast", float(contrast)))
        return self

    @validate_range(EXPOSURE_MIN, EXPOSURE_MAX, "exposure")
    def expose(self, exposure: float) -> Self:
        """
        Add an exposure operation.

        Args:
            exposure: Strength in [-1, 1]; 0 is no change, negative darkens

        Returns:
            Self for chaining
        """
        self._operations.append(("expose", float(exposure)))
        return self

    def is_identity(self) -> bool:
        """True when every recorded operation has zero strength."""
        return all(value == 0.0 for _, value in self._operations)

    def _apply_to_lab(self, lab: np.ndarray) -> np.ndarray:
        scalar = lab.dtype.type
        for op_type, value in self._operations:
            lab = _OPERATION_KERNELS[op_type](lab, scalar(value))
        return lab

    def apply(self, colors: ArrayLike, inplace: bool = False) -> np.ndarray:
        """
        Apply the pipeline to sRGB colors.

        Args:
            colors: sRGB colors [..., 3] in range [0, 1]
            inplace: If True, write the result into ``colors`` (must be a
                writable floating-point ndarray)

        Returns:
            Adjusted sRGB colors [..., 3] in [0, 1], same dtype as the input

        Raises:
            ValueError: If colors is not [..., 3]
            TypeError: If inplace=True and colors is not a floating-point ndarray
        """
        if inplace and not (
            isinstance(colors, np.ndarray) and np.issubdtype(colors.dtype, np.floating)
        ):
            raise TypeError(
                f"inplace=True requires a floating-point numpy array, got {type(colors).__name__}. "
                f"Use inplace=False to get a new array instead."
            )

        arr, out_dtype = as_color_array(colors)
        count = arr.size // 3

        # Fast-path: nothing to do
        if self.is_identity():
            if inplace:
                return colors
            return arr.astype(out_dtype, copy=True)

        # NaN/Inf propagate through the kernels without floating-point warnings
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            lab = self._apply_to_lab(rgb2lab_gufunc(arr))
            rgb = np.clip(lab2rgb_gufunc(lab), 0.0, 1.0)

        if inplace:
            colors[...] = rgb
            logger.info("[LabAdjust] Applied %d operations to %d colors (in-place)", len(self), count)
            return colors

        logger.info("[LabAdjust] Applied %d operations to %d colors (new copy)", len(self), count)
        return rgb.astype(out_dtype, copy=False)

    def __call__(self, colors: ArrayLike, inplace: bool = False) -> np.ndarray:
        """Apply the pipeline (callable interface). See apply()."""
        return self.apply(colors, inplace=inplace)

    def reset(self) -> Self:
        """Remove all operations."""
        self._operations.clear()
        logger.debug("[LabAdjust] Reset to defaults")
        return self

    def copy(self) -> Self:
        """Independent copy of this pipeline."""
        new = type(self)()
        new._operations = list(self._operations)
        return new

    def get_operations(self) -> list[tuple[str, float]]:
        """Recorded (operation, value) pairs in application order."""
        return list(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        if not self._operations:
            return "LabAdjust(identity)"
        ops = ", ".join(f"{op}({value:+.2f})" for op, value in self._operations)
        return f"LabAdjust({ops})"
