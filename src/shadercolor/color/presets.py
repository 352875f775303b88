"""
LabPreset: Pre-configured exposure/contrast looks.

Provides commonly used perceptual grades for RGB color arrays.
"""

import numpy as np

from shadercolor.color.pipeline import LabAdjust


class LabPreset:
    """
    Pre-configured Lab adjustment presets.

    Exposure is applied before contrast:
        preset = LabPreset.punchy()
        colors = preset.apply(colors)
    """

    def __init__(self, exposure: float = 0.0, contrast: float = 0.0):
        """
        Create custom preset.

        Args:
            exposure: Exposure strength in [-1, 1]
            contrast: Contrast strength in [-1, 1]
        """
        self.params = {"exposure": exposure, "contrast": contrast}
        # Builds (and validates) eagerly so a bad preset fails at construction
        self._pipeline = self.to_pipeline()

    def apply(self, colors: np.ndarray, inplace: bool = False) -> np.ndarray:
        """
        Apply preset to colors.

        Args:
            colors: sRGB colors [..., 3] in range [0, 1]
            inplace: If True, modifies colors in-place

        Returns:
            Adjusted colors [..., 3]
        """
        return self._pipeline.apply(colors, inplace=inplace)

    def to_pipeline(self) -> LabAdjust:
        """Convert preset to a LabAdjust pipeline for further composition."""
        return LabAdjust().expose(self.params["exposure"]).contrast(self.params["contrast"])

    @classmethod
    def neutral(cls) -> "LabPreset":
        """Identity (no changes)."""
        return cls()

    @classmethod
    def punchy(cls) -> "LabPreset":
        """Strong midtone contrast with richer chroma."""
        return cls(exposure=0.0, contrast=0.6)

    @classmethod
    def soft(cls) -> "LabPreset":
        """Flattened tones, slightly lifted."""
        return cls(exposure=0.1, contrast=-0.5)

    @classmethod
    def bright(cls) -> "LabPreset":
        """
        High-key look: lifted exposure with a touch of contrast to keep depth.
        """
        return cls(exposure=0.4, contrast=0.2)

    @classmethod
    def dim(cls) -> "LabPreset":
        """Low-key look: darkened exposure, mild contrast."""
        return cls(exposure=-0.4, contrast=0.15)

    def __repr__(self) -> str:
        active = [(k, v) for k, v in self.params.items() if v != 0.0]
        param_str = ", ".join(f"{k}={v:.2f}" for k, v in active)
        return f"LabPreset({param_str})" if param_str else "LabPreset(neutral)"
