# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
WCAG 2.x relative luminance and contrast.

References:
- https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

Note the WCAG linearization threshold is 0.03928, not the sRGB
IEC 61966-2-1 value of 0.04045. The difference is below 8-bit resolution.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from canvas_color.schema import CanonicalColor, WCAGLevel


WHITE = CanonicalColor(255, 255, 255)
BLACK = CanonicalColor(0, 0, 0)

# Reference background when the caller does not supply one
DEFAULT_BACKGROUND = WHITE

AAA_THRESHOLD = 7.0
AA_THRESHOLD = 4.5
AA_LARGE_THRESHOLD = 3.0

# Ratios are rounded to this many decimals to drop float noise
CONTRAST_PRECISION = 6

_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def wcag_linearize(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Linearize sRGB values [0,1] with the WCAG piecewise curve.

    - For values <= 0.03928: value/12.92
    - For values > 0.03928: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def relative_luminance(color: CanonicalColor) -> float:
    """
    WCAG relative luminance of a color (alpha ignored).

    Returns:
        Luminance in [0, 1] (0 = black, 1 = white)
    """
    linear = wcag_linearize(np.array(color.rgb, dtype=np.float64) / 255.0)
    return float(linear @ _LUMA_WEIGHTS)


def relative_luminance_batch(rgb: NDArray) -> NDArray[np.float64]:
    """
    Vectorized relative_luminance.

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (...,) with luminance values
    """
    linear = wcag_linearize(np.asarray(rgb, dtype=np.float64) / 255.0)
    return linear @ _LUMA_WEIGHTS


def contrast_ratio(
    foreground: CanonicalColor,
    background: CanonicalColor = DEFAULT_BACKGROUND,
) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric: the lighter color is always the numerator.

    Returns:
        Ratio in [1, 21]
    """
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    return _ratio(l1, l2)


def _ratio(l1: float, l2: float) -> float:
    lighter, darker = max(l1, l2), min(l1, l2)
    return round((lighter + 0.05) / (darker + 0.05), CONTRAST_PRECISION)


def classify_contrast(ratio: float) -> WCAGLevel:
    """Highest WCAG level a ratio satisfies."""
    if ratio >= AAA_THRESHOLD:
        return WCAGLevel.AAA
    if ratio >= AA_THRESHOLD:
        return WCAGLevel.AA
    if ratio >= AA_LARGE_THRESHOLD:
        return WCAGLevel.AA_LARGE
    return WCAGLevel.FAIL


def is_accessible(ratio: float) -> bool:
    """True when a ratio meets WCAG AA for normal text."""
    return ratio >= AA_THRESHOLD
