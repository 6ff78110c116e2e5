# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion pair: sRGB (0-255 ints) ↔ HSL (degrees, percent)

HSL here is the CSS flavour:
- H (Hue): 0-360 degrees (0=red, 120=green, 240=blue)
- S (Saturation): 0-100 percent
- L (Lightness): 0-100 percent

Scalar functions serve the parser and formatter; the batch variants are
pure NumPy and operate on arrays of shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Scalar RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 8-bit sRGB to HSL.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        (h, s, l) with h in [0, 360) and s, l in [0, 100]
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    lightness = (mx + mn) / 2.0

    if mx == mn:
        # Achromatic
        return 0.0, 0.0, lightness * 100.0

    delta = mx - mn
    saturation = min(delta / (1.0 - abs(2.0 * lightness - 1.0)), 1.0)

    if mx == rf:
        hue = ((gf - bf) / delta) % 6.0
    elif mx == gf:
        hue = (bf - rf) / delta + 2.0
    else:
        hue = (rf - gf) / delta + 4.0

    hue = (hue * 60.0) % 360.0
    return hue, saturation * 100.0, lightness * 100.0


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit sRGB.

    Uses the chroma formulation with six 60° hue sectors.

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        (r, g, b) rounded to integers in [0, 255]
    """
    h = h % 360.0
    s = s / 100.0
    l = l / 100.0

    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - chroma / 2.0

    sector = int(h // 60.0)
    if sector == 0:
        rf, gf, bf = chroma, x, 0.0
    elif sector == 1:
        rf, gf, bf = x, chroma, 0.0
    elif sector == 2:
        rf, gf, bf = 0.0, chroma, x
    elif sector == 3:
        rf, gf, bf = 0.0, x, chroma
    elif sector == 4:
        rf, gf, bf = x, 0.0, chroma
    else:
        rf, gf, bf = chroma, 0.0, x

    return (
        _to_channel(rf + m),
        _to_channel(gf + m),
        _to_channel(bf + m),
    )


def _to_channel(value: float) -> int:
    """Scale a [0, 1] float to a clamped 0-255 int."""
    return int(min(255, max(0, round(value * 255.0))))


# =============================================================================
# Batch RGB ↔ HSL
# =============================================================================


def rgb_to_hsl_batch(rgb: NDArray) -> NDArray[np.float64]:
    """
    Vectorized rgb_to_hsl.

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with (h, s, l), h in degrees, s/l in percent
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    mx = rgb.max(axis=-1)
    mn = rgb.min(axis=-1)
    delta = mx - mn
    lightness = (mx + mn) / 2.0

    chromatic = delta > 0
    # Avoid division by zero on achromatic entries; they are masked below
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = 1.0 - np.abs(2.0 * lightness - 1.0)
    safe_denom = np.where(denom > 0, denom, 1.0)
    saturation = np.where(chromatic, np.minimum(delta / safe_denom, 1.0), 0.0)

    hue = np.where(
        mx == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(
            mx == g,
            (b - r) / safe_delta + 2.0,
            (r - g) / safe_delta + 4.0,
        ),
    )
    hue = np.where(chromatic, (hue * 60.0) % 360.0, 0.0)

    return np.stack([hue, saturation * 100.0, lightness * 100.0], axis=-1)


def hsl_to_rgb_batch(hsl: NDArray) -> NDArray[np.uint8]:
    """
    Vectorized hsl_to_rgb.

    Args:
        hsl: Array of shape (..., 3) with (h, s, l), h in degrees, s/l in percent

    Returns:
        Array of shape (..., 3) with uint8 sRGB values
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0] % 360.0
    s = hsl[..., 1] / 100.0
    l = hsl[..., 2] / 100.0

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    x = chroma * (1.0 - np.abs((h / 60.0) % 2.0 - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(h)

    sector = np.floor(h / 60.0).astype(int)
    choices_r = [chroma, x, zero, zero, x, chroma]
    choices_g = [x, chroma, chroma, x, zero, zero]
    choices_b = [zero, zero, x, chroma, chroma, x]
    conditions = [sector == i for i in range(6)]

    rf = np.select(conditions, choices_r) + m
    gf = np.select(conditions, choices_g) + m
    bf = np.select(conditions, choices_b) + m

    rgb = np.stack([rf, gf, bf], axis=-1)
    return np.clip(np.round(rgb * 255.0), 0, 255).astype(np.uint8)
