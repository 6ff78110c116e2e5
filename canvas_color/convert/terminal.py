# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Terminal palette quantization.

Maps 24-bit colors onto the two reduced ANSI palettes:

- 256 colors: 6×6×6 cube (indices 16-231) + 24-step gray ramp (232-255).
  The 16 system colors (0-15) are excluded because terminals theme them.
- 16 colors: 8 basic + 8 bright entries of the VGA reference table.

Nearest match is plain Euclidean distance in RGB space.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from canvas_color.schema import CanonicalColor, TerminalSupport


# Maximum reconstruction distance for a tier to count as lossless.
# Roughly two 8-bit steps per channel.
SUPPORT_DISTANCE_THRESHOLD = 3.5

CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

_CUBE_OFFSET = 16
_GRAY_OFFSET = 232


def _build_ansi256_table() -> NDArray[np.float64]:
    """Rows 0..239 correspond to indices 16..255."""
    levels = np.array(CUBE_LEVELS, dtype=np.float64)
    # Index order 16 + 36*r + 6*g + b
    r, g, b = np.meshgrid(levels, levels, levels, indexing="ij")
    cube = np.stack([r.ravel(), g.ravel(), b.ravel()], axis=-1)
    ramp = np.repeat((8.0 + 10.0 * np.arange(24))[:, None], 3, axis=1)
    return np.concatenate([cube, ramp], axis=0)


ANSI256_TABLE = _build_ansi256_table()

ANSI16_TABLE = np.array([
    [0, 0, 0],        # 0  black
    [170, 0, 0],      # 1  red
    [0, 170, 0],      # 2  green
    [170, 85, 0],     # 3  yellow (brown)
    [0, 0, 170],      # 4  blue
    [170, 0, 170],    # 5  magenta
    [0, 170, 170],    # 6  cyan
    [170, 170, 170],  # 7  white
    [85, 85, 85],     # 8  bright black
    [255, 85, 85],    # 9  bright red
    [85, 255, 85],    # 10 bright green
    [255, 255, 85],   # 11 bright yellow
    [85, 85, 255],    # 12 bright blue
    [255, 85, 255],   # 13 bright magenta
    [85, 255, 255],   # 14 bright cyan
    [255, 255, 255],  # 15 bright white
], dtype=np.float64)


# =============================================================================
# Distance Kernel
# =============================================================================


def nearest_palette_index(
    rgb: NDArray,
    palette: NDArray[np.float64],
) -> NDArray[np.intp]:
    """
    Index of the nearest palette row for each color.

    Ties resolve to the lowest index.

    Args:
        rgb: Array of shape (3,) or (N, 3) with sRGB values [0, 255]
        palette: Array of shape (K, 3)

    Returns:
        Scalar array for (3,) input, shape (N,) for (N, 3) input
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    delta = rgb[..., None, :] - palette
    dist_sq = np.sum(delta ** 2, axis=-1)
    return np.argmin(dist_sq, axis=-1)


def _distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum(diff ** 2)))


# =============================================================================
# 256-color
# =============================================================================


def quantize_ansi256(color: CanonicalColor) -> int:
    """Nearest 256-color index (16-255) for a color."""
    row = int(nearest_palette_index(color.rgb, ANSI256_TABLE))
    return row + _CUBE_OFFSET


def quantize_ansi256_batch(rgb: NDArray) -> NDArray[np.intp]:
    """Vectorized quantize_ansi256 over an (N, 3) array."""
    return nearest_palette_index(rgb, ANSI256_TABLE) + _CUBE_OFFSET


def ansi256_to_rgb(index: int) -> tuple[int, int, int]:
    """
    Reconstruct the RGB value of a 256-color index.

    Only the cube and gray ramp (16-255) are defined here; the system
    colors 0-15 map through the 16-color table.
    """
    if not 0 <= index <= 255:
        raise ValueError(f"ANSI 256 index must be 0-255, got {index}")
    if index < _CUBE_OFFSET:
        return ansi16_to_rgb(index)
    r, g, b = ANSI256_TABLE[index - _CUBE_OFFSET].astype(int)
    return int(r), int(g), int(b)


# =============================================================================
# 16-color
# =============================================================================


def quantize_ansi16(color: CanonicalColor) -> int:
    """Nearest 16-color index (0-15) for a color."""
    return int(nearest_palette_index(color.rgb, ANSI16_TABLE))


def ansi16_to_rgb(index: int) -> tuple[int, int, int]:
    if not 0 <= index <= 15:
        raise ValueError(f"ANSI 16 index must be 0-15, got {index}")
    r, g, b = ANSI16_TABLE[index].astype(int)
    return int(r), int(g), int(b)


# =============================================================================
# Support Flags
# =============================================================================


def terminal_support(
    color: CanonicalColor,
    *,
    threshold: float = SUPPORT_DISTANCE_THRESHOLD,
) -> TerminalSupport:
    """
    Report which ANSI tiers reproduce the color without visible loss.

    ansi16m is always lossless. ansi256/ansi16 pass when the quantized
    color lies within ``threshold`` of the original.
    """
    rgb = color.rgb
    d256 = _distance(rgb, ansi256_to_rgb(quantize_ansi256(color)))
    d16 = _distance(rgb, ansi16_to_rgb(quantize_ansi16(color)))
    return TerminalSupport(
        ansi16=d16 <= threshold,
        ansi256=d256 <= threshold,
        ansi16m=True,
    )
