# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Conversion core.

Parsing, color space math, terminal quantization and WCAG contrast.
All operations are pure and deterministic.
"""

from canvas_color.convert.colorspace import (
    hsl_to_rgb,
    hsl_to_rgb_batch,
    rgb_to_hsl,
    rgb_to_hsl_batch,
)
from canvas_color.convert.contrast import (
    BLACK,
    DEFAULT_BACKGROUND,
    WHITE,
    classify_contrast,
    contrast_ratio,
    is_accessible,
    relative_luminance,
    relative_luminance_batch,
)
from canvas_color.convert.parse import (
    NAMED_COLORS,
    ColorInput,
    InputKind,
    classify_input,
    clear_parse_cache,
    parse_cache_info,
    parse_color,
)
from canvas_color.convert.terminal import (
    SUPPORT_DISTANCE_THRESHOLD,
    ansi16_to_rgb,
    ansi256_to_rgb,
    quantize_ansi16,
    quantize_ansi256,
    quantize_ansi256_batch,
    terminal_support,
)

__all__ = [
    # Parsing
    "ColorInput",
    "InputKind",
    "NAMED_COLORS",
    "classify_input",
    "parse_color",
    "parse_cache_info",
    "clear_parse_cache",
    # Color space
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_batch",
    "hsl_to_rgb_batch",
    # Terminal
    "SUPPORT_DISTANCE_THRESHOLD",
    "quantize_ansi256",
    "quantize_ansi256_batch",
    "quantize_ansi16",
    "ansi256_to_rgb",
    "ansi16_to_rgb",
    "terminal_support",
    # Contrast
    "WHITE",
    "BLACK",
    "DEFAULT_BACKGROUND",
    "relative_luminance",
    "relative_luminance_batch",
    "contrast_ratio",
    "classify_contrast",
    "is_accessible",
]
