# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
canvas-color -- Color normalization and conversion engine for canvas tooling.

Accepts colors as CSS names, hex, packed ints, rgb()/hsl() strings,
objects or tuples, reduces them to one canonical RGBA model, and
re-serializes that model to CSS, hex, numeric and ANSI terminal
encodings. Also computes WCAG contrast metrics.

Quick start::

    from canvas_color import (
        create_color_metadata, format_color, normalize_color, parse_color,
    )

    normalize_color("red")                       # "#ff0000"
    format_color(parse_color("#f00"), "ansi-256")  # "\\x1b[38;5;196m"
    create_color_metadata("#3b82f6", "service:api").to_json()
"""

from __future__ import annotations

__version__ = "1.0.0"

from canvas_color.convert import (
    classify_contrast,
    contrast_ratio,
    hsl_to_rgb,
    parse_color,
    relative_luminance,
    rgb_to_hsl,
)
from canvas_color.errors import (
    CanvasColorError,
    InvalidColorFormat,
    OutOfRangeComponent,
    UnsupportedOutputFormat,
)
from canvas_color.palette import (
    CANVAS_BRAND_COLORS,
    LEGACY_COLOR_MAP,
    BrandPalette,
    brand_color,
    get_brand_palette,
    health_color,
    is_brand_color,
    is_legacy_color,
)
from canvas_color.runtime import (
    calculate_contrast_ratio,
    convert_all_canvas_colors,
    create_color_metadata,
    format_color,
    get_terminal_color,
    normalize_color,
    render_colored_node,
    semantic_color,
    validate_canvas_color,
)
from canvas_color.schema import (
    CanonicalColor,
    ColorMetadata,
    ColorValidation,
    OutputFormat,
    TerminalSupport,
    ValidationIssue,
    WCAGLevel,
)

__all__ = [
    # Core API
    "normalize_color",
    "parse_color",
    "format_color",
    "validate_canvas_color",
    "get_terminal_color",
    "create_color_metadata",
    "convert_all_canvas_colors",
    "render_colored_node",
    "semantic_color",
    "calculate_contrast_ratio",
    # Math
    "rgb_to_hsl",
    "hsl_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "classify_contrast",
    # Palette
    "CANVAS_BRAND_COLORS",
    "LEGACY_COLOR_MAP",
    "BrandPalette",
    "get_brand_palette",
    "brand_color",
    "health_color",
    "is_brand_color",
    "is_legacy_color",
    # Types
    "CanonicalColor",
    "OutputFormat",
    "WCAGLevel",
    "TerminalSupport",
    "ValidationIssue",
    "ColorValidation",
    "ColorMetadata",
    # Errors
    "CanvasColorError",
    "InvalidColorFormat",
    "OutOfRangeComponent",
    "UnsupportedOutputFormat",
    # Version
    "__version__",
]
