# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Runtime layer for canvas-color.

Output formatting plus the canvas-facing entry points used by vault
tooling:

1. Formatting -- CanonicalColor to any OutputFormat
2. Validation -- normalized color plus soft warnings
3. Terminal   -- ANSI escape sequences and colored node rendering
4. Reports    -- composite ColorMetadata, batch conversion

The runtime layer never mutates the palette or parsed colors.
"""

from canvas_color.runtime.canvas import (
    calculate_contrast_ratio,
    convert_all_canvas_colors,
    create_color_metadata,
    get_terminal_color,
    normalize_color,
    render_colored_node,
    semantic_color,
    validate_canvas_color,
)
from canvas_color.runtime.formatters import RESET, format_alpha, format_color

__all__ = [
    "format_color",
    "format_alpha",
    "RESET",
    "normalize_color",
    "calculate_contrast_ratio",
    "validate_canvas_color",
    "get_terminal_color",
    "render_colored_node",
    "convert_all_canvas_colors",
    "create_color_metadata",
    "semantic_color",
]
