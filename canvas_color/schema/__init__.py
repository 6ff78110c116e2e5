# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Schema definitions for the color engine.

All types in this module are immutable (frozen dataclasses).
"""

from canvas_color.schema.color import (
    STRING_FORMATS,
    CanonicalColor,
    ColorMetadata,
    ColorValidation,
    OutputFormat,
    TerminalSupport,
    ValidationIssue,
    WCAGLevel,
)

__all__ = [
    # Core type
    "CanonicalColor",
    # Format tags
    "OutputFormat",
    "STRING_FORMATS",
    # Annotations
    "WCAGLevel",
    "TerminalSupport",
    # Reports
    "ValidationIssue",
    "ColorValidation",
    "ColorMetadata",
]
