# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Canvas-facing color API.

These are the entry points vault tooling calls for canvas node colors:
normalization, validation with soft warnings, terminal rendering and
the composite metadata report. Legacy "0".."5" codes are resolved here,
not in the parser.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Integral
from typing import Any, Optional

import numpy as np

from canvas_color.convert.contrast import (
    DEFAULT_BACKGROUND,
    classify_contrast,
    contrast_ratio,
    is_accessible,
)
from canvas_color.convert.parse import ColorInput, parse_color
from canvas_color.convert.terminal import SUPPORT_DISTANCE_THRESHOLD, terminal_support
from canvas_color.errors import CanvasColorError, UnsupportedOutputFormat
from canvas_color.palette import (
    CANVAS_BRAND_COLORS,
    brand_color,
    is_brand_color,
    is_legacy_color,
    resolve_legacy_color,
)
from canvas_color.runtime.formatters import RESET, FormattedColor, format_color
from canvas_color.schema import (
    STRING_FORMATS,
    CanonicalColor,
    ColorMetadata,
    ColorValidation,
    OutputFormat,
    ValidationIssue,
    WCAGLevel,
)

logger = logging.getLogger("canvas_color.runtime")

_RGB_KEYS = frozenset({"r", "g", "b"})


def _to_color(value: ColorInput | CanonicalColor) -> CanonicalColor:
    if isinstance(value, CanonicalColor):
        return value
    return parse_color(value)


def _has_color(value: Any) -> bool:
    """False for a missing or empty color (0 is black, not missing)."""
    return value is not None and not (isinstance(value, str) and not value)


def _is_color_like(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(
        value, (CanonicalColor, str, Integral, Mapping, list, tuple, np.ndarray)
    )


# =============================================================================
# Normalization
# =============================================================================


def normalize_color(value: ColorInput | CanonicalColor) -> str:
    """
    Normalize any supported color value to lowercase ``#rrggbb``.

    Idempotent: normalizing a normalized value returns it unchanged.

    Raises:
        InvalidColorFormat: If the value matches no recognized shape
        OutOfRangeComponent: If a channel is outside its valid range
    """
    return _to_color(value).hex


def calculate_contrast_ratio(
    color1: ColorInput | CanonicalColor,
    color2: ColorInput | CanonicalColor,
) -> float:
    """Contrast ratio between two colors given in any supported shape."""
    return contrast_ratio(_to_color(color1), _to_color(color2))


# =============================================================================
# Validation
# =============================================================================


def validate_canvas_color(
    value: Any,
    context_id: str,
    *,
    background: ColorInput | CanonicalColor = DEFAULT_BACKGROUND,
    terminal_advisories: bool = False,
) -> ColorValidation:
    """Validate a canvas node color and collect soft warnings.

    Never raises for bad input: parse failures come back as an invalid
    result with an ``issues`` entry. Contrast and palette problems are
    warnings on a valid result.

    Args:
        value: The node's color, in any supported shape, a legacy code,
            or None (color is optional on a node).
        context_id: Node/context identifier, copied into issue metadata.
        background: Reference background for the contrast check.
        terminal_advisories: Also report ANSI tiers that lose fidelity.

    Returns:
        ColorValidation.
    """
    if value is None:
        return ColorValidation(valid=True)

    if not _is_color_like(value):
        kind = type(value).__name__
        issue = ValidationIssue(
            severity="error",
            category="metadata",
            message=(
                "Color must be string, number, array, or object, "
                f"got {kind}"
            ),
            metadata={"context_id": context_id, "color_type": kind},
        )
        return ColorValidation(valid=False, issues=(issue,))

    warnings: list[ValidationIssue] = []

    color_input = value
    if is_legacy_color(value):
        color_input = resolve_legacy_color(value)
        logger.debug("Resolved legacy color %s -> %s (%s)", value, color_input, context_id)
        warnings.append(ValidationIssue(
            severity="info",
            category="legacy",
            message=f"Using legacy color code {value}, converted to {color_input}",
            suggestion="Use modern color formats (hex, rgb, css names)",
            metadata={
                "context_id": context_id,
                "legacy_color": value,
                "modern_color": color_input,
            },
        ))

    try:
        color = _to_color(color_input)
    except CanvasColorError as exc:
        issue = ValidationIssue(
            severity="error",
            category="color",
            message=f"Failed to parse color: {exc}",
            suggestion="Use a valid CSS color format (hex, rgb, hsl, CSS name)",
            metadata={"context_id": context_id, "error": str(exc)},
        )
        return ColorValidation(
            valid=False,
            warnings=tuple(warnings),
            issues=(issue,),
            error=str(exc),
        )

    normalized = color.hex

    if not is_brand_color(normalized):
        warnings.append(ValidationIssue(
            severity="warning",
            category="style",
            message=f"Color {normalized} not in brand palette",
            suggestion="Use brand colors for consistency",
            metadata={"context_id": context_id, "brand_color": False},
        ))

    bg = _to_color(background)
    ratio = contrast_ratio(color, bg)
    level = classify_contrast(ratio)
    if level is WCAGLevel.FAIL:
        warnings.append(ValidationIssue(
            severity="warning",
            category="accessibility",
            message=(
                f"Low contrast ratio ({ratio:.1f}:1) against "
                f"{bg.hex} background"
            ),
            suggestion="Use a color with higher contrast for better readability",
            metadata={"context_id": context_id, "contrast_ratio": ratio},
        ))
    elif level is WCAGLevel.AA_LARGE:
        warnings.append(ValidationIssue(
            severity="info",
            category="accessibility",
            message=(
                f"Contrast ratio ({ratio:.1f}:1) against {bg.hex} "
                "meets AA for large text only"
            ),
            suggestion="Reserve this color for headings or large labels",
            metadata={"context_id": context_id, "contrast_ratio": ratio},
        ))

    if terminal_advisories:
        support = terminal_support(color)
        for tier, ok in (("ansi-256", support.ansi256), ("ansi-16", support.ansi16)):
            if not ok:
                warnings.append(ValidationIssue(
                    severity="info",
                    category="terminal",
                    message=f"Color {normalized} is approximated in {tier} terminals",
                    metadata={"context_id": context_id, "tier": tier},
                ))

    return ColorValidation(
        valid=True,
        normalized_color=normalized,
        warnings=tuple(warnings),
    )


# =============================================================================
# Terminal Output
# =============================================================================


def _node_color(color_ref: Any) -> Any:
    """Extract the color from a node mapping; color values pass through."""
    if isinstance(color_ref, Mapping) and not _RGB_KEYS <= set(color_ref):
        return color_ref.get("color")
    return color_ref


def get_terminal_color(
    color_ref: Any,
    fmt: OutputFormat | str = OutputFormat.ANSI,
    *,
    strict: bool = False,
) -> str:
    """Escape sequence (or other string encoding) for a node color.

    Args:
        color_ref: A node mapping with a ``color`` key, or a color value.
        fmt: A string-valued format; ANSI tiers are the usual choice.
        strict: Raise UnsupportedOutputFormat for unknown or non-string
            formats instead of returning "".

    Returns:
        The encoded color, or "" when there is no color or the format is
        not supported.

    Raises:
        InvalidColorFormat / OutOfRangeComponent: For unparseable colors.
    """
    color = _node_color(color_ref)
    if not _has_color(color):
        return ""

    member = OutputFormat.lookup(fmt)
    if member is None or member not in STRING_FORMATS:
        if strict:
            raise UnsupportedOutputFormat(
                f"Format {fmt!r} does not produce a terminal string"
            )
        return ""

    return format_color(_to_color(resolve_legacy_color(color)), member)


def render_colored_node(
    node: Mapping,
    *,
    show_metadata: bool = False,
    compact: bool = False,
    fmt: OutputFormat | str = OutputFormat.ANSI,
) -> str:
    """
    Render a canvas node as colored terminal text.

    Compact mode prints only ``[id]``; otherwise the first line of the
    node text (or the first 100 characters with ``show_metadata``).
    """
    node_id = node.get("id", "unknown")
    text = node.get("text", "")

    ansi = ""
    if _has_color(node.get("color")):
        try:
            ansi = get_terminal_color({"color": node["color"]}, fmt)
        except CanvasColorError as exc:
            logger.warning("Rendering node %s without color: %s", node_id, exc)

    if not ansi:
        if compact:
            return f"[{node_id}]"
        return f"Node: {node_id}\n{text[:50]}..."

    if compact:
        return f"{ansi}[{node_id}]{RESET}"

    header = text.split("\n")[0]
    content = f"{header}\n{text[:100]}..." if show_metadata else header
    return f"{ansi}{content}{RESET}"


# =============================================================================
# Batch / Reports
# =============================================================================


def convert_all_canvas_colors(
    canvas: Mapping,
    fmt: OutputFormat | str,
    *,
    strict: bool = False,
) -> dict[str, Optional[FormattedColor]]:
    """Convert every node color of a canvas to one format.

    Args:
        canvas: Mapping with a ``nodes`` list of node mappings.
        fmt: Target format tag.
        strict: Raise on unknown formats instead of mapping to None.

    Returns:
        node id → formatted color. Nodes without a color, or with a color
        that fails to parse, map to None. Nodes without an id are keyed
        "unknown".
    """
    conversions: dict[str, Optional[FormattedColor]] = {}

    for node in canvas.get("nodes", ()):
        node_id = node.get("id") or "unknown"
        color = node.get("color")
        if not _has_color(color):
            conversions[node_id] = None
            continue

        try:
            parsed = _to_color(resolve_legacy_color(color))
        except CanvasColorError as exc:
            logger.warning("Skipping node %s: %s", node_id, exc)
            conversions[node_id] = None
            continue

        conversions[node_id] = format_color(parsed, fmt, strict=strict)

    return conversions


def create_color_metadata(
    value: ColorInput | CanonicalColor,
    context_id: str = "",
    *,
    background: ColorInput | CanonicalColor = DEFAULT_BACKGROUND,
    threshold: float = SUPPORT_DISTANCE_THRESHOLD,
) -> ColorMetadata:
    """
    Build the composite report for one color.

    Raises:
        InvalidColorFormat / OutOfRangeComponent: For unparseable colors.
    """
    color = _to_color(resolve_legacy_color(value))
    ratio = contrast_ratio(color, _to_color(background))
    return ColorMetadata(
        input=value,
        normalized=color.hex,
        color=color,
        contrast_ratio=ratio,
        is_accessible=is_accessible(ratio),
        wcag_level=classify_contrast(ratio),
        terminal_support=terminal_support(color, threshold=threshold),
        context_id=context_id,
    )


# =============================================================================
# Semantic Colors
# =============================================================================


def semantic_color(
    node_id: str,
    *,
    status: Optional[str] = None,
    priority: Optional[str] = None,
) -> str:
    """
    Pick a palette color for a node from its metadata.

    Precedence: status, then priority, then the domain prefix of the id
    ("service:api" → domain.service), then brand.primary.
    """
    if status in CANVAS_BRAND_COLORS["status"]:
        return brand_color("status", status)
    if priority in CANVAS_BRAND_COLORS["priority"]:
        return brand_color("priority", priority)
    domain = node_id.split(":")[0]
    if domain in CANVAS_BRAND_COLORS["domain"]:
        return brand_color("domain", domain)
    return brand_color("brand", "primary")
