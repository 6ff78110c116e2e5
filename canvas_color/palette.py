# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Brand palette registry.

A read-only catalog of semantic canvas colors:

    brand     primary / secondary / accent
    status    active / beta / deprecated / experimental
    domain    integration / service / core / ui / pipeline / monitor
    priority  low / medium / high / critical
    health    excellent / good / fair / poor / unknown

plus LEGACY_COLOR_MAP, the six-slot "0".."5" scheme older canvases use.
Every legacy slot resolves to a color that also lives in the tree.

The palette is built once on first use and exposed through mapping
proxies; palette changes ship as code, never as runtime edits.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from types import MappingProxyType
from typing import Any, Mapping, Optional

from canvas_color.convert.parse import parse_color


_BRAND_SOURCE: dict[str, dict[str, str]] = {
    "brand": {
        "primary": "#0F172A",    # Deep blue
        "secondary": "#1E40AF",  # Medium blue
        "accent": "#F59E0B",     # Amber
    },
    "status": {
        "active": "#10B981",        # Green
        "beta": "#EAB308",          # Yellow
        "deprecated": "#EF4444",    # Red
        "experimental": "#8B5CF6",  # Purple
    },
    "domain": {
        "integration": "#6366F1",  # Indigo
        "service": "#14B8A6",      # Teal
        "core": "#059669",         # Emerald
        "ui": "#F97316",           # Orange
        "pipeline": "#06B6D4",     # Cyan
        "monitor": "#A855F7",      # Violet
    },
    "priority": {
        "low": "#6B7280",       # Gray
        "medium": "#F59E0B",    # Amber
        "high": "#EF4444",      # Red
        "critical": "#DC2626",  # Dark red
    },
    "health": {
        "excellent": "#10B981",  # Green
        "good": "#3B82F6",       # Blue
        "fair": "#EAB308",       # Yellow
        "poor": "#EF4444",       # Red
        "unknown": "#808080",    # Gray
    },
}

_LEGACY_SOURCE: dict[str, tuple[str, str]] = {
    "0": ("health", "unknown"),   # Gray
    "1": ("health", "good"),      # Blue
    "2": ("status", "active"),    # Green
    "3": ("brand", "accent"),     # Amber
    "4": ("status", "deprecated"),  # Red
    "5": ("status", "experimental"),  # Purple
}

# Lower bounds (inclusive) of each health bucket, checked in order
HEALTH_THRESHOLDS = (
    (90.0, "excellent"),
    (75.0, "good"),
    (50.0, "fair"),
    (0.0, "poor"),
)


@dataclass(frozen=True)
class BrandPalette:
    """
    Immutable palette tree.

    Attributes:
        categories: category → key → lowercase "#rrggbb"
        legacy: "0".."5" → lowercase "#rrggbb"
    """
    categories: Mapping[str, Mapping[str, str]]
    legacy: Mapping[str, str]

    def get(self, category: str, key: str) -> str:
        """Look up a color; raises KeyError for unknown names."""
        try:
            return self.categories[category][key]
        except KeyError:
            raise KeyError(f"No brand color '{category}.{key}'") from None

    def all_colors(self) -> frozenset[str]:
        return frozenset(
            hex_value
            for section in self.categories.values()
            for hex_value in section.values()
        )


@cache
def get_brand_palette() -> BrandPalette:
    """Build (once) and return the brand palette."""
    categories = {
        name: MappingProxyType({
            key: parse_color(value).hex for key, value in section.items()
        })
        for name, section in _BRAND_SOURCE.items()
    }
    legacy = {
        code: categories[category][key]
        for code, (category, key) in _LEGACY_SOURCE.items()
    }
    return BrandPalette(
        categories=MappingProxyType(categories),
        legacy=MappingProxyType(legacy),
    )


CANVAS_BRAND_COLORS: Mapping[str, Mapping[str, str]] = get_brand_palette().categories
LEGACY_COLOR_MAP: Mapping[str, str] = get_brand_palette().legacy


def brand_color(category: str, key: str) -> str:
    """Hex of a named brand color, e.g. ``brand_color("status", "active")``."""
    return get_brand_palette().get(category, key)


def is_brand_color(hex_color: str) -> bool:
    """True when a normalized hex appears anywhere in the palette."""
    return hex_color.lower() in get_brand_palette().all_colors()


def is_legacy_color(value: Any) -> bool:
    """True for the legacy codes "0" through "5" (strings only)."""
    return isinstance(value, str) and value in LEGACY_COLOR_MAP


def resolve_legacy_color(value: Any) -> Any:
    """Map a legacy code to its hex; any other value passes through."""
    if is_legacy_color(value):
        return LEGACY_COLOR_MAP[value]
    return value


def health_color(score: Optional[float]) -> str:
    """
    Palette color for a 0-100 health score.

    None maps to health.unknown.
    """
    if score is None:
        return brand_color("health", "unknown")
    if not 0.0 <= score <= 100.0:
        raise ValueError(f"Health score must be 0-100, got {score}")
    key = next(key for lower, key in HEALTH_THRESHOLDS if score >= lower)
    return brand_color("health", key)
