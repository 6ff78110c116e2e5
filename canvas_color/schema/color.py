# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Canonical color schema.

Design principles:
- Immutable: All types are frozen dataclasses
- Single source of truth: r, g, b, a are authoritative, HSL is derived
- Serializable: JSON-ready for reports and tooling

Every input format is parsed into a CanonicalColor and every output
format is produced from one. HSL is never stored, only computed, so
repeated conversions cannot drift.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral, Real
from typing import Any, Optional

from canvas_color.errors import OutOfRangeComponent


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class CanonicalColor:
    """
    A single sRGB color with straight alpha.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha (0.0 = transparent, 1.0 = opaque)
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate channel values are within range."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise OutOfRangeComponent(
                    f"Channel {name} must be an integer, got {value!r}"
                )
            if not 0 <= value <= 255:
                raise OutOfRangeComponent(
                    f"Channel {name} must be 0-255, got {value}"
                )
            object.__setattr__(self, name, int(value))
        if isinstance(self.a, bool) or not isinstance(self.a, Real):
            raise OutOfRangeComponent(f"Alpha must be a number, got {self.a!r}")
        if not 0.0 <= self.a <= 1.0:
            raise OutOfRangeComponent(f"Alpha must be 0-1, got {self.a}")
        object.__setattr__(self, "a", float(self.a))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb`` (alpha is dropped)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def packed(self) -> int:
        """24-bit ``0xRRGGBB`` integer."""
        return (self.r << 16) | (self.g << 8) | self.b

    @property
    def hsl(self) -> tuple[float, float, float]:
        """
        Derived HSL view.

        Returns:
            (h, s, l) with h in degrees [0, 360) and s, l in percent [0, 100]
        """
        from canvas_color.convert.colorspace import rgb_to_hsl
        return rgb_to_hsl(self.r, self.g, self.b)

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1.0

    def with_alpha(self, a: float) -> CanonicalColor:
        """Return a copy with a different alpha."""
        return CanonicalColor(self.r, self.g, self.b, a)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> CanonicalColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))


# =============================================================================
# Format Tags
# =============================================================================


class OutputFormat(Enum):
    """
    Output encodings understood by the format dispatch.

    The values are the tags callers pass as plain strings.
    """
    CSS = "css"
    HEX = "hex"
    HEX_UPPER = "HEX"
    NUMBER = "number"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    RGB_OBJECT = "{rgb}"
    RGBA_OBJECT = "{rgba}"
    RGB_TUPLE = "[rgb]"
    RGBA_TUPLE = "[rgba]"
    ANSI = "ansi"            # alias of ANSI_16M
    ANSI_16M = "ansi-16m"
    ANSI_256 = "ansi-256"
    ANSI_16 = "ansi-16"

    @classmethod
    def lookup(cls, tag: OutputFormat | str) -> Optional[OutputFormat]:
        """Resolve a tag to a member, or None when unknown."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None


# Formats whose output is a string (usable as terminal/markup text)
STRING_FORMATS = frozenset({
    OutputFormat.CSS,
    OutputFormat.HEX,
    OutputFormat.HEX_UPPER,
    OutputFormat.RGB,
    OutputFormat.RGBA,
    OutputFormat.HSL,
    OutputFormat.HSLA,
    OutputFormat.ANSI,
    OutputFormat.ANSI_16M,
    OutputFormat.ANSI_256,
    OutputFormat.ANSI_16,
})


# =============================================================================
# Accessibility / Terminal Annotations
# =============================================================================


class WCAGLevel(Enum):
    """WCAG 2.x conformance level reached by a contrast ratio."""
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA-large"  # large text only
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class TerminalSupport:
    """
    Whether a color survives each ANSI tier without visible loss.

    Advisory only: ansi16/ansi256 are a distance heuristic.
    """
    ansi16: bool
    ansi256: bool
    ansi16m: bool = True

    def to_dict(self) -> dict:
        return {
            "ansi16": self.ansi16,
            "ansi256": self.ansi256,
            "ansi16m": self.ansi16m,
        }


# =============================================================================
# Validation Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """
    A single finding from color validation.

    Attributes:
        severity: "error", "warning" or "info"
        category: Finding family (color, metadata, legacy, style,
            accessibility, terminal)
        message: Human-readable description
        suggestion: Optional remediation hint
        metadata: Structured details (context id, ratios, ...)
    """
    severity: str
    category: str
    message: str
    suggestion: Optional[str] = None
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "severity": self.severity,
            "category": self.category,
            "message": self.message,
        }
        if self.suggestion is not None:
            d["suggestion"] = self.suggestion
        if self.metadata:
            d["metadata"] = dict(self.metadata)
        return d


@dataclass(frozen=True, slots=True)
class ColorValidation:
    """
    Outcome of validating one canvas node color.

    Low contrast and off-palette colors are warnings; the color is still
    valid. Only unparseable input makes ``valid`` false.
    """
    valid: bool
    normalized_color: Optional[str] = None
    warnings: tuple[ValidationIssue, ...] = ()
    issues: tuple[ValidationIssue, ...] = ()
    error: Optional[str] = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "valid": self.valid,
            "normalized_color": self.normalized_color,
            "warnings": [w.to_dict() for w in self.warnings],
            "issues": [i.to_dict() for i in self.issues],
        }
        if self.error is not None:
            d["error"] = self.error
        return d


# =============================================================================
# Metadata Report
# =============================================================================


def _json_safe(value: Any) -> Any:
    """Copy a caller input into plain JSON types; anything else becomes its repr."""
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _json_safe(item) for key, item in value.items()}
    return repr(value)


@dataclass(frozen=True, slots=True)
class ColorMetadata:
    """
    Composite report for one color.

    Attributes:
        input: The caller's original value, kept verbatim for diagnostics
        normalized: Lowercase ``#rrggbb``
        color: The canonical color the report describes
        contrast_ratio: Contrast against the reference background (>= 1.0)
        is_accessible: True when contrast_ratio >= 4.5 (WCAG AA, normal text)
        wcag_level: Highest WCAG level reached
        terminal_support: Per-tier ANSI fidelity
        context_id: Identifier of the node/context the color belongs to
    """
    input: Any
    normalized: str
    color: CanonicalColor
    contrast_ratio: float
    is_accessible: bool
    wcag_level: WCAGLevel
    terminal_support: TerminalSupport
    context_id: str = ""

    def __post_init__(self) -> None:
        if self.contrast_ratio < 1.0:
            raise ValueError(
                f"Contrast ratio must be >= 1, got {self.contrast_ratio}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary (non-JSON parts of input become reprs)."""
        return {
            "input": _json_safe(self.input),
            "normalized": self.normalized,
            "color": self.color.to_dict(),
            "contrast_ratio": self.contrast_ratio,
            "is_accessible": self.is_accessible,
            "wcag_level": self.wcag_level.value,
            "terminal_support": self.terminal_support.to_dict(),
            "context_id": self.context_id,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
