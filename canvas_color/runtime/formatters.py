# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Output formatting: CanonicalColor → any supported encoding.

Each OutputFormat tag maps to one formatter in a dispatch table. Unknown
tags yield None so callers can probe formats; pass ``strict=True`` to
raise UnsupportedOutputFormat instead.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from canvas_color.convert.terminal import quantize_ansi16, quantize_ansi256
from canvas_color.errors import UnsupportedOutputFormat
from canvas_color.schema import CanonicalColor, OutputFormat

FormattedColor = Union[str, int, dict, tuple]

# Foreground SGR templates
ANSI_TRUECOLOR = "\x1b[38;2;{r};{g};{b}m"
ANSI_INDEXED = "\x1b[38;5;{index}m"
RESET = "\x1b[0m"


def format_alpha(a: float) -> str:
    """Render alpha with up to three decimals, no trailing zeros."""
    text = f"{a:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def _hsl_ints(color: CanonicalColor) -> tuple[int, int, int]:
    h, s, l = color.hsl
    return round(h) % 360, round(s), round(l)


def _to_css(color: CanonicalColor) -> str:
    return f"rgba({color.r}, {color.g}, {color.b}, {format_alpha(color.a)})"


def _to_rgb(color: CanonicalColor) -> str:
    return f"rgb({color.r}, {color.g}, {color.b})"


def _to_hsl(color: CanonicalColor) -> str:
    h, s, l = _hsl_ints(color)
    return f"hsl({h}, {s}%, {l}%)"


def _to_hsla(color: CanonicalColor) -> str:
    h, s, l = _hsl_ints(color)
    return f"hsla({h}, {s}%, {l}%, {format_alpha(color.a)})"


def _to_ansi_16m(color: CanonicalColor) -> str:
    return ANSI_TRUECOLOR.format(r=color.r, g=color.g, b=color.b)


def _to_ansi_256(color: CanonicalColor) -> str:
    return ANSI_INDEXED.format(index=quantize_ansi256(color))


def _to_ansi_16(color: CanonicalColor) -> str:
    return ANSI_INDEXED.format(index=quantize_ansi16(color))


_FORMATTERS: dict[OutputFormat, Callable[[CanonicalColor], Any]] = {
    OutputFormat.CSS: _to_css,
    OutputFormat.HEX: lambda c: c.hex,
    OutputFormat.HEX_UPPER: lambda c: c.hex.upper(),
    OutputFormat.NUMBER: lambda c: c.packed,
    OutputFormat.RGB: _to_rgb,
    OutputFormat.RGBA: _to_css,
    OutputFormat.HSL: _to_hsl,
    OutputFormat.HSLA: _to_hsla,
    OutputFormat.RGB_OBJECT: lambda c: {"r": c.r, "g": c.g, "b": c.b},
    OutputFormat.RGBA_OBJECT: lambda c: {"r": c.r, "g": c.g, "b": c.b, "a": c.a},
    OutputFormat.RGB_TUPLE: lambda c: (c.r, c.g, c.b),
    # 8-bit alpha, parseable again as a 4-tuple
    OutputFormat.RGBA_TUPLE: lambda c: (c.r, c.g, c.b, round(c.a * 255)),
    OutputFormat.ANSI: _to_ansi_16m,
    OutputFormat.ANSI_16M: _to_ansi_16m,
    OutputFormat.ANSI_256: _to_ansi_256,
    OutputFormat.ANSI_16: _to_ansi_16,
}


def format_color(
    color: CanonicalColor,
    fmt: OutputFormat | str,
    *,
    strict: bool = False,
) -> Optional[FormattedColor]:
    """Serialize a CanonicalColor.

    Args:
        color: The color to serialize.
        fmt: An OutputFormat member or its tag ("hex", "ansi-256", ...).
        strict: Raise on unknown tags instead of returning None.

    Returns:
        str, int, dict or tuple depending on the format; None for an
        unknown tag in permissive mode.

    Example::

        >>> format_color(CanonicalColor(255, 0, 0), "rgb")
        'rgb(255, 0, 0)'
        >>> format_color(CanonicalColor(255, 0, 0), "ansi-256")
        '\\x1b[38;5;196m'
    """
    member = OutputFormat.lookup(fmt)
    if member is None:
        if strict:
            raise UnsupportedOutputFormat(f"Unsupported output format: {fmt!r}")
        return None
    return _FORMATTERS[member](color)
