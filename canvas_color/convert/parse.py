# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Input parsing: heterogeneous color values → CanonicalColor.

Accepted shapes, tried in a fixed order (first match wins):

1. NAMED       CSS color keyword ("red", "RebeccaPurple")
2. HEX         "#rgb" or "#rrggbb"
3. PACKED      int 0xRRGGBB
4. FUNCTIONAL  "rgb()", "rgba()", "hsl()", "hsla()"
5. OBJECT      mapping with r, g, b and optional a
6. TUPLE       [r, g, b] or [r, g, b, a]

Shapes that match but carry out-of-range channels raise
OutOfRangeComponent instead of clamping.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from numbers import Integral, Real
from typing import Any, Union

import numpy as np

from canvas_color.convert.colorspace import hsl_to_rgb
from canvas_color.errors import InvalidColorFormat, OutOfRangeComponent
from canvas_color.schema import CanonicalColor

logger = logging.getLogger("canvas_color.parse")

ColorInput = Union[str, int, Mapping, list, tuple, np.ndarray]


# =============================================================================
# Named Colors (CSS Color Module Level 4)
# =============================================================================

NAMED_COLORS: dict[str, str] = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#00ffff",
    "aquamarine": "#7fffd4", "azure": "#f0ffff", "beige": "#f5f5dc",
    "bisque": "#ffe4c4", "black": "#000000", "blanchedalmond": "#ffebcd",
    "blue": "#0000ff", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#00ffff",
    "darkblue": "#00008b", "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9", "darkgreen": "#006400", "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b", "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f", "darkorange": "#ff8c00",
    "darkorchid": "#9932cc", "darkred": "#8b0000", "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f", "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1", "darkviolet": "#9400d3",
    "deeppink": "#ff1493", "deepskyblue": "#00bfff", "dimgray": "#696969",
    "dimgrey": "#696969", "dodgerblue": "#1e90ff", "firebrick": "#b22222",
    "floralwhite": "#fffaf0", "forestgreen": "#228b22", "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff", "gold": "#ffd700",
    "goldenrod": "#daa520", "gray": "#808080", "green": "#008000",
    "greenyellow": "#adff2f", "grey": "#808080", "honeydew": "#f0fff0",
    "hotpink": "#ff69b4", "indianred": "#cd5c5c", "indigo": "#4b0082",
    "ivory": "#fffff0", "khaki": "#f0e68c", "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd", "lightblue": "#add8e6",
    "lightcoral": "#f08080", "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90", "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a", "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa", "lightslategray": "#778899",
    "lightslategrey": "#778899", "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0", "lime": "#00ff00", "limegreen": "#32cd32",
    "linen": "#faf0e6", "magenta": "#ff00ff", "maroon": "#800000",
    "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3", "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371", "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a", "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585", "midnightblue": "#191970",
    "mintcream": "#f5fffa", "mistyrose": "#ffe4e1", "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead", "navy": "#000080", "oldlace": "#fdf5e6",
    "olive": "#808000", "olivedrab": "#6b8e23", "orange": "#ffa500",
    "orangered": "#ff4500", "orchid": "#da70d6", "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9", "peru": "#cd853f", "pink": "#ffc0cb",
    "plum": "#dda0dd", "powderblue": "#b0e0e6", "purple": "#800080",
    "rebeccapurple": "#663399", "red": "#ff0000", "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1", "saddlebrown": "#8b4513", "salmon": "#fa8072",
    "sandybrown": "#f4a460", "seagreen": "#2e8b57", "seashell": "#fff5ee",
    "sienna": "#a0522d", "silver": "#c0c0c0", "skyblue": "#87ceeb",
    "slateblue": "#6a5acd", "slategray": "#708090", "slategrey": "#708090",
    "snow": "#fffafa", "springgreen": "#00ff7f", "steelblue": "#4682b4",
    "tan": "#d2b48c", "teal": "#008080", "thistle": "#d8bfd8",
    "tomato": "#ff6347", "turquoise": "#40e0d0", "violet": "#ee82ee",
    "wheat": "#f5deb3", "white": "#ffffff", "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00", "yellowgreen": "#9acd32",
}

# The one keyword with alpha
_TRANSPARENT = "transparent"


# =============================================================================
# Classification
# =============================================================================


class InputKind(Enum):
    """Recognized input shapes, in match order."""
    NAMED = "named"
    HEX = "hex"
    PACKED = "packed"
    FUNCTIONAL = "functional"
    OBJECT = "object"
    TUPLE = "tuple"


_HEX_RE = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6})")
_FUNCTIONAL_RE = re.compile(r"(rgba?|hsla?)\s*\((.*)\)", re.DOTALL)
_INT_RE = re.compile(r"[+-]?\d+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def classify_input(value: Any) -> InputKind:
    """
    Decide which shape a value has, without decoding it.

    Raises:
        InvalidColorFormat: If no shape applies
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in NAMED_COLORS or text == _TRANSPARENT:
            return InputKind.NAMED
        if text.startswith("#"):
            return InputKind.HEX
        if _FUNCTIONAL_RE.fullmatch(text):
            return InputKind.FUNCTIONAL
        raise InvalidColorFormat(f"Unrecognized color string: {value!r}")

    # bool is an int subclass but never a color
    if isinstance(value, bool):
        raise InvalidColorFormat(f"Unsupported color type: {type(value).__name__}")

    if isinstance(value, Integral):
        return InputKind.PACKED

    if isinstance(value, Mapping):
        return InputKind.OBJECT

    if isinstance(value, (list, tuple)):
        return InputKind.TUPLE

    if isinstance(value, np.ndarray) and value.ndim == 1:
        return InputKind.TUPLE

    raise InvalidColorFormat(f"Unsupported color type: {type(value).__name__}")


# =============================================================================
# Public Entry Point
# =============================================================================


def parse_color(value: ColorInput) -> CanonicalColor:
    """
    Parse any supported color value into a CanonicalColor.

    Strings and ints are memoized; mappings and sequences are parsed
    directly.

    Args:
        value: Color in any supported shape

    Returns:
        CanonicalColor

    Raises:
        InvalidColorFormat: If the value matches no recognized shape
        OutOfRangeComponent: If a channel is outside its valid range

    Example:
        >>> parse_color("#f00")
        CanonicalColor(r=255, g=0, b=0, a=1.0)
        >>> parse_color([0, 128, 255, 255])
        CanonicalColor(r=0, g=128, b=255, a=1.0)
    """
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return _parse_cached(value)
    return _parse(value)


@lru_cache(maxsize=None)
def _parse_cached(value: str | int) -> CanonicalColor:
    logger.debug("Parse cache miss for %r", value)
    return _parse(value)


def parse_cache_info():
    """Hit/miss statistics of the string/int parse cache."""
    return _parse_cached.cache_info()


def clear_parse_cache() -> None:
    _parse_cached.cache_clear()


def _parse(value: Any) -> CanonicalColor:
    kind = classify_input(value)
    if kind is InputKind.NAMED:
        return _parse_named(value)
    if kind is InputKind.HEX:
        return _parse_hex(value)
    if kind is InputKind.PACKED:
        return _parse_packed(value)
    if kind is InputKind.FUNCTIONAL:
        return _parse_functional(value)
    if kind is InputKind.OBJECT:
        return _parse_object(value)
    return _parse_tuple(value)


# =============================================================================
# Shape Decoders
# =============================================================================


def _parse_named(value: str) -> CanonicalColor:
    name = value.strip().lower()
    if name == _TRANSPARENT:
        return CanonicalColor(0, 0, 0, 0.0)
    return _parse_hex(NAMED_COLORS[name])


def _parse_hex(value: str) -> CanonicalColor:
    """Parse "#rgb" / "#rrggbb" (case-insensitive)."""
    text = value.strip().lower()
    m = _HEX_RE.fullmatch(text)
    if not m:
        raise InvalidColorFormat(
            f"Hex color must be #rgb or #rrggbb, got {value!r}"
        )
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return CanonicalColor(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def _parse_packed(value: int) -> CanonicalColor:
    n = int(value)
    if not 0 <= n <= 0xFFFFFF:
        raise OutOfRangeComponent(
            f"Packed color must be 0x000000-0xFFFFFF, got {n}"
        )
    return CanonicalColor((n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF)


def _parse_functional(value: str) -> CanonicalColor:
    """Parse rgb()/rgba()/hsl()/hsla() notation."""
    m = _FUNCTIONAL_RE.fullmatch(value.strip().lower())
    if not m:
        raise InvalidColorFormat(f"Malformed color function: {value!r}")
    func = m.group(1)
    parts = [p.strip() for p in m.group(2).split(",")]

    expected = 4 if func.endswith("a") else 3
    if len(parts) != expected:
        raise InvalidColorFormat(
            f"{func}() takes {expected} components, got {len(parts)} in {value!r}"
        )

    alpha = _parse_alpha(parts[3], value) if expected == 4 else 1.0

    if func.startswith("rgb"):
        r, g, b = (_parse_rgb_component(p, value) for p in parts[:3])
        return CanonicalColor(r, g, b, alpha)

    h = _parse_number(parts[0], value)
    if not 0.0 <= h <= 360.0:
        raise OutOfRangeComponent(f"Hue must be 0-360, got {h} in {value!r}")
    s = _parse_percent(parts[1], "Saturation", value)
    l = _parse_percent(parts[2], "Lightness", value)
    r, g, b = hsl_to_rgb(h % 360.0, s, l)
    return CanonicalColor(r, g, b, alpha)


def _parse_rgb_component(text: str, source: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise InvalidColorFormat(
            f"RGB component must be an integer, got {text!r} in {source!r}"
        )
    n = int(text)
    if not 0 <= n <= 255:
        raise OutOfRangeComponent(
            f"RGB component must be 0-255, got {n} in {source!r}"
        )
    return n


def _parse_number(text: str, source: str) -> float:
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidColorFormat(f"Expected a number, got {text!r} in {source!r}")
    return float(text)


def _parse_percent(text: str, label: str, source: str) -> float:
    number = _parse_number(text[:-1] if text.endswith("%") else text, source)
    if not 0.0 <= number <= 100.0:
        raise OutOfRangeComponent(
            f"{label} must be 0-100%, got {number} in {source!r}"
        )
    return number


def _parse_alpha(text: str, source: str) -> float:
    a = _parse_number(text, source)
    if not 0.0 <= a <= 1.0:
        raise OutOfRangeComponent(f"Alpha must be 0-1, got {a} in {source!r}")
    return a


def _parse_object(value: Mapping) -> CanonicalColor:
    missing = [k for k in ("r", "g", "b") if k not in value]
    if missing:
        raise InvalidColorFormat(
            f"Color object is missing keys {missing}: {dict(value)!r}"
        )
    r, g, b = (_channel(value[k], k) for k in ("r", "g", "b"))
    a = value.get("a")
    if a is None:
        return CanonicalColor(r, g, b)
    return CanonicalColor(r, g, b, _unit_alpha(a))


def _parse_tuple(value: Any) -> CanonicalColor:
    items = list(value.tolist() if isinstance(value, np.ndarray) else value)
    if len(items) not in (3, 4):
        raise InvalidColorFormat(
            f"Color sequence must have 3 or 4 elements, got {len(items)}"
        )
    r, g, b = (_channel(v, k) for v, k in zip(items[:3], ("r", "g", "b")))
    if len(items) == 3:
        return CanonicalColor(r, g, b)
    return CanonicalColor(r, g, b, _tuple_alpha(items[3]))


def _channel(value: Any, name: str) -> int:
    """Validate an integral 0-255 channel from an object/tuple input."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidColorFormat(f"Channel {name} must be a number, got {value!r}")
    if not isinstance(value, Integral):
        if not float(value).is_integer():
            raise InvalidColorFormat(
                f"Channel {name} must be an integer, got {value!r}"
            )
    n = int(value)
    if not 0 <= n <= 255:
        raise OutOfRangeComponent(f"Channel {name} must be 0-255, got {n}")
    return n


def _unit_alpha(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidColorFormat(f"Alpha must be a number, got {value!r}")
    a = float(value)
    if not 0.0 <= a <= 1.0:
        raise OutOfRangeComponent(f"Alpha must be 0-1, got {a}")
    return a


def _tuple_alpha(value: Any) -> float:
    """
    Normalize the 4th sequence element.

    Values above 1 are 8-bit alpha (0-255) and are divided by 255;
    values in [0, 1] are already normalized.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidColorFormat(f"Alpha must be a number, got {value!r}")
    a = float(value)
    if a > 1.0:
        if a > 255.0:
            raise OutOfRangeComponent(f"8-bit alpha must be 0-255, got {a}")
        return a / 255.0
    return _unit_alpha(a)
