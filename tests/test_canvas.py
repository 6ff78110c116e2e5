# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for the canvas-facing API (normalize, validate, terminal, reports)."""

import json
import logging

import numpy as np
import pytest

from canvas_color import (
    CANVAS_BRAND_COLORS,
    CanonicalColor,
    InvalidColorFormat,
    OutOfRangeComponent,
    UnsupportedOutputFormat,
    WCAGLevel,
    calculate_contrast_ratio,
    convert_all_canvas_colors,
    create_color_metadata,
    get_terminal_color,
    normalize_color,
    render_colored_node,
    semantic_color,
    validate_canvas_color,
)

RESET = "\x1b[0m"
RED_16M = "\x1b[38;2;255;0;0m"


def _categories(result):
    return [w.category for w in result.warnings]


# ---------------------------------------------------------------------------
# normalize_color
# ---------------------------------------------------------------------------

class TestNormalize:

    def test_equivalent_inputs(self):
        inputs = ["red", 0xFF0000, "#f00", "#ff0000", {"r": 255, "g": 0, "b": 0}, [255, 0, 0]]
        assert {normalize_color(x) for x in inputs} == {"#ff0000"}

    def test_other_shapes(self):
        assert normalize_color("rgb(0, 128, 255)") == "#0080ff"
        assert normalize_color("rgba(255, 0, 0, 0.5)") == "#ff0000"
        assert normalize_color("hsl(120, 100%, 50%)") == "#00ff00"
        assert normalize_color([255, 0, 0, 128]) == "#ff0000"
        assert normalize_color(CanonicalColor(1, 2, 3)) == "#010203"

    @pytest.mark.parametrize("value", [
        "red", "#ABC", 0x123456, "hsl(200, 50%, 40%)", {"r": 9, "g": 8, "b": 7},
        (250, 128, 114), "rgba(10, 20, 30, 0.3)",
    ])
    def test_idempotent(self, value):
        once = normalize_color(value)
        assert normalize_color(once) == once

    def test_invalid_name(self):
        with pytest.raises(InvalidColorFormat):
            normalize_color("not-a-color")

    def test_out_of_range_rgb(self):
        with pytest.raises(OutOfRangeComponent):
            normalize_color("rgb(300,0,0)")

    def test_out_of_range_alpha(self):
        with pytest.raises(OutOfRangeComponent):
            normalize_color("rgba(255,0,0,2)")

    def test_legacy_codes_are_not_colors_here(self):
        with pytest.raises(InvalidColorFormat):
            normalize_color("1")


class TestContrastHelper:

    def test_black_on_white(self):
        assert calculate_contrast_ratio("#000000", "#ffffff") == 21.0

    def test_light_gray(self):
        assert calculate_contrast_ratio("#cccccc", "#ffffff") < 4.5

    def test_blue(self):
        assert calculate_contrast_ratio("blue", 0xFFFFFF) > 4.5


# ---------------------------------------------------------------------------
# validate_canvas_color
# ---------------------------------------------------------------------------

class TestValidate:

    def test_legacy_color_is_converted(self):
        result = validate_canvas_color("1", "test:node")
        assert result.valid
        assert result.normalized_color == "#3b82f6"
        assert "legacy" in _categories(result)
        assert "style" not in _categories(result)

    def test_dark_brand_color_has_no_warnings(self):
        result = validate_canvas_color(CANVAS_BRAND_COLORS["brand"]["primary"], "service:test")
        assert result.valid
        assert result.warnings == ()

    def test_non_brand_color_warns(self):
        result = validate_canvas_color("#ff00ff", "node:magenta")
        assert result.valid
        assert "style" in _categories(result)

    def test_canonical_color_accepted(self):
        result = validate_canvas_color(CanonicalColor(255, 0, 0), "n")
        assert result.valid
        assert result.issues == ()
        assert result.normalized_color == "#ff0000"

    def test_low_contrast_warns(self):
        result = validate_canvas_color("#ffff00", "node:poor-contrast")
        assert result.valid
        access = [w for w in result.warnings if w.category == "accessibility"]
        assert len(access) == 1
        assert access[0].severity == "warning"
        assert access[0].metadata["contrast_ratio"] < 3.0
        assert access[0].metadata["context_id"] == "node:poor-contrast"

    def test_large_text_only_is_info(self):
        # #3b82f6 on white sits between 3.0 and 4.5
        result = validate_canvas_color("#3b82f6", "n")
        access = [w for w in result.warnings if w.category == "accessibility"]
        assert [w.severity for w in access] == ["info"]

    def test_background_override(self):
        result = validate_canvas_color("#ffffff", "n", background="#000000")
        assert "accessibility" not in _categories(result)

    def test_invalid_color(self):
        result = validate_canvas_color("not-a-color", "node:invalid")
        assert not result.valid
        assert result.normalized_color is None
        assert result.error
        assert [i.category for i in result.issues] == ["color"]

    def test_out_of_range_is_reported_not_raised(self):
        result = validate_canvas_color("rgb(300, 0, 0)", "n")
        assert not result.valid
        assert "0-255" in result.error

    @pytest.mark.parametrize("value", [
        "#ff0000", "red", "rgb(255,0,0)", 0xFF0000, {"r": 255, "g": 0, "b": 0}, [255, 0, 0],
    ])
    def test_valid_types(self, value):
        assert validate_canvas_color(value, "test:node").valid

    @pytest.mark.parametrize("value", [True, 1.5, object(), lambda: None, {1, 2}])
    def test_invalid_types(self, value):
        result = validate_canvas_color(value, "test:node")
        assert not result.valid
        assert result.issues[0].category == "metadata"

    @pytest.mark.parametrize("value", [{}, []])
    def test_empty_containers(self, value):
        result = validate_canvas_color(value, "test:node")
        assert not result.valid
        assert result.issues[0].category == "color"

    def test_missing_color_is_fine(self):
        result = validate_canvas_color(None, "test:node")
        assert result.valid
        assert result.normalized_color is None
        assert result.warnings == ()

    def test_terminal_advisories(self):
        result = validate_canvas_color("#ff0000", "n", terminal_advisories=True)
        tiers = [w.metadata["tier"] for w in result.warnings if w.category == "terminal"]
        assert tiers == ["ansi-16"]

    def test_terminal_advisories_off_by_default(self):
        result = validate_canvas_color("#ff0000", "n")
        assert "terminal" not in _categories(result)

    def test_to_dict(self):
        d = validate_canvas_color("1", "n").to_dict()
        assert d["valid"] is True
        assert d["warnings"][0]["category"] == "legacy"


# ---------------------------------------------------------------------------
# get_terminal_color / render_colored_node
# ---------------------------------------------------------------------------

class TestTerminalColor:

    def test_ansi(self):
        assert get_terminal_color({"color": "#ff0000"}, "ansi") == RED_16M

    def test_default_format_is_truecolor(self):
        assert get_terminal_color({"color": "#ff0000"}) == RED_16M

    def test_ansi_16(self):
        assert get_terminal_color({"color": "#ff0000"}, "ansi-16") == "\x1b[38;5;1m"

    def test_ansi_256(self):
        assert get_terminal_color({"color": "#ff0000"}, "ansi-256") == "\x1b[38;5;196m"

    def test_ansi_16m(self):
        assert get_terminal_color({"color": "#ff0000"}, "ansi-16m") == RED_16M

    def test_legacy(self):
        assert get_terminal_color({"color": "1"}, "ansi") == "\x1b[38;2;59;130;246m"

    def test_plain_string_reference(self):
        assert get_terminal_color("red", "hex") == "#ff0000"

    def test_rgb_object_is_a_color_not_a_node(self):
        assert get_terminal_color({"r": 255, "g": 0, "b": 0}) == RED_16M

    def test_black_packed_int_is_a_color(self):
        assert get_terminal_color(0, "hex") == "#000000"

    @pytest.mark.parametrize("ref", [{"color": None}, {}, {"color": ""}, None, ""])
    def test_no_color(self, ref):
        assert get_terminal_color(ref, "ansi") == ""

    def test_non_string_format_is_empty(self):
        assert get_terminal_color({"color": "#ff0000"}, "number") == ""

    def test_unknown_format_is_empty(self):
        assert get_terminal_color({"color": "#ff0000"}, "ansi-8") == ""

    def test_strict_format(self):
        with pytest.raises(UnsupportedOutputFormat):
            get_terminal_color({"color": "#ff0000"}, "{rgb}", strict=True)

    def test_invalid_color_raises(self):
        with pytest.raises(InvalidColorFormat):
            get_terminal_color({"color": "bogus"})


class TestRenderNode:

    def test_compact(self):
        node = {"id": "a", "text": "Title", "color": "#ff0000"}
        assert render_colored_node(node, compact=True) == f"{RED_16M}[a]{RESET}"

    def test_header_only(self):
        node = {"id": "a", "text": "Title\nBody", "color": "#ff0000"}
        assert render_colored_node(node) == f"{RED_16M}Title{RESET}"

    def test_show_metadata(self):
        node = {"id": "a", "text": "Title\nBody", "color": "#ff0000"}
        assert render_colored_node(node, show_metadata=True) == (
            f"{RED_16M}Title\nTitle\nBody...{RESET}"
        )

    def test_uncolored(self):
        node = {"id": "a", "text": "x" * 80}
        assert render_colored_node(node, compact=True) == "[a]"
        assert render_colored_node(node) == f"Node: a\n{'x' * 50}..."

    def test_other_tier(self):
        node = {"id": "a", "text": "T", "color": "#ff0000"}
        assert render_colored_node(node, fmt="ansi-256") == f"\x1b[38;5;196mT{RESET}"

    def test_unparseable_color_renders_uncolored(self, caplog):
        node = {"id": "a", "text": "t", "color": "bogus"}
        with caplog.at_level(logging.WARNING, logger="canvas_color.runtime"):
            assert render_colored_node(node, compact=True) == "[a]"
            assert render_colored_node(node) == "Node: a\nt..."
        assert any("node a" in r.getMessage() for r in caplog.records)

    def test_unknown_format_renders_uncolored(self):
        node = {"id": "a", "text": "t", "color": "#ff0000"}
        assert render_colored_node(node, compact=True, fmt="cmyk") == "[a]"


# ---------------------------------------------------------------------------
# convert_all_canvas_colors
# ---------------------------------------------------------------------------

class TestConvertAll:

    @pytest.fixture
    def canvas(self):
        return {
            "nodes": [
                {"id": "a", "color": "#ff0000"},
                {"id": "b"},
                {"color": "1"},
                {"id": "c", "color": "bogus"},
            ]
        }

    def test_hex(self, canvas):
        assert convert_all_canvas_colors(canvas, "hex") == {
            "a": "#ff0000",
            "b": None,
            "unknown": "#3b82f6",
            "c": None,
        }

    def test_structured_format(self, canvas):
        result = convert_all_canvas_colors(canvas, "{rgb}")
        assert result["a"] == {"r": 255, "g": 0, "b": 0}

    def test_unparseable_node_is_logged(self, canvas, caplog):
        with caplog.at_level(logging.WARNING, logger="canvas_color.runtime"):
            convert_all_canvas_colors(canvas, "hex")
        assert any("Skipping node c" in r.getMessage() for r in caplog.records)

    def test_unknown_format(self, canvas):
        result = convert_all_canvas_colors(canvas, "cmyk")
        assert result["a"] is None

    def test_unknown_format_strict(self, canvas):
        with pytest.raises(UnsupportedOutputFormat):
            convert_all_canvas_colors(canvas, "cmyk", strict=True)

    def test_empty_canvas(self):
        assert convert_all_canvas_colors({}, "hex") == {}


# ---------------------------------------------------------------------------
# create_color_metadata
# ---------------------------------------------------------------------------

class TestMetadata:

    def test_black(self):
        meta = create_color_metadata("#000000", "core:db")
        assert meta.normalized == "#000000"
        assert meta.contrast_ratio == 21.0
        assert meta.is_accessible
        assert meta.wcag_level is WCAGLevel.AAA
        assert meta.terminal_support.ansi16
        assert meta.terminal_support.ansi256
        assert meta.terminal_support.ansi16m
        assert meta.context_id == "core:db"

    def test_input_preserved(self):
        value = [255, 0, 0, 128]
        meta = create_color_metadata(value, "n")
        assert meta.input is value
        assert meta.color == CanonicalColor(255, 0, 0, 128 / 255)
        assert meta.normalized == "#ff0000"

    def test_low_contrast(self):
        meta = create_color_metadata("#ffff00", "n")
        assert not meta.is_accessible
        assert meta.wcag_level is WCAGLevel.FAIL

    def test_background_override(self):
        meta = create_color_metadata("#ffffff", "n", background="black")
        assert meta.contrast_ratio == 21.0

    def test_white_on_white(self):
        meta = create_color_metadata("#ffffff", "n")
        assert meta.contrast_ratio == 1.0
        assert not meta.is_accessible

    def test_legacy_code(self):
        assert create_color_metadata("2", "n").normalized == "#10b981"

    def test_json(self):
        data = json.loads(create_color_metadata(np.array([0, 0, 255]), "n").to_json())
        assert data["normalized"] == "#0000ff"
        assert data["terminal_support"]["ansi16m"] is True
        assert isinstance(data["input"], str)

    def test_json_numpy_channels(self):
        value = {"r": np.int64(1), "g": 2, "b": 3}
        data = json.loads(create_color_metadata(value, "n").to_json())
        assert data["input"] == {"r": 1, "g": 2, "b": 3}
        assert data["normalized"] == "#010203"

    def test_json_numpy_tuple(self):
        value = (np.uint8(255), np.int32(0), 0, np.float64(0.5))
        data = json.loads(create_color_metadata(value, "n").to_json())
        assert data["input"] == [255, 0, 0, 0.5]

    def test_invalid(self):
        with pytest.raises(InvalidColorFormat):
            create_color_metadata("nope", "n")


# ---------------------------------------------------------------------------
# semantic_color
# ---------------------------------------------------------------------------

class TestSemanticColor:

    def test_status_wins(self):
        assert semantic_color("service:api", status="deprecated", priority="low") == "#ef4444"

    def test_priority(self):
        assert semantic_color("x", priority="critical") == "#dc2626"

    def test_domain_prefix(self):
        assert semantic_color("service:api") == "#14b8a6"
        assert semantic_color("ui:dashboard") == "#f97316"

    def test_fallback(self):
        assert semantic_color("misc:thing") == "#0f172a"

    def test_unknown_status_falls_through(self):
        assert semantic_color("core:db", status="retired") == "#059669"
