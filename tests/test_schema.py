# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import json

import pytest

from canvas_color.errors import OutOfRangeComponent
from canvas_color.schema import (
    CanonicalColor,
    ColorMetadata,
    ColorValidation,
    OutputFormat,
    TerminalSupport,
    ValidationIssue,
    WCAGLevel,
)


class TestCanonicalColor:

    def test_defaults_to_opaque(self):
        c = CanonicalColor(1, 2, 3)
        assert c.a == 1.0
        assert c.is_opaque

    def test_equality_is_field_equality(self):
        assert CanonicalColor(255, 0, 0) == CanonicalColor(255, 0, 0, 1)
        assert CanonicalColor(255, 0, 0) != CanonicalColor(255, 0, 0, 0.5)

    def test_derived_views(self):
        c = CanonicalColor(255, 0, 0)
        assert c.hex == "#ff0000"
        assert c.packed == 0xFF0000
        assert c.rgb == (255, 0, 0)
        assert c.hsl == pytest.approx((0.0, 100.0, 50.0))

    @pytest.mark.parametrize("kwargs", [
        {"r": 256, "g": 0, "b": 0},
        {"r": 0, "g": -1, "b": 0},
        {"r": 0, "g": 0, "b": 0, "a": 1.5},
        {"r": 0, "g": 0, "b": 0, "a": -0.1},
    ])
    def test_range_validation(self, kwargs):
        with pytest.raises(OutOfRangeComponent):
            CanonicalColor(**kwargs)

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError, match="Channel r"):
            CanonicalColor(300, 0, 0)

    def test_non_integer_channel(self):
        with pytest.raises(OutOfRangeComponent):
            CanonicalColor(1.5, 0, 0)
        with pytest.raises(OutOfRangeComponent):
            CanonicalColor(True, 0, 0)

    def test_frozen(self):
        c = CanonicalColor(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 4

    def test_with_alpha(self):
        c = CanonicalColor(1, 2, 3).with_alpha(0.5)
        assert c == CanonicalColor(1, 2, 3, 0.5)

    def test_to_dict_roundtrip(self):
        c = CanonicalColor(10, 20, 30, 0.75)
        assert CanonicalColor.from_dict(c.to_dict()) == c

    def test_from_dict_default_alpha(self):
        assert CanonicalColor.from_dict({"r": 1, "g": 2, "b": 3}).a == 1.0


class TestOutputFormat:

    def test_lookup_by_tag(self):
        assert OutputFormat.lookup("HEX") is OutputFormat.HEX_UPPER
        assert OutputFormat.lookup("hex") is OutputFormat.HEX
        assert OutputFormat.lookup("[rgba]") is OutputFormat.RGBA_TUPLE

    def test_lookup_member(self):
        assert OutputFormat.lookup(OutputFormat.ANSI) is OutputFormat.ANSI

    def test_lookup_unknown(self):
        assert OutputFormat.lookup("ansi-8") is None


class TestReports:

    def test_issue_to_dict_omits_empty_fields(self):
        d = ValidationIssue("info", "legacy", "msg").to_dict()
        assert d == {"severity": "info", "category": "legacy", "message": "msg"}

    def test_issue_to_dict_full(self):
        issue = ValidationIssue(
            "warning", "style", "msg", suggestion="fix", metadata={"context_id": "n"},
        )
        d = issue.to_dict()
        assert d["suggestion"] == "fix"
        assert d["metadata"] == {"context_id": "n"}

    def test_validation_to_dict(self):
        v = ColorValidation(valid=False, issues=(ValidationIssue("error", "color", "bad"),), error="bad")
        d = v.to_dict()
        assert d["valid"] is False
        assert d["error"] == "bad"
        assert d["issues"][0]["category"] == "color"

    def _metadata(self, **overrides):
        fields = dict(
            input=(1, 2, 3),
            normalized="#010203",
            color=CanonicalColor(1, 2, 3),
            contrast_ratio=20.0,
            is_accessible=True,
            wcag_level=WCAGLevel.AAA,
            terminal_support=TerminalSupport(ansi16=False, ansi256=False),
            context_id="core:db",
        )
        fields.update(overrides)
        return ColorMetadata(**fields)

    def test_metadata_json(self):
        data = json.loads(self._metadata().to_json())
        assert data["input"] == [1, 2, 3]
        assert data["wcag_level"] == "AAA"
        assert data["terminal_support"] == {"ansi16": False, "ansi256": False, "ansi16m": True}
        assert data["color"] == {"r": 1, "g": 2, "b": 3, "a": 1.0}

    def test_metadata_rejects_ratio_below_one(self):
        with pytest.raises(ValueError, match="Contrast"):
            self._metadata(contrast_ratio=0.5)
