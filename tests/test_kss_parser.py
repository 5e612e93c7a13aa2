"""Tests for the KSS comment parser."""

from __future__ import annotations

import pytest

from kssdoc.exceptions import BlockParseError
from kssdoc.kss_parser import ParsedModifier, ParseOptions, parse_kss


class TestParseKss:
    """Tests for parse_kss."""

    def test_parses_block_comment_with_stars(self) -> None:
        text = "\n".join(
            [
                "/**",
                " * Alerts",
                " *",
                " * Shows a message.",
                " *",
                " * Second paragraph.",
                " *",
                " * Styleguide Components - Alerts.",
                " */",
            ]
        )

        [section] = parse_kss(text)

        assert section.header == "Alerts"
        assert section.description == "Shows a message.\n\nSecond paragraph."
        assert section.reference == "Components - Alerts"

    def test_style_guide_spelling_variant(self) -> None:
        [section] = parse_kss("// Grid\n//\n// Style guide 2.1.")

        assert section.reference == "2.1"

    def test_no_reference_yields_no_sections(self) -> None:
        assert parse_kss("// Some notes\n//\n// More notes") == []

    def test_trailing_paragraphs_after_reference_are_dropped(self) -> None:
        sections = parse_kss("/*\nA\n\nStyleguide 1\n\nDangling\n*/")

        assert [s.reference for s in sections] == ["1"]

    def test_each_reference_closes_a_section(self) -> None:
        sections = parse_kss("/*\nA\n\nStyleguide 1\n\nB\n\nStyleguide 2\n*/")

        assert [(s.header, s.reference) for s in sections] == [("A", "1"), ("B", "2")]

    def test_multiline_markup(self) -> None:
        text = "// Card\n//\n// Markup:\n// <div class=\"card\">\n//   <p>Hi</p>\n// </div>\n//\n// Styleguide Card"

        [section] = parse_kss(text)

        assert section.markup == '<div class="card">\n  <p>Hi</p>\n</div>'

    def test_modifier_continuation_lines(self) -> None:
        text = "\n".join(
            [
                "// Button",
                "//",
                "// .large - A big",
                "//   button.",
                "// :disabled - Disabled state.",
                "//",
                "// Styleguide Button",
            ]
        )

        [section] = parse_kss(text)

        assert [(m.name, m.description) for m in section.modifiers] == [
            (".large", "A big button."),
            (":disabled", "Disabled state."),
        ]

    def test_paragraph_with_plain_lines_is_not_modifiers(self) -> None:
        text = "// Button\n//\n// .large - A big button.\n// Plain text line.\n//\n// Styleguide Button"

        [section] = parse_kss(text)

        assert section.modifiers == []
        assert ".large - A big button." in section.description

    def test_invalid_weight_raises(self) -> None:
        with pytest.raises(BlockParseError, match="Invalid weight"):
            parse_kss("// A\n//\n// Weight: 1.5\n//\n// Styleguide A")

    def test_negative_weight(self) -> None:
        [section] = parse_kss("// A\n//\n// Weight: -3\n//\n// Styleguide A")

        assert section.weight == -3

    def test_custom_property_is_captured(self) -> None:
        text = "// A\n//\n// Since-version: 2.0\n//\n// Styleguide A"

        [section] = parse_kss(text, ParseOptions(custom=["Since-version"]))

        assert section.custom == {"sinceVersion": "2.0"}

    def test_unknown_property_stays_in_description(self) -> None:
        [section] = parse_kss("// A\n//\n// Note: hello\n//\n// Styleguide A")

        assert section.custom == {}
        assert section.description == "Note: hello"


class TestParsedModifier:
    """Tests for ParsedModifier.class_name."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            (".primary", "primary"),
            (":hover", "pseudo-class-hover"),
            (".btn.is-active:hover", "btn is-active pseudo-class-hover"),
        ],
    )
    def test_class_name(self, name: str, expected: str) -> None:
        assert ParsedModifier(name=name, description="").class_name == expected


class TestReferenceWithoutBlankLine:
    """A reference line may directly follow the previous paragraph."""

    def test_reference_closes_preceding_paragraph(self) -> None:
        [section] = parse_kss("// Tables\n//\n// Striped rows.\n// Styleguide Tables")

        assert section.header == "Tables"
        assert section.description == "Striped rows."
        assert section.reference == "Tables"
