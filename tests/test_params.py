"""Tests for auxiliary sg-* parameters."""

from __future__ import annotations

from kssdoc.params import get_additional_params, sanitize_params

KSS = "\n".join(
    [
        "// Dialog",
        "//",
        "// sg-angular-directive: myDialog",
        "// sg-wrapper:",
        '// <div class="wrap">',
        "//   <sg-wrapper-content/>",
        "// </div>",
        "//",
        "// Styleguide Dialog",
    ]
)


class TestGetAdditionalParams:
    """Tests for get_additional_params."""

    def test_extracts_single_and_multiline_values(self) -> None:
        params = get_additional_params(KSS)

        assert params == {
            "angularDirective": "myDialog",
            "wrapper": '<div class="wrap">\n  <sg-wrapper-content/>\n</div>',
        }

    def test_no_params(self) -> None:
        assert get_additional_params("// A\n//\n// Styleguide A") == {}

    def test_custom_prefix(self) -> None:
        params = get_additional_params("/* x-theme: dark\n\nStyleguide A */", prefix="x-")

        assert params == {"theme": "dark"}

    def test_value_stops_at_reference_line(self) -> None:
        params = get_additional_params("// A\n//\n// sg-note: hello\n// Styleguide A")

        assert params == {"note": "hello"}


class TestSanitizeParams:
    """Tests for sanitize_params."""

    def test_removes_parameter_lines(self) -> None:
        sanitized = sanitize_params(KSS)

        assert "sg-" not in sanitized
        assert "wrap" not in sanitized
        assert sanitized.splitlines()[0] == "// Dialog"
        assert sanitized.splitlines()[-1] == "// Styleguide Dialog"
        assert len(sanitized.splitlines()) == len(KSS.splitlines())

    def test_keeps_block_comment_markers(self) -> None:
        sanitized = sanitize_params("/* sg-theme: dark */")

        assert sanitized == "/* */"

    def test_normalizes_line_endings(self) -> None:
        assert sanitize_params("// A\r\n// Styleguide A") == "// A\n// Styleguide A"
