"""Test setup for kssdoc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def forms_scss() -> str:
    """SCSS source documenting a small forms hierarchy."""
    return (
        "// Forms\n"
        "//\n"
        "// Form controls.\n"
        "//\n"
        "// Styleguide Forms\n"
        "\n"
        "// Buttons\n"
        "//\n"
        "// .primary - Primary button.\n"
        "//\n"
        '// Markup: <button class="{{modifier_class}}">Go</button>\n'
        "//\n"
        "// Styleguide Forms - Buttons\n"
        ".button { color: red; }\n"
        "\n"
        "// Inputs\n"
        "//\n"
        "// Styleguide Forms - Inputs\n"
        "input { border: 0; }\n"
    )


@pytest.fixture
def base_css() -> str:
    """Plain CSS source with a single block comment section."""
    return "/*\nBase\n\nStyleguide Base\n*/\nbody { margin: 0; }\n"
