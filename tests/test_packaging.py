"""
Tests for what the distribution installs
"""
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_only_the_game_package_is_installed():
    text = PYPROJECT.read_text(encoding="utf-8")

    assert 'packages = ["guessnumber", "guessnumber.ui"]' in text
    assert "py-modules" not in text
    assert "[project.scripts]" not in text
