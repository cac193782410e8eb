"""Tests for nullable text normalization."""
import pytest

from app.utils.nullable import normalize_optional_text


def test_absent_value_renders_empty():
    assert normalize_optional_text(None) == ""


def test_empty_value_renders_empty():
    assert normalize_optional_text("") == ""


@pytest.mark.parametrize(
    "stored, expected",
    [
        ("{urgent}", "urgent"),
        ("{{nested}}", "nested"),
        ("{left", "left"),
        ("right}", "right"),
        ("a{b}c", "a{b}c"),
        ("plain", "plain"),
        ("{}", ""),
    ],
)
def test_brace_decoration_is_trimmed(stored, expected):
    assert normalize_optional_text(stored) == expected
