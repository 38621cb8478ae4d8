"""Tests for the shared color-function component parsers."""

from __future__ import annotations

import pytest

from monoui.colors.parsing import parse_byte, parse_number, parse_unit, split_function, to_byte


class TestSplitFunction:
    """Tests for split_function."""

    def test_plain_prefix(self) -> None:
        """Test name(...) yields its raw components."""
        assert split_function("rgb(1,2,3)", "rgb") == ["1", "2", "3"]

    def test_alpha_prefix_keeps_whitespace(self) -> None:
        """Test namea(...) components are returned untrimmed."""
        assert split_function(" rgba(1, 2, 3, 4) ", "rgb") == ["1", " 2", " 3", " 4"]

    def test_case_insensitive(self) -> None:
        """Test the function name ignores case."""
        assert split_function("HSL(1,2,3)", "hsl") == ["1", "2", "3"]

    def test_either_prefix_any_count(self) -> None:
        """Test the alpha prefix does not force four components."""
        assert split_function("rgba(1,2,3)", "rgb") == ["1", "2", "3"]

    @pytest.mark.parametrize(
        "text",
        [
            "rgb(1 2 3)",
            "hsl(1,2,3)",
            "rgb(1,2)",
            "rgb(10,20,30",
            "rgb 10,20,30)",
            "",
        ],
    )
    def test_rejects(self, text: str) -> None:
        """Test malformed or foreign calls are rejected."""
        assert split_function(text, "rgb") is None


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", 1.0),
            (" 1.5 ", 1.5),
            ("1.", 1.0),
            (".5", 0.5),
            ("+2", 2.0),
            ("-12.25", -12.25),
        ],
    )
    def test_accepts(self, text: str, expected: float) -> None:
        """Test invariant decimal numbers."""
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", " ", "abc", "1e5", "1,5", "- 2", "0x10", "nan", "1_000"])
    def test_rejects(self, text: str) -> None:
        """Test anything outside the invariant decimal grammar."""
        assert parse_number(text) is None


class TestParseUnit:
    """Tests for parse_unit."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0.5", 0.5), ("50%", 0.5), (" 25 % ", 0.25), ("150%", 1.5), ("-1", -1.0)],
    )
    def test_accepts(self, text: str, expected: float) -> None:
        """Test fractions and percentages."""
        assert parse_unit(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["%50", "50%x", "50%%", "half"])
    def test_rejects(self, text: str) -> None:
        """Test the percent sign must be last."""
        assert parse_unit(text) is None


class TestParseByte:
    """Tests for parse_byte and to_byte."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0), ("255", 255), (" 17 ", 17), ("100%", 255), ("50%", 128), ("200%", 255)],
    )
    def test_accepts(self, text: str, expected: int) -> None:
        """Test integers and percentages."""
        assert parse_byte(text) == expected

    @pytest.mark.parametrize("text", ["256", "-1", "1.5", "x", ""])
    def test_rejects(self, text: str) -> None:
        """Test out-of-range and non-integral plain numbers."""
        assert parse_byte(text) is None

    def test_to_byte_rounds_half_to_even(self) -> None:
        """Test 0.5 of 255 rounds up to the even 128."""
        assert to_byte(0.5) == 128

    def test_to_byte_clamps(self) -> None:
        """Test values outside the unit range saturate."""
        assert to_byte(-1.0) == 0
        assert to_byte(2.0) == 255
