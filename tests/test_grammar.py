"""Notation detection and grammar tests."""

import pytest

from pyhours import Notation, ParseError, detect_notation
from pyhours._grammar import classify, clock_groups, decimal_parts


class TestDetectNotation:
    @pytest.mark.parametrize(
        "text",
        ["1:23:45", "100:23:45", "1::45", "1:23:", "::", "1:23", ":01", "1:", ":", "0:60:00"],
    )
    def test_clock(self, text):
        assert detect_notation(text) is Notation.CLOCK

    @pytest.mark.parametrize("text", ["1", "1.", ".055", "1,055", "0.1", "", ".", ","])
    def test_decimal(self, text):
        assert detect_notation(text) is Notation.DECIMAL

    @pytest.mark.parametrize(
        "text",
        [
            "-1:23:45",
            "-1:23",
            "-1.0",
            "1:2:3:4",
            "1.2.3",
            "1,2.3",
            "1:30.5",
            " 1.5",
            "1.5 ",
            "1e3",
            "+1",
            "١:٢٣",
        ],
    )
    def test_unclassifiable(self, text):
        with pytest.raises(ParseError, match="could not classify input"):
            detect_notation(text)

    def test_error_mentions_input_internally(self):
        with pytest.raises(ParseError) as exc_info:
            detect_notation("abc")
        assert "'abc'" in exc_info.value.internal()
        assert "abc" not in str(exc_info.value)


class TestClockGroups:
    def _groups(self, text):
        notation, tree = classify(text)
        assert notation is Notation.CLOCK
        return clock_groups(tree)

    def test_hours_minutes_seconds(self):
        assert self._groups("100:23:45") == ("100", "23", "45")

    def test_empty_minutes(self):
        assert self._groups("1::45") == ("1", "", "45")

    def test_empty_seconds(self):
        assert self._groups("1:23:") == ("1", "23", "")

    def test_single_colon_has_no_hours(self):
        assert self._groups("10:23") == ("", "10", "23")

    def test_single_colon_empty_minutes(self):
        assert self._groups(":01") == ("", "", "01")

    def test_all_empty(self):
        assert self._groups("::") == ("", "", "")

    def test_wide_groups(self):
        assert self._groups("0:100:0") == ("0", "100", "0")


class TestDecimalParts:
    def _parts(self, text):
        notation, tree = classify(text)
        assert notation is Notation.DECIMAL
        return decimal_parts(tree)

    def test_integer(self):
        assert self._parts("1") == ("1", "")

    def test_dot(self):
        assert self._parts("1.055") == ("1", "055")

    def test_comma(self):
        assert self._parts("1,055") == ("1", "055")

    def test_trailing_separator(self):
        assert self._parts("1.") == ("1", "")

    def test_leading_separator(self):
        assert self._parts(".1000") == ("", "1000")

    def test_empty(self):
        assert self._parts("") == ("", "")
