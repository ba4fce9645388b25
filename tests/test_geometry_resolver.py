"""
Tests for geometry axis resolution.
"""

import pytest

from IC_Libs.OperationLib.geometry_resolver import (
    parse_int_or_zero,
    parse_unsigned,
    resolve_axis,
)


class TestResolveAxis:
    """Tests for resolve_axis."""

    @pytest.mark.parametrize("extent,origin", [(100, 0), (100, 30), (7, 10)])
    def test_wildcard_is_remaining_extent(self, extent, origin):
        assert resolve_axis("*", extent, origin) == extent - origin

    @pytest.mark.parametrize("extent", [0, 50, 1920])
    def test_plus_grows_full_extent(self, extent):
        assert resolve_axis("+5", extent, 12) == extent + 5

    @pytest.mark.parametrize("extent", [0, 50, 1920])
    def test_minus_shrinks_full_extent(self, extent):
        assert resolve_axis("-5", extent, 12) == extent - 5

    def test_absolute_value(self):
        assert resolve_axis("42", 100, 10) == 42

    @pytest.mark.parametrize("token", ["bogus", "", "4.5", "-x", "+", "--5", "+-5"])
    def test_malformed_tokens_are_zero(self, token):
        assert resolve_axis(token, 100, 0) == 0

    def test_no_clamping(self):
        assert resolve_axis("500", 100, 0) == 500
        assert resolve_axis("-150", 100, 0) == -50


class TestIntegerParsing:
    """Tests for the integer helpers."""

    def test_parse_int_or_zero(self):
        assert parse_int_or_zero("17") == 17
        assert parse_int_or_zero("-17") == -17
        assert parse_int_or_zero(" 3 ") == 3
        assert parse_int_or_zero("1_000") == 0
        assert parse_int_or_zero("abc") == 0

    def test_parse_unsigned_rejects_signs(self):
        assert parse_unsigned("12") == 12
        with pytest.raises(ValueError):
            parse_unsigned("-12")
        with pytest.raises(ValueError):
            parse_unsigned("")
