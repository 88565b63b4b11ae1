"""Tests for square helpers."""

import pytest

from chesslite.core.types import A8, E4, H1, all_squares, parse_square, square_name


class TestSquares:
    def test_parse_corners(self) -> None:
        assert parse_square("a8") == (0, 0)
        assert parse_square("h1") == (7, 7)
        assert parse_square("e4") == (4, 4)

    def test_named_constants(self) -> None:
        assert A8 == (0, 0)
        assert H1 == (7, 7)
        assert E4 == parse_square("e4")

    def test_square_name(self) -> None:
        assert square_name((0, 0)) == "a8"
        assert square_name((6, 4)) == "e2"

    def test_round_trip_all(self) -> None:
        squares = list(all_squares())
        assert len(squares) == 64
        assert all(parse_square(square_name(sq)) == sq for sq in squares)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44", "4e"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)
