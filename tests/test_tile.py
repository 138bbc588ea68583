"""Tests for tile.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from machi.core.tile import (
    Tile, TileSuit, InvalidTile, ALL_TILES, MAX_COPIES,
    tiles_from_string, tiles_to_string,
)


class TestTileBasic:
    def test_tile_count(self):
        assert len(ALL_TILES) == 27
        assert len(set(ALL_TILES)) == 27

    def test_index_matches_position(self):
        for i, tile in enumerate(ALL_TILES):
            assert tile.index27 == i
            assert Tile.from_index(i) == tile

    def test_suit_assignment(self):
        assert ALL_TILES[0].suit == TileSuit.MAN
        assert ALL_TILES[0].number == 1
        assert ALL_TILES[9].suit == TileSuit.PIN
        assert ALL_TILES[18].suit == TileSuit.SOU
        assert ALL_TILES[26].number == 9

    def test_suit_letter_or_enum(self):
        assert Tile('p', 5) == Tile(TileSuit.PIN, 5)
        assert Tile('S', 3) == Tile(TileSuit.SOU, 3)

    def test_max_copies(self):
        assert MAX_COPIES == 4


class TestTileOrdering:
    def test_suit_then_number(self):
        assert Tile('m', 9) < Tile('p', 1)
        assert Tile('p', 9) < Tile('s', 1)
        assert Tile('s', 2) > Tile('s', 1)
        assert Tile('m', 3) <= Tile('m', 3)

    def test_sorted_all_tiles_is_canonical(self):
        shuffled = list(reversed(ALL_TILES))
        assert sorted(shuffled) == ALL_TILES

    def test_hash_by_value(self):
        assert len({Tile('m', 1), Tile('m', 1), Tile.from_name("1m")}) == 1


class TestTileNames:
    def test_name_round_trip(self):
        for tile in ALL_TILES:
            assert Tile.from_name(tile.name) == tile
            assert str(tile) == tile.name

    def test_name_format(self):
        assert Tile('m', 1).name == "1m"
        assert Tile(TileSuit.PIN, 9).name == "9p"
        assert repr(Tile('s', 5)) == "Tile(5s)"

    @pytest.mark.parametrize("bad", ["0m", "5z", "m5", "5", "", "10m", "55m", "東", "²m", "٣m"])
    def test_bad_names(self, bad):
        with pytest.raises(InvalidTile):
            Tile.from_name(bad)

    def test_bad_constructor_args(self):
        with pytest.raises(InvalidTile):
            Tile('x', 1)
        with pytest.raises(InvalidTile):
            Tile('m', 0)
        with pytest.raises(InvalidTile):
            Tile('m', 10)
        with pytest.raises(InvalidTile):
            Tile('m', True)
        with pytest.raises(InvalidTile):
            Tile.from_index(27)

    def test_invalid_tile_is_value_error(self):
        assert issubclass(InvalidTile, ValueError)


class TestShifted:
    def test_within_suit(self):
        assert Tile('m', 1).shifted(2) == Tile('m', 3)
        assert Tile('p', 7).shifted(2) == Tile('p', 9)

    def test_never_wraps(self):
        assert Tile('m', 8).shifted(2) is None
        assert Tile('p', 9).shifted(1) is None
        assert Tile('s', 1).shifted(-1) is None


class TestTilesFromString:
    def test_basic(self):
        tiles = tiles_from_string("123m")
        assert [t.name for t in tiles] == ["1m", "2m", "3m"]

    def test_mixed_suits(self):
        tiles = tiles_from_string("1m1p1s")
        assert [t.suit for t in tiles] == [TileSuit.MAN, TileSuit.PIN, TileSuit.SOU]

    def test_whitespace_ignored(self):
        assert tiles_from_string(" 12m 3p ") == tiles_from_string("12m3p")

    def test_keeps_input_order(self):
        assert [t.name for t in tiles_from_string("9s1m")] == ["9s", "1m"]

    @pytest.mark.parametrize("bad", ["123", "m", "105m", "12z", "12m東", "1m2", "²m", "1٣m"])
    def test_rejects_bad_notation(self, bad):
        with pytest.raises(InvalidTile):
            tiles_from_string(bad)


class TestTilesToString:
    def test_sorted_and_grouped(self):
        tiles = tiles_from_string("5p3m1m2m9s")
        assert tiles_to_string(tiles) == "123m5p9s"

    def test_round_trip(self):
        text = "1112345678999m"
        assert tiles_to_string(tiles_from_string(text)) == text

    def test_empty(self):
        assert tiles_to_string([]) == ""
