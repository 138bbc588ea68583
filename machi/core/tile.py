"""Tile definition for the three numbered suits (27 tile types)."""

from enum import IntEnum
from functools import total_ordering
from typing import Iterable, List, Optional


class TileSuit(IntEnum):
    MAN = 0   # 萬子
    PIN = 1   # 筒子
    SOU = 2   # 索子

    @property
    def char(self) -> str:
        return SUIT_CHARS[self]


SUIT_CHARS = {TileSuit.MAN: 'm', TileSuit.PIN: 'p', TileSuit.SOU: 's'}
CHAR_TO_SUIT = {ch: suit for suit, ch in SUIT_CHARS.items()}
TILE_DIGITS = "123456789"

MAX_COPIES = 4
NUM_TILE_TYPES = 27


class InvalidTile(ValueError):
    """Raised when a suit, rank or tile notation cannot be recognised."""


def _to_suit(suit) -> TileSuit:
    if isinstance(suit, TileSuit):
        return suit
    if isinstance(suit, str) and suit.lower() in CHAR_TO_SUIT:
        return CHAR_TO_SUIT[suit.lower()]
    raise InvalidTile(f"unknown suit: {suit!r}")


@total_ordering
class Tile:
    """Immutable tile identified by suit and number, ordered m < p < s then 1..9."""
    __slots__ = ('_suit', '_number', '_index27')

    def __init__(self, suit, number: int):
        suit = _to_suit(suit)
        if isinstance(number, bool) or not isinstance(number, int) or not (1 <= number <= 9):
            raise InvalidTile(f"tile number must be 1..9, got {number!r}")
        self._suit = suit
        self._number = number
        self._index27 = int(suit) * 9 + number - 1

    @classmethod
    def from_name(cls, name: str) -> 'Tile':
        """Parse a single tile name like '5p'."""
        if not isinstance(name, str) or len(name) != 2 or name[0] not in TILE_DIGITS:
            raise InvalidTile(f"bad tile name: {name!r}")
        return cls(name[1], int(name[0]))

    @classmethod
    def from_index(cls, index27: int) -> 'Tile':
        if not (0 <= index27 < NUM_TILE_TYPES):
            raise InvalidTile(f"tile index must be 0..26, got {index27}")
        return ALL_TILES[index27]

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def number(self) -> int:
        return self._number

    @property
    def index27(self) -> int:
        return self._index27

    @property
    def name(self) -> str:
        return f"{self._number}{self._suit.char}"

    def shifted(self, offset: int) -> Optional['Tile']:
        """Same-suit tile `offset` ranks away, or None outside 1..9."""
        number = self._number + offset
        if not (1 <= number <= 9):
            return None
        return ALL_TILES[self._index27 + offset]

    def __repr__(self):
        return f"Tile({self.name})"

    def __str__(self):
        return self.name

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._index27 == other._index27
        return NotImplemented

    def __hash__(self):
        return self._index27

    def __lt__(self, other):
        if isinstance(other, Tile):
            return self._index27 < other._index27
        return NotImplemented


# All 27 tile types in canonical order
ALL_TILES = [Tile(suit, n) for suit in TileSuit for n in range(1, 10)]


def tiles_from_string(s: str) -> List[Tile]:
    """Parse shorthand like '123m456p789s' into tiles.

    Digits are buffered until a suit letter closes the group. Whitespace is
    skipped; '0', an unterminated digit run or any other character raises
    InvalidTile.
    """
    tiles = []
    numbers = []
    for ch in s:
        if ch.isspace():
            continue
        if ch == "0":
            raise InvalidTile(f"tile number must be 1..9, got 0 in {s!r}")
        if ch in TILE_DIGITS:
            numbers.append(int(ch))
        elif ch.lower() in CHAR_TO_SUIT:
            if not numbers:
                raise InvalidTile(f"suit {ch!r} without numbers in {s!r}")
            tiles.extend(Tile(ch, n) for n in numbers)
            numbers = []
        else:
            raise InvalidTile(f"unexpected character {ch!r} in {s!r}")
    if numbers:
        raise InvalidTile(f"numbers without a suit at the end of {s!r}")
    return tiles


def tiles_to_string(tiles: Iterable[Tile]) -> str:
    """Sorted, grouped shorthand: [1m, 3m, 2m, 5p] -> '123m5p'."""
    parts = []
    digits = []
    suit = None
    for tile in sorted(tiles):
        if suit is not None and tile.suit != suit:
            parts.append(''.join(digits) + suit.char)
            digits = []
        suit = tile.suit
        digits.append(str(tile.number))
    if digits:
        parts.append(''.join(digits) + suit.char)
    return ''.join(parts)
