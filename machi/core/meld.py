"""Meld (面子) and decomposition data structures."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .tile import Tile


class MeldType(Enum):
    TRIPLET = "triplet"    # 刻子
    SEQUENCE = "sequence"  # 順子


@dataclass(frozen=True)
class Meld:
    """A frozen three-tile group.

    Attributes:
        meld_type: Triplet or sequence
        tiles: The three tiles, ascending
    """
    meld_type: MeldType
    tiles: tuple  # tuple of Tile

    @classmethod
    def triplet(cls, tile: Tile) -> 'Meld':
        return cls(MeldType.TRIPLET, (tile, tile, tile))

    @classmethod
    def sequence(cls, first: Tile) -> 'Meld':
        """Sequence starting at `first`; first.number must be 7 or lower."""
        second, third = first.shifted(1), first.shifted(2)
        if third is None:
            raise ValueError(f"no sequence starts at {first.name}")
        return cls(MeldType.SEQUENCE, (first, second, third))

    @property
    def first_tile(self) -> Tile:
        return self.tiles[0]

    @property
    def name(self) -> str:
        return ''.join(str(t.number) for t in self.tiles) + self.first_tile.suit.char


@dataclass(frozen=True)
class Decomposition:
    """One standard-shape reading of a winning hand: a pair plus melds."""
    pair: Tile
    melds: Tuple[Meld, ...]

    @property
    def name(self) -> str:
        """Shorthand like '55p 123m 456m 789s 111p'."""
        head = f"{self.pair.number}{self.pair.name}"
        return " ".join([head] + [m.name for m in self.melds])
