"""Wall (牌山) used to deal random sample hands."""

import random
from typing import List, Optional, Sequence

from .hand import Hand
from .tile import ALL_TILES, MAX_COPIES, Tile, TileSuit


class Wall:
    """Four copies of every tile of the chosen suits, shuffled.

    Dealing from a wall can never produce a fifth copy of a tile, so every
    dealt hand satisfies the copy limit.
    """

    def __init__(self, suits: Optional[Sequence[TileSuit]] = None,
                 rng: Optional[random.Random] = None, shuffle: bool = True):
        self.rng = rng or random.Random()
        if suits is None:
            # Single-suit (清一色) hands by default
            suits = [self.rng.choice(list(TileSuit))]
        self.suits = tuple(suits)
        self._build_wall(shuffle)

    def _build_wall(self, shuffle: bool):
        self.all_tiles: List[Tile] = [
            tile for tile in ALL_TILES if tile.suit in self.suits
            for _ in range(MAX_COPIES)
        ]
        if shuffle:
            self.rng.shuffle(self.all_tiles)
        self.live_wall = list(self.all_tiles)

    @property
    def remaining(self) -> int:
        return len(self.live_wall)

    @property
    def is_empty(self) -> bool:
        return len(self.live_wall) == 0

    @property
    def total_tiles(self) -> int:
        return MAX_COPIES * 9 * len(self.suits)

    def draw(self) -> Optional[Tile]:
        if self.live_wall:
            return self.live_wall.pop(0)
        return None

    def deal(self, n: int = 13) -> Hand:
        """Draw n tiles into a Hand."""
        if n > self.remaining:
            raise ValueError(f"cannot deal {n} tiles, {self.remaining} left")
        return Hand.from_tiles(self.draw() for _ in range(n))


def random_hand(size: int = 13, suits: Optional[Sequence[TileSuit]] = None,
                rng: Optional[random.Random] = None) -> Hand:
    """Deal a random hand from a fresh wall."""
    return Wall(suits=suits, rng=rng).deal(size)
