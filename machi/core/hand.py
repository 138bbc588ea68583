"""Hand as an immutable tile multiset (27 copy counts)."""

from typing import Iterable, Iterator, List, Optional, Tuple

from .tile import ALL_TILES, MAX_COPIES, NUM_TILE_TYPES, Tile, tiles_from_string, tiles_to_string


class InvalidHand(ValueError):
    """Raised when a hand holds more than MAX_COPIES of a tile type."""


class Hand:
    """Unordered multiset of tiles.

    Every operation returns a new Hand; the counts of an existing Hand never
    change, so recursive searches can branch on the same Hand safely.

    Attributes:
        counts: 27-tuple of copy counts, indexed by Tile.index27
    """
    __slots__ = ('_counts', '_total')

    def __init__(self, counts: Iterable[int] = ()):
        counts = tuple(counts) or (0,) * NUM_TILE_TYPES
        if len(counts) != NUM_TILE_TYPES:
            raise InvalidHand(f"expected {NUM_TILE_TYPES} counts, got {len(counts)}")
        if any(c < 0 for c in counts):
            raise InvalidHand("tile counts cannot be negative")
        self._counts = counts
        self._total = sum(counts)

    @classmethod
    def empty(cls) -> 'Hand':
        return cls()

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> 'Hand':
        """Build a hand, rejecting more than four copies of any tile."""
        arr = [0] * NUM_TILE_TYPES
        for tile in tiles:
            arr[tile.index27] += 1
            if arr[tile.index27] > MAX_COPIES:
                raise InvalidHand(f"more than {MAX_COPIES} copies of {tile.name}")
        return cls(arr)

    @classmethod
    def from_string(cls, s: str) -> 'Hand':
        """Parse shorthand like '1112345678999m'."""
        return cls.from_tiles(tiles_from_string(s))

    @property
    def counts(self) -> Tuple[int, ...]:
        return self._counts

    def count(self, tile: Tile) -> int:
        return self._counts[tile.index27]

    def is_at_copy_limit(self, tile: Tile) -> bool:
        return self._counts[tile.index27] == MAX_COPIES

    def with_removed(self, tile: Tile, n: int = 1) -> 'Hand':
        """Remove up to n copies; removing more than present stops at zero."""
        arr = list(self._counts)
        arr[tile.index27] = max(0, arr[tile.index27] - n)
        return Hand(arr)

    def with_added(self, tile: Tile, n: int = 1) -> 'Hand':
        """Add n copies. Unchecked against MAX_COPIES."""
        arr = list(self._counts)
        arr[tile.index27] += n
        return Hand(arr)

    def distinct_tiles(self) -> List[Tile]:
        """Tile types present, ascending."""
        return [ALL_TILES[i] for i, c in enumerate(self._counts) if c > 0]

    def lowest_tile(self) -> Optional[Tile]:
        for i, c in enumerate(self._counts):
            if c > 0:
                return ALL_TILES[i]
        return None

    def items(self) -> List[Tuple[Tile, int]]:
        return [(ALL_TILES[i], c) for i, c in enumerate(self._counts) if c > 0]

    def tiles(self) -> List[Tile]:
        """Sorted tile list, one entry per copy."""
        result = []
        for i, c in enumerate(self._counts):
            result.extend([ALL_TILES[i]] * c)
        return result

    def to_27_array(self) -> List[int]:
        return list(self._counts)

    def to_string(self) -> str:
        return tiles_to_string(self.tiles())

    def __len__(self):
        return self._total

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles())

    def __contains__(self, tile):
        return isinstance(tile, Tile) and self._counts[tile.index27] > 0

    def __eq__(self, other):
        if isinstance(other, Hand):
            return self._counts == other._counts
        return NotImplemented

    def __hash__(self):
        return hash(self._counts)

    def __repr__(self):
        return f"Hand({self.to_string()})"
