"""Waiting tile (待ち牌) enumeration for 13-tile hands."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple

from machi.core.hand import Hand
from machi.core.meld import Decomposition
from machi.core.tile import ALL_TILES, Tile
from machi.rules.agari import decompose_standard, get_agari_shapes, is_winning_hand

PRE_WIN_HAND_SIZE = 13


@dataclass(frozen=True)
class Wait:
    """A waiting tile, the winning shapes it completes and its standard readings."""
    tile: Tile
    shapes: Tuple[str, ...]
    decompositions: Tuple[Decomposition, ...] = ()


def _candidates(hand: Hand, respect_copy_limit: bool) -> List[Tile]:
    # A tile already held four times cannot be drawn again
    if respect_copy_limit:
        return [tile for tile in ALL_TILES if not hand.is_at_copy_limit(tile)]
    return list(ALL_TILES)


def calculate_waiting_tiles(hand: Hand, allow_seven_pairs: bool = True,
                            respect_copy_limit: bool = True,
                            parallel: bool = False,
                            max_workers: Optional[int] = None) -> List[Tile]:
    """Find all tiles that would complete this 13-tile hand.

    Candidates are tried in canonical order (1m..9s) and the result keeps that
    order. A hand of any other size has no waits.
    """
    if len(hand) != PRE_WIN_HAND_SIZE:
        return []

    candidates = _candidates(hand, respect_copy_limit)

    def completes(tile: Tile) -> bool:
        return is_winning_hand(hand.with_added(tile), allow_seven_pairs)

    if parallel:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(completes, candidates))
    else:
        results = [completes(tile) for tile in candidates]

    return [tile for tile, ok in zip(candidates, results) if ok]


def find_waits(hand: Hand, allow_seven_pairs: bool = True,
               respect_copy_limit: bool = True,
               parallel: bool = False,
               max_workers: Optional[int] = None) -> List[Wait]:
    """Waiting tiles together with the shapes and decompositions each one completes."""
    tiles = calculate_waiting_tiles(hand, allow_seven_pairs, respect_copy_limit,
                                    parallel, max_workers)
    waits = []
    for tile in tiles:
        complete = hand.with_added(tile)
        waits.append(Wait(
            tile,
            tuple(get_agari_shapes(complete, allow_seven_pairs)),
            tuple(decompose_standard(complete)),
        ))
    return waits
