"""Win (和了) detection - standard form and seven pairs.

All functions take a Hand and never modify it; each recursion level works on
a fresh Hand returned by Hand.with_removed.
"""

from typing import List

from machi.core.hand import Hand
from machi.core.meld import Decomposition, Meld

SEVEN_PAIRS = 'seven_pairs'
STANDARD = 'standard'

WINNING_HAND_SIZE = 14


def can_form_melds(hand: Hand) -> bool:
    """Check whether the hand splits completely into triplets and sequences."""
    if len(hand) == 0:
        return True
    if len(hand) % 3 != 0:
        return False

    # The lowest tile is either part of its own triplet or starts a sequence
    tile = hand.lowest_tile()

    if hand.count(tile) >= 3:
        if can_form_melds(hand.with_removed(tile, 3)):
            return True

    if tile.number <= 7:
        second, third = tile.shifted(1), tile.shifted(2)
        if hand.count(second) >= 1 and hand.count(third) >= 1:
            remaining = hand.with_removed(tile).with_removed(second).with_removed(third)
            if can_form_melds(remaining):
                return True

    return False


def is_seven_pairs(hand: Hand) -> bool:
    """Check seven pairs (七対子): seven distinct tiles, two copies each."""
    if len(hand) != WINNING_HAND_SIZE:
        return False
    pairs = sum(1 for c in hand.counts if c == 2)
    return pairs == 7


def is_standard_agari(hand: Hand) -> bool:
    """Check standard form (4 melds + 1 pair)."""
    if len(hand) != WINNING_HAND_SIZE:
        return False
    for tile, count in hand.items():
        if count < 2:
            continue
        if can_form_melds(hand.with_removed(tile, 2)):
            return True
    return False


def is_winning_hand(hand: Hand, allow_seven_pairs: bool = True) -> bool:
    """Check if 14 tiles form any winning shape. Other sizes are never winning."""
    if len(hand) != WINNING_HAND_SIZE:
        return False
    if allow_seven_pairs and is_seven_pairs(hand):
        return True
    return is_standard_agari(hand)


def get_agari_shapes(hand: Hand, allow_seven_pairs: bool = True) -> List[str]:
    """Winning shapes the hand satisfies, seven pairs first."""
    shapes = []
    if allow_seven_pairs and is_seven_pairs(hand):
        shapes.append(SEVEN_PAIRS)
    if is_standard_agari(hand):
        shapes.append(STANDARD)
    return shapes


def decompose_standard(hand: Hand) -> List[Decomposition]:
    """Find all standard decompositions (1 pair + 4 melds) of a 14-tile hand."""
    if len(hand) != WINNING_HAND_SIZE:
        return []

    results = []
    for tile, count in hand.items():
        if count < 2:
            continue
        for melds in _find_all_melds(hand.with_removed(tile, 2)):
            results.append(Decomposition(tile, tuple(melds)))
    return results


def _find_all_melds(hand: Hand) -> List[List[Meld]]:
    """Recursively collect every meld partition of the hand."""
    if len(hand) == 0:
        return [[]]
    if len(hand) % 3 != 0:
        return []

    tile = hand.lowest_tile()
    results = []

    if hand.count(tile) >= 3:
        for rest in _find_all_melds(hand.with_removed(tile, 3)):
            results.append([Meld.triplet(tile)] + rest)

    if tile.number <= 7:
        second, third = tile.shifted(1), tile.shifted(2)
        if hand.count(second) >= 1 and hand.count(third) >= 1:
            remaining = hand.with_removed(tile).with_removed(second).with_removed(third)
            for rest in _find_all_melds(remaining):
                results.append([Meld.sequence(tile)] + rest)

    return results
