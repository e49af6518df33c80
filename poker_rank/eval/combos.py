"""
Static 5-card index combinations for 5, 6 and 7 card hands.
"""

from poker_rank.config import HAND_SIZES
from poker_rank.errors import UnsupportedHandSize

FIVE_CHOOSE_FIVE = (
    (0, 1, 2, 3, 4),
)

SIX_CHOOSE_FIVE = (
    (0, 1, 2, 3, 4),
    (0, 1, 2, 3, 5),
    (0, 1, 2, 4, 5),
    (0, 1, 3, 4, 5),
    (0, 2, 3, 4, 5),
    (1, 2, 3, 4, 5),
)

SEVEN_CHOOSE_FIVE = (
    (0, 1, 2, 3, 4), (0, 1, 2, 3, 5), (0, 1, 2, 3, 6),
    (0, 1, 2, 4, 5), (0, 1, 2, 4, 6), (0, 1, 2, 5, 6),
    (0, 1, 3, 4, 5), (0, 1, 3, 4, 6), (0, 1, 3, 5, 6),
    (0, 1, 4, 5, 6), (0, 2, 3, 4, 5), (0, 2, 3, 4, 6),
    (0, 2, 3, 5, 6), (0, 2, 4, 5, 6), (0, 3, 4, 5, 6),
    (1, 2, 3, 4, 5), (1, 2, 3, 4, 6), (1, 2, 3, 5, 6),
    (1, 2, 4, 5, 6), (1, 3, 4, 5, 6), (2, 3, 4, 5, 6),
)

HAND_SIZE_TO_COMBINATIONS = {
    5: FIVE_CHOOSE_FIVE,
    6: SIX_CHOOSE_FIVE,
    7: SEVEN_CHOOSE_FIVE,
}


def combinations(n):
    """Index tuples selecting every 5-card subset of an n-card hand (n in 5, 6, 7)."""
    try:
        return HAND_SIZE_TO_COMBINATIONS[n]
    except (KeyError, TypeError):
        raise UnsupportedHandSize(n, HAND_SIZES) from None


def hand_combinations(cards):
    """Yield each 5-card sub-hand of cards as a tuple."""
    for indices in combinations(len(cards)):
        yield tuple(cards[i] for i in indices)
