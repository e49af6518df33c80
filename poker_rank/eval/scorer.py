"""
Hand scorer: best (lowest) rank over every 5-card combination of a 5-7 card hand.
"""

from poker_rank.config import (
    MAX_STRAIGHT_FLUSH,
    MAX_FOUR_OF_A_KIND,
    MAX_FULL_HOUSE,
    MAX_FLUSH,
    MAX_STRAIGHT,
    MAX_THREE_OF_A_KIND,
    MAX_TWO_PAIR,
    MAX_PAIR,
    MAX_HIGH_CARD,
)
from poker_rank.eval.cards import encode_hand
from poker_rank.eval.combos import combinations, hand_combinations
from poker_rank.eval.evaluator import evaluate

# (worst rank of class, class name), best class first
RANK_CLASSES = (
    (MAX_STRAIGHT_FLUSH, "Straight Flush"),
    (MAX_FOUR_OF_A_KIND, "Four of a Kind"),
    (MAX_FULL_HOUSE, "Full House"),
    (MAX_FLUSH, "Flush"),
    (MAX_STRAIGHT, "Straight"),
    (MAX_THREE_OF_A_KIND, "Three of a Kind"),
    (MAX_TWO_PAIR, "Two Pair"),
    (MAX_PAIR, "Pair"),
    (MAX_HIGH_CARD, "High Card"),
)


class HandScorer:
    """
    Scores hands against one immutable LookupTables instance.
    Holds no other state, so one scorer can be shared freely.
    """

    __slots__ = ("tables",)

    def __init__(self, tables):
        self.tables = tables

    def score(self, hand):
        """Best rank in 1..7462 for a hand of 5, 6 or 7 encoded cards."""
        hand = tuple(hand)
        combinations(len(hand))  # size check before any evaluation
        best = MAX_HIGH_CARD
        for five in hand_combinations(hand):
            rank = evaluate(five, self.tables)
            if rank < best:
                best = rank
        return best

    def score_tokens(self, tokens):
        """Encode card tokens (e.g. ["As", "Kd", ...]) and score them."""
        tokens = list(tokens)
        combinations(len(tokens))  # size check before encoding
        return self.score(encode_hand(tokens))


def score(hand, tables=None):
    """Score encoded cards with the given tables, or the process-wide default tables."""
    if tables is None:
        from poker_rank.tables.lookup import get_default_tables
        tables = get_default_tables()
    return HandScorer(tables).score(hand)


def rank_class(rank):
    """Hand class of a rank: 1 = straight flush .. 9 = high card."""
    if not 1 <= rank <= MAX_HIGH_CARD:
        raise ValueError(f"rank {rank} outside 1..{MAX_HIGH_CARD}")
    for i, (max_rank, _) in enumerate(RANK_CLASSES):
        if rank <= max_rank:
            return i + 1


def class_name(rank):
    return RANK_CLASSES[rank_class(rank) - 1][1]
