"""
Ranking engine: card encoding, static combinations, 5-card evaluation, hand scoring.
"""

from poker_rank.eval.cards import (
    Rank,
    Suit,
    encode,
    encode_hand,
    decode,
    decode_hand,
    make_card,
)
from poker_rank.eval.combos import combinations, hand_combinations
from poker_rank.eval.evaluator import evaluate, equivalence_key, is_flush
from poker_rank.eval.scorer import HandScorer, score, rank_class, class_name

__all__ = [
    "Rank",
    "Suit",
    "encode",
    "encode_hand",
    "decode",
    "decode_hand",
    "make_card",
    "combinations",
    "hand_combinations",
    "evaluate",
    "equivalence_key",
    "is_flush",
    "HandScorer",
    "score",
    "rank_class",
    "class_name",
]
