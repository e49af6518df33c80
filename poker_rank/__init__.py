"""
Poker hand ranking: 5, 6 or 7 cards -> rank in [1, 7462], 1 = royal flush.
"""

from poker_rank.errors import (
    PokerRankError,
    InvalidCardToken,
    UnsupportedHandSize,
    LookupMiss,
    TableLoadError,
)
from poker_rank.eval import (
    Rank,
    Suit,
    encode,
    encode_hand,
    decode,
    combinations,
    evaluate,
    HandScorer,
    score,
    rank_class,
    class_name,
)
from poker_rank.tables import (
    LookupTables,
    load_tables,
    save_tables,
    get_default_tables,
    build_tables,
)

__all__ = [
    "PokerRankError",
    "InvalidCardToken",
    "UnsupportedHandSize",
    "LookupMiss",
    "TableLoadError",
    "Rank",
    "Suit",
    "encode",
    "encode_hand",
    "decode",
    "combinations",
    "evaluate",
    "HandScorer",
    "score",
    "rank_class",
    "class_name",
    "LookupTables",
    "load_tables",
    "save_tables",
    "get_default_tables",
    "build_tables",
]
