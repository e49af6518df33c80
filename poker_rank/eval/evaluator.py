"""
5-card evaluator: flush test, prime-product key, table lookup.
"""

from poker_rank.errors import UnsupportedHandSize
from poker_rank.eval.cards import (
    SUIT_MASK,
    prime_product_from_hand,
    prime_product_from_rankbits,
)


def is_flush(cards):
    """True when all five cards share a suit (AND of one-hot suit bits is non-zero)."""
    _check_five(cards)
    return bool(cards[0] & cards[1] & cards[2] & cards[3] & cards[4] & SUIT_MASK)


def equivalence_key(cards):
    """
    Return (is_flush, key). Flush keys come from the OR of the rank bits,
    non-flush keys from the product of the card primes.
    """
    if is_flush(cards):
        hand_or = (cards[0] | cards[1] | cards[2] | cards[3] | cards[4]) >> 16
        return True, prime_product_from_rankbits(hand_or)
    return False, prime_product_from_hand(cards)


def evaluate(cards, tables):
    """Rank of exactly five encoded cards, 1 (royal flush) .. 7462."""
    flush, key = equivalence_key(cards)
    if flush:
        return tables.flush_rank(key)
    return tables.unsuited_rank(key)


def _check_five(cards):
    if len(cards) != 5:
        raise UnsupportedHandSize(len(cards), (5,))
