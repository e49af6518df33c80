"""
Build the flush and unsuited lookup tables from scratch.

Number of distinct hand values:

    Straight Flush   10
    Four of a Kind   156      [(13 choose 2) * (2 choose 1)]
    Full Houses      156      [(13 choose 2) * (2 choose 1)]
    Flush            1277     [(13 choose 5) - 10 straight flushes]
    Straight         10
    Three of a Kind  858      [(13 choose 3) * (3 choose 1)]
    Two Pair         858      [(13 choose 3) * (3 choose 2)]
    One Pair         2860     [(13 choose 4) * (4 choose 1)]
    High Card      + 1277     [(13 choose 5) - 10 straights]
    -------------------------
    TOTAL            7462
"""

import itertools

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
from poker_rank.eval.cards import PRIMES, prime_product_from_rankbits
from poker_rank.tables.lookup import LookupTables

# Straight rank-bit patterns, best first; the wheel (A-2-3-4-5) is last
STRAIGHTS = (
    0b1111100000000,
    0b0111110000000,
    0b0011111000000,
    0b0001111100000,
    0b0000111110000,
    0b0000011111000,
    0b0000001111100,
    0b0000000111110,
    0b0000000011111,
    0b1000000001111,
)

# Ranks from ace down to deuce
BACKWARDS_RANKS = tuple(range(12, -1, -1))


def five_distinct_patterns():
    """
    Every 13-bit pattern with 5 bits set, best first.
    For equal bit counts, integer order is high-card order.
    """
    patterns = (sum(1 << r for r in combo) for combo in itertools.combinations(range(13), 5))
    return sorted(patterns, reverse=True)


def _check_count(last_rank, expected, band):
    if last_rank != expected:
        raise RuntimeError(f"{band} band ends at rank {last_rank}, expected {expected}")


def build_flushes():
    """Straight flushes (1-10) and flushes (MAX_FULL_HOUSE + 1 ..)."""
    table = {}
    for rank, bits in enumerate(STRAIGHTS, start=1):
        table[prime_product_from_rankbits(bits)] = rank
    straights = set(STRAIGHTS)
    rank = MAX_FULL_HOUSE + 1
    for bits in five_distinct_patterns():
        if bits in straights:
            continue
        table[prime_product_from_rankbits(bits)] = rank
        rank += 1
    _check_count(rank - 1, MAX_FLUSH, "flush")
    return table


def build_straights_and_high_cards(table):
    """Same bit patterns as flushes, ranked in the unsuited bands."""
    for rank, bits in enumerate(STRAIGHTS, start=MAX_FLUSH + 1):
        table[prime_product_from_rankbits(bits)] = rank
    _check_count(rank, MAX_STRAIGHT, "straight")
    straights = set(STRAIGHTS)
    rank = MAX_PAIR + 1
    for bits in five_distinct_patterns():
        if bits in straights:
            continue
        table[prime_product_from_rankbits(bits)] = rank
        rank += 1
    _check_count(rank - 1, MAX_HIGH_CARD, "high card")


def build_multiples(table):
    """Four of a kind, full house, three of a kind, two pair, pair."""
    # Four of a kind: quad rank, then kicker
    rank = MAX_STRAIGHT_FLUSH + 1
    for quad in BACKWARDS_RANKS:
        for kicker in BACKWARDS_RANKS:
            if kicker == quad:
                continue
            table[PRIMES[quad] ** 4 * PRIMES[kicker]] = rank
            rank += 1
    _check_count(rank - 1, MAX_FOUR_OF_A_KIND, "four of a kind")

    # Full house: trips rank, then pair rank
    for trips in BACKWARDS_RANKS:
        for pair in BACKWARDS_RANKS:
            if pair == trips:
                continue
            table[PRIMES[trips] ** 3 * PRIMES[pair] ** 2] = rank
            rank += 1
    _check_count(rank - 1, MAX_FULL_HOUSE, "full house")

    # Three of a kind: trips rank, then two kickers
    rank = MAX_STRAIGHT + 1
    for trips in BACKWARDS_RANKS:
        kickers = [r for r in BACKWARDS_RANKS if r != trips]
        for k1, k2 in itertools.combinations(kickers, 2):
            table[PRIMES[trips] ** 3 * PRIMES[k1] * PRIMES[k2]] = rank
            rank += 1
    _check_count(rank - 1, MAX_THREE_OF_A_KIND, "three of a kind")

    # Two pair: high pair, low pair, kicker
    for high, low in itertools.combinations(BACKWARDS_RANKS, 2):
        for kicker in BACKWARDS_RANKS:
            if kicker in (high, low):
                continue
            table[PRIMES[high] ** 2 * PRIMES[low] ** 2 * PRIMES[kicker]] = rank
            rank += 1
    _check_count(rank - 1, MAX_TWO_PAIR, "two pair")

    # Pair: pair rank, then three kickers
    for pair in BACKWARDS_RANKS:
        kickers = [r for r in BACKWARDS_RANKS if r != pair]
        for k1, k2, k3 in itertools.combinations(kickers, 3):
            table[PRIMES[pair] ** 2 * PRIMES[k1] * PRIMES[k2] * PRIMES[k3]] = rank
            rank += 1
    _check_count(rank - 1, MAX_PAIR, "pair")


def build_tables():
    """Generate complete LookupTables covering all 7462 equivalence classes."""
    flush = build_flushes()
    unsuited = {}
    build_multiples(unsuited)
    build_straights_and_high_cards(unsuited)
    return LookupTables(flush, unsuited)
