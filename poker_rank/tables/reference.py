"""
Independent check of the precomputed lookup tables.

The fast path never looks at hand categories: it trusts whatever rank the
tables store for a prime-product key. A wrong or corrupted table would still
produce numbers in 1..7462, so nothing downstream could notice. This module
ranks hands the slow way (count ranks, test straight and flush, compare
category tuples) and walks every table entry in rank order to confirm the
tables agree with it. verify_tables backs `scripts/build_tables.py --verify`
and the test suite uses reference_rank as an oracle for the scorer.

reference_rank returns a comparable tuple, higher = better hand.
"""

from itertools import combinations
from collections import Counter

import numpy as np
from tqdm import tqdm

from poker_rank.config import (
    FLUSH_TABLE_SIZE,
    UNSUITED_TABLE_SIZE,
    BEST_RANK,
    WORST_RANK,
)
from poker_rank.eval.cards import (
    PRIMES,
    Rank,
    Suit,
    decode_hand,
    get_rank_index,
    get_suit_bit,
    make_card,
)


def reference_rank(cards):
    """
    Evaluate best 5-card hand from 5-7 cards.
    Returns a tuple that can be compared: higher = better.
    """
    best = None
    for combo in combinations(list(cards), 5):
        score = _score_5(combo)
        if best is None or score > best:
            best = score
    return best


def _score_5(cards):
    ranks = sorted([get_rank_index(c) for c in cards], reverse=True)
    suits = [get_suit_bit(c) for c in cards]
    is_flush = len(set(suits)) == 1

    unique_ranks = sorted(set(ranks), reverse=True)
    is_straight = False
    straight_high = 0
    if len(unique_ranks) == 5:
        if unique_ranks[0] - unique_ranks[4] == 4:
            is_straight = True
            straight_high = unique_ranks[0]
        if unique_ranks == [12, 3, 2, 1, 0]:  # A-2-3-4-5
            is_straight = True
            straight_high = 3

    counts = Counter(ranks)
    freq = sorted(counts.values(), reverse=True)
    ranks_by_freq = sorted(counts.keys(), key=lambda r: (counts[r], r), reverse=True)

    if is_straight and is_flush:
        return (8, straight_high)
    if freq == [4, 1]:
        return (7, *ranks_by_freq)
    if freq == [3, 2]:
        return (6, *ranks_by_freq)
    if is_flush:
        return (5, *ranks)
    if is_straight:
        return (4, straight_high)
    if freq == [3, 1, 1]:
        return (3, *ranks_by_freq)
    if freq == [2, 2, 1]:
        return (2, *ranks_by_freq)
    if freq == [2, 1, 1, 1]:
        return (1, *ranks_by_freq)
    return (0, *ranks)


def ranks_from_key(key):
    """Factor a prime product back into rank indices, ace first."""
    ranks = []
    for r in reversed(range(len(PRIMES))):
        while key % PRIMES[r] == 0:
            ranks.append(r)
            key //= PRIMES[r]
    if key != 1:
        raise ValueError("key is not a product of rank primes")
    return ranks


def representative_hand(key, flush):
    """
    Five cards whose key is `key`: all spades for flush keys, otherwise suits cycle
    by position so equal ranks never share a suit and the hand is never a flush.
    """
    ranks = ranks_from_key(key)
    suits = list(Suit)
    if flush:
        return [make_card(Rank(r), Suit.SPADES) for r in ranks]
    return [make_card(Rank(r), suits[i % 4]) for i, r in enumerate(ranks)]


def verify_tables(tables, progress=False):
    """
    Check sizes, rank coverage and ordering against the reference evaluator.
    Returns a list of problems; empty when the tables are consistent.
    """
    problems = []
    if len(tables.flush) != FLUSH_TABLE_SIZE:
        problems.append(f"flush table has {len(tables.flush)} entries, expected {FLUSH_TABLE_SIZE}")
    if len(tables.unsuited) != UNSUITED_TABLE_SIZE:
        problems.append(f"unsuited table has {len(tables.unsuited)} entries, expected {UNSUITED_TABLE_SIZE}")

    ranks = np.array(list(tables.flush.values()) + list(tables.unsuited.values()), dtype=np.int64)
    expected = np.arange(BEST_RANK, WORST_RANK + 1)
    if len(ranks) != len(expected) or not np.array_equal(np.sort(ranks), expected):
        missing = np.setdiff1d(expected, ranks)
        problems.append(f"ranks do not cover {BEST_RANK}..{WORST_RANK} exactly once "
                        f"({len(missing)} missing)")

    entries = [(rank, key, True) for key, rank in tables.flush.items()]
    entries += [(rank, key, False) for key, rank in tables.unsuited.items()]
    entries.sort()

    prev = None
    for rank, key, flush in tqdm(entries, desc="Verifying", disable=not progress):
        try:
            hand = representative_hand(key, flush)
        except ValueError:
            problems.append(f"rank {rank}: key {key} does not factor into rank primes")
            prev = None
            continue
        if len(hand) != 5:
            problems.append(f"rank {rank}: key {key} describes {len(hand)} cards")
            prev = None
            continue
        ref = _score_5(hand)
        if prev is not None and not ref < prev[1]:
            problems.append(f"rank {rank} ({decode_hand(hand)}) is not worse than "
                            f"rank {prev[0]} ({decode_hand(prev[2])})")
        prev = (rank, ref, hand)
    return problems
