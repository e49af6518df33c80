"""
Card encoding: two-character tokens ("As", "Td", "2c") -> packed 32-bit ints.

                      bitrank     suit rank   prime
                +--------+--------+--------+--------+
                |xxxbbbbb|bbbbbbbb|cdhsrrrr|xxpppppp|
                +--------+--------+--------+--------+

    p = prime of rank (deuce=2, trey=3, four=5, ..., ace=41)
    r = rank index (deuce=0, trey=1, ..., ace=12)
    cdhs = one-hot suit bit
    b = one bit set at the rank index
"""

from enum import IntEnum

from poker_rank.errors import InvalidCardToken

PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "shdc"

PRIME_MASK = 0xFF
RANK_INDEX_MASK = 0xF00
SUIT_MASK = 0xF000
RANK_BITS_MASK = 0x1FFF0000


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def char(self):
        return RANK_CHARS[self]

    @property
    def prime(self):
        return PRIMES[self]

    @classmethod
    def from_char(cls, char):
        try:
            return _RANK_BY_CHAR[char]
        except (KeyError, TypeError):
            raise InvalidCardToken(char, f"unknown rank character {char!r}") from None


class Suit(IntEnum):
    """Values are the one-hot suit bits."""

    SPADES = 1
    HEARTS = 2
    DIAMONDS = 4
    CLUBS = 8

    @property
    def char(self):
        return _CHAR_BY_SUIT[self]

    @classmethod
    def from_char(cls, char):
        try:
            return _SUIT_BY_CHAR[char]
        except (KeyError, TypeError):
            raise InvalidCardToken(char, f"unknown suit character {char!r}") from None


_RANK_BY_CHAR = {c: Rank(i) for i, c in enumerate(RANK_CHARS)}
_SUIT_BY_CHAR = {c: s for c, s in zip(SUIT_CHARS, Suit)}
_CHAR_BY_SUIT = {s: c for c, s in _SUIT_BY_CHAR.items()}


def make_card(rank, suit):
    """Pack a (Rank, Suit) pair."""
    rank = Rank(rank)
    suit = Suit(suit)
    bitrank = (1 << rank) << 16
    return bitrank | (suit << 12) | (rank << 8) | rank.prime


def encode(token):
    """
    Encode a two-character card token. Case-sensitive: rank from 23456789TJQKA,
    suit from shdc. Raises InvalidCardToken on anything else.
    """
    if not isinstance(token, str) or len(token) != 2:
        raise InvalidCardToken(token, "expected exactly two characters")
    try:
        rank = Rank.from_char(token[0])
        suit = Suit.from_char(token[1])
    except InvalidCardToken as e:
        raise InvalidCardToken(token, e.reason) from None
    return make_card(rank, suit)


def encode_hand(tokens):
    return [encode(t) for t in tokens]


def get_prime(card):
    return card & PRIME_MASK


def get_rank_index(card):
    return (card & RANK_INDEX_MASK) >> 8


def get_suit_bit(card):
    return (card & SUIT_MASK) >> 12


def get_rank_bit(card):
    return (card & RANK_BITS_MASK) >> 16


def decode(card):
    """Packed card -> token, e.g. "Ah"."""
    return Rank(get_rank_index(card)).char + Suit(get_suit_bit(card)).char


def decode_hand(cards):
    return " ".join(decode(c) for c in cards)


def prime_product_from_hand(cards):
    product = 1
    for c in cards:
        product *= c & PRIME_MASK
    return product


def prime_product_from_rankbits(rankbits):
    """Multiply PRIMES[i] for every bit i set in a 13-bit rank field."""
    product = 1
    for i, prime in enumerate(PRIMES):
        if rankbits & (1 << i):
            product *= prime
    return product


# All 52 cards, spades first, deuce to ace within a suit
DECK = tuple(make_card(r, s) for s in Suit for r in Rank)
