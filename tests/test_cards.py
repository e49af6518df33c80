import pytest

from poker_rank.errors import InvalidCardToken
from poker_rank.eval.cards import (
    DECK,
    PRIMES,
    Rank,
    Suit,
    decode,
    decode_hand,
    encode,
    encode_hand,
    get_prime,
    get_rank_bit,
    get_rank_index,
    get_suit_bit,
    make_card,
    prime_product_from_hand,
    prime_product_from_rankbits,
)


@pytest.mark.parametrize("token,expected", [
    ("As", 268442665),
    ("Kd", 134236965),
    ("2c", 98306),
    ("Th", 16787479),
])
def test_encode_known_values(token, expected):
    assert encode(token) == expected


def test_encode_fields():
    card = encode("Qh")
    assert get_prime(card) == 31
    assert get_rank_index(card) == Rank.QUEEN == 10
    assert get_suit_bit(card) == Suit.HEARTS == 2
    assert get_rank_bit(card) == 1 << 10


def test_encode_is_deterministic():
    assert encode("9d") == encode("9d")
    assert encode_hand(["9d", "9d"]) == [encode("9d")] * 2


def test_deck_is_52_distinct_cards():
    assert len(DECK) == 52
    assert len(set(DECK)) == 52
    tokens = {decode(c) for c in DECK}
    assert len(tokens) == 52


def test_every_card_has_one_suit_bit_and_one_rank_bit():
    for card in DECK:
        assert get_suit_bit(card) in (1, 2, 4, 8)
        assert bin(get_rank_bit(card)).count("1") == 1
        assert get_rank_bit(card) == 1 << get_rank_index(card)
        assert get_prime(card) == PRIMES[get_rank_index(card)]


def test_make_card_matches_encode():
    assert make_card(Rank.ACE, Suit.SPADES) == encode("As")
    assert make_card(Rank.TWO, Suit.CLUBS) == encode("2c")


def test_decode():
    assert decode(encode("Jc")) == "Jc"
    assert decode_hand(encode_hand(["As", "Td", "2h"])) == "As Td 2h"


@pytest.mark.parametrize("token", [
    "as",   # rank is case-sensitive
    "AS",   # suit is case-sensitive
    "1s",
    "Xh",
    "Tx",
    "10s",
    "A",
    "",
    "Asd",
    None,
    42,
])
def test_invalid_tokens_raise(token):
    with pytest.raises(InvalidCardToken):
        encode(token)


def test_invalid_token_error_names_token():
    with pytest.raises(InvalidCardToken) as exc:
        encode("Zs")
    assert exc.value.token == "Zs"
    assert "rank" in str(exc.value)
    assert isinstance(exc.value, ValueError)


def test_encode_hand_stops_at_first_bad_token():
    with pytest.raises(InvalidCardToken) as exc:
        encode_hand(["As", "Kq", "Zz"])
    assert exc.value.token == "Kq"


def test_enum_parsers():
    assert Rank.from_char("T") is Rank.TEN
    assert Rank.from_char("A").prime == 41
    assert Suit.from_char("d") is Suit.DIAMONDS
    assert Suit.CLUBS.char == "c"
    assert Rank.KING.char == "K"
    with pytest.raises(InvalidCardToken):
        Rank.from_char("t")
    with pytest.raises(InvalidCardToken):
        Suit.from_char("S")


def test_prime_products():
    assert prime_product_from_rankbits(0b11111) == 2 * 3 * 5 * 7 * 11
    assert prime_product_from_rankbits(0) == 1
    cards = encode_hand(["As", "Ah", "Kd", "2c", "2s"])
    assert prime_product_from_hand(cards) == 41 * 41 * 37 * 2 * 2


def test_accessors_ignore_unused_high_bits():
    card = encode("Qh") | 0xE0000000
    assert get_prime(card) == 31
    assert get_rank_index(card) == Rank.QUEEN
    assert get_suit_bit(card) == Suit.HEARTS
    assert get_rank_bit(card) == 1 << 10
