import pytest

from poker_rank.errors import LookupMiss, UnsupportedHandSize
from poker_rank.eval.cards import encode_hand
from poker_rank.eval.evaluator import equivalence_key, evaluate, is_flush
from poker_rank.tables.lookup import LookupTables


def hand(s):
    return encode_hand(s.split())


def test_is_flush():
    assert is_flush(hand("As Ks 9s 5s 2s"))
    assert not is_flush(hand("As Ks 9s 5s 2h"))
    assert not is_flush(hand("Ac Ad Ah As Kc"))


def test_flush_and_unsuited_keys_share_prime_product():
    flush, flush_key = equivalence_key(hand("As Ks Qs Js Ts"))
    unsuited, unsuited_key = equivalence_key(hand("Ah Ks Qs Js Ts"))
    assert flush and not unsuited
    assert flush_key == unsuited_key == 41 * 37 * 31 * 29 * 23


def test_key_ignores_suit_and_order():
    _, a = equivalence_key(hand("Ah Ad 7c 7s 2h"))
    _, b = equivalence_key(hand("7h 2d As 7d Ac"))
    assert a == b == 41 * 41 * 13 * 13 * 2


def test_evaluate_uses_matching_table():
    key = 41 * 37 * 31 * 29 * 23
    tables = LookupTables({key: 1}, {key: 1600})
    assert evaluate(hand("As Ks Qs Js Ts"), tables) == 1
    assert evaluate(hand("Ah Ks Qs Js Ts"), tables) == 1600


def test_missing_key_is_lookup_miss():
    tables = LookupTables({}, {})
    with pytest.raises(LookupMiss) as exc:
        evaluate(hand("As Ks Qs Js Ts"), tables)
    assert exc.value.table == "flush"
    with pytest.raises(LookupMiss) as exc:
        evaluate(hand("Ac Ks Qs Js Ts"), tables)
    assert exc.value.table == "unsuited"


def test_evaluate_requires_five_cards(tables):
    with pytest.raises(UnsupportedHandSize):
        evaluate(hand("As Ks Qs Js"), tables)
    with pytest.raises(UnsupportedHandSize):
        evaluate(hand("As Ks Qs Js Ts 9s"), tables)


@pytest.mark.parametrize("cards", ["As Ks Qs Js", "As Ks Qs Js Ts 9s"])
def test_is_flush_requires_five_cards(cards):
    with pytest.raises(UnsupportedHandSize) as exc:
        is_flush(hand(cards))
    assert exc.value.allowed == (5,)
