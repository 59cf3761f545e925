from __future__ import annotations

import random

import pytest

from pokeracademy.dynamic.cards import (
    RANKS,
    SUITS,
    Card,
    DeckExhaustedError,
    build_deck,
    canonical_hand_abbrev,
    cards_to_str,
    deal,
    format_card_ascii,
    format_card_symbol,
    format_cards_spaced,
    parse_cards,
    shuffle,
)


def test_build_deck_has_52_unique_cards_in_canonical_order():
    deck = build_deck()
    assert len(deck) == 52
    assert len({(c.rank, c.suit) for c in deck}) == 52
    assert deck[0] == Card("2", "s")
    assert deck[12] == Card("A", "s")
    assert deck[13] == Card("2", "h")
    assert deck == build_deck()


def test_shuffle_preserves_multiset_and_leaves_input_untouched():
    deck = build_deck()
    before = list(deck)
    shuffled = shuffle(deck, random.Random(7))
    assert deck == before
    assert shuffled != deck
    assert sorted(shuffled, key=str) == sorted(deck, key=str)
    assert len(set(shuffled)) == 52


def test_shuffle_is_deterministic_for_a_seed():
    a = shuffle(build_deck(), random.Random(42))
    b = shuffle(build_deck(), random.Random(42))
    assert a == b


def test_shuffle_reaches_every_permutation_of_three():
    rng = random.Random(3)
    seen = {tuple(shuffle(["a", "b", "c"], rng)) for _ in range(600)}
    assert len(seen) == 6


def test_deal_pops_from_front_and_rejects_overdraw():
    deck = build_deck()
    hole = deal(deck, 2)
    assert hole == [Card("2", "s"), Card("3", "s")]
    assert len(deck) == 50
    assert hole[0] not in deck

    with pytest.raises(DeckExhaustedError):
        deal(deck, 51)
    assert len(deck) == 50


def test_str_roundtrip_all_cards():
    for r in RANKS:
        for s in SUITS:
            card = Card.from_str(r + s)
            assert str(card) == r + s
            assert card.value == RANKS.index(r)


@pytest.mark.parametrize("bad", ["", "A", "1s", "Ax", "10s"])
def test_from_str_rejects_bad_text(bad):
    with pytest.raises(ValueError):
        Card.from_str(bad)


def test_card_constructor_validates():
    with pytest.raises(ValueError):
        Card("Z", "s")


def test_formatters():
    hand = parse_cards(["2c", "As", "Td"])
    assert cards_to_str(hand) == "2c As Td"
    assert format_cards_spaced(hand).split() == ["AS", "TD", "2C"]
    assert format_card_ascii(Card("A", "s")) == "AS"
    assert format_card_symbol(Card("Q", "h")) == "Q♥"


def test_canonical_hand_abbrev_pairs_suited_offsuit():
    assert canonical_hand_abbrev(parse_cards(["5s", "As"])) == "A5s"
    assert canonical_hand_abbrev(parse_cards(["Kd", "Qh"])) == "KQo"
    assert canonical_hand_abbrev(parse_cards(["7h", "7c"])) == "77"
