"""Tests for category classification."""
import pytest

from poker_showdown.core.card import Card, Rank, Suit
from poker_showdown.core.hand import Hand
from poker_showdown.evaluation.classifier import CLASSIFIERS, classify, order_straight
from poker_showdown.evaluation.types import Category
from poker_showdown.exceptions import IllegalHandError


def cards(hand_str):
    return Hand.from_string(hand_str).get_cards()


def kicker_codes(kickers):
    return ' '.join(str(c.rank) for c in kickers)


@pytest.mark.parametrize("hand_str,expected_category,expected_kickers", [
    ("Ah Kh Qh Jh Th", Category.STRAIGHT_FLUSH, "A K Q J T"),
    ("9s 7s 8s 5s 6s", Category.STRAIGHT_FLUSH, "9 8 7 6 5"),
    ("5s 4s 3s 2s As", Category.STRAIGHT_FLUSH, "5 4 3 2 A"),
    ("Jd Js 5c Jc Jh", Category.FOUR_OF_A_KIND, "J J J J 5"),
    ("4c 4d 4h 4s Kh", Category.FOUR_OF_A_KIND, "4 4 4 4 K"),
    ("Kh 4s Kd 4h Kc", Category.FULL_HOUSE, "K K K 4 4"),
    ("3c 3d Ah As Ad", Category.FULL_HOUSE, "A A A 3 3"),
    ("2h Jh 9h 4h 7h", Category.FLUSH, "J 9 7 4 2"),
    ("Ac 2c 3c 4c 6c", Category.FLUSH, "A 6 4 3 2"),
    ("2s 6h 4d 3c 5c", Category.STRAIGHT, "6 5 4 3 2"),
    ("Ad Kc Qh Js Ts", Category.STRAIGHT, "A K Q J T"),
    ("3d Ac 5h 2s 4s", Category.STRAIGHT, "5 4 3 2 A"),
    ("6c 6d 6s 3s 2d", Category.THREE_OF_A_KIND, "6 6 6 3 2"),
    ("2d Qc 9h Qs Qh", Category.THREE_OF_A_KIND, "Q Q Q 9 2"),
    ("Jd Js 8d 8s Kc", Category.TWO_PAIR, "J J 8 8 K"),
    ("3d 3s Ad 9c 9s", Category.TWO_PAIR, "9 9 3 3 A"),
    ("5d 5s 6h Qc Ah", Category.ONE_PAIR, "5 5 A Q 6"),
    ("As 2c 3d 7h Tc", Category.HIGH_CARD, "A T 7 3 2"),
    ("Ks Qd Jc Th 8h", Category.HIGH_CARD, "K Q J T 8"),
])
def test_classification(hand_str, expected_category, expected_kickers):
    """Each hand gets its strongest category and ordered kickers."""
    category, kickers = classify(cards(hand_str))
    assert category == expected_category
    assert kicker_codes(kickers) == expected_kickers
    assert sorted(map(str, kickers)) == sorted(hand_str.split())


@pytest.mark.parametrize("hand_str", [
    "Ac Kd Qh Js 2s",   # Ace cannot lead and trail at once
    "Kc Ad 2h 3s 4s",   # No wrap-around
    "As 9d 8h 7s 6s",   # Ace with a run that does not reach it
    "9c 8d 7h 6s 4s",   # Gap
])
def test_not_straights(hand_str):
    assert order_straight(cards(hand_str)) is None
    category, _ = classify(cards(hand_str))
    assert category == Category.HIGH_CARD


def test_order_straight_repositions_ace():
    wheel = order_straight(cards("As 2d 3h 4c 5s"))
    assert [c.rank for c in wheel] == [Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE]

    broadway = order_straight(cards("Ts Jd Qh Kc As"))
    assert [c.rank for c in broadway] == [Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN]


def test_order_straight_rejects_pairs():
    assert order_straight(cards("5s 5d 4h 3c 2s")) is None


def test_classifiers_are_strongest_first():
    categories = [category for category, _ in CLASSIFIERS]
    assert categories == sorted(Category, key=lambda c: c.value, reverse=True)


def test_two_pair_orders_pairs_by_rank():
    """Higher pair first regardless of input order."""
    _, kickers = classify(cards("2h 2d Kh Ks 7c"))
    assert kicker_codes(kickers) == "K K 2 2 7"


def test_input_order_does_not_matter():
    hand = cards("Kh 4s Kd 4h Kc")
    first = classify(hand)
    second = classify(list(reversed(hand)))
    assert first[0] == second[0]
    assert [c.rank for c in first[1]] == [c.rank for c in second[1]]


@pytest.mark.parametrize("hand", [
    [],
    [Card(Rank.ACE, Suit.SPADES)] * 1,
    [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.SPADES), Card(Rank.QUEEN, Suit.SPADES),
     Card(Rank.JACK, Suit.SPADES)],
])
def test_classify_rejects_wrong_size(hand):
    with pytest.raises(IllegalHandError):
        classify(hand)


def test_classify_rejects_duplicates():
    with pytest.raises(IllegalHandError):
        classify(cards("As As Kd Qh Jc"))


def test_category_ordering():
    assert Category.STRAIGHT_FLUSH > Category.FOUR_OF_A_KIND
    assert Category.ONE_PAIR >= Category.ONE_PAIR
    assert Category.HIGH_CARD < Category.ONE_PAIR <= Category.TWO_PAIR
    assert max(Category) == Category.STRAIGHT_FLUSH
    assert min(Category) == Category.HIGH_CARD
