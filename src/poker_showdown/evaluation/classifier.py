"""
Category classification for five-card hands.

Each classifier receives the cards and their frequency table and returns
the ordered kicker list when the hand belongs to its category, or None.
Classifiers are tried strongest first and the first match wins, so each
one may assume every stronger category has already been ruled out. For
example, full house only checks for two distinct ranks because four of a
kind has already been excluded.
"""
import logging
from collections.abc import Callable, Sequence
from typing import Optional

from poker_showdown.core.card import Card, Rank
from poker_showdown.evaluation.constants import CARDS_IN_HAND, LOW_ACE_VALUE
from poker_showdown.evaluation.frequency import FrequencyTable, analyze
from poker_showdown.evaluation.types import Category
from poker_showdown.exceptions import IllegalHandError

logger = logging.getLogger(__name__)

Classifier = Callable[[Sequence[Card], FrequencyTable], Optional[list[Card]]]


def sort_descending(cards: Sequence[Card]) -> list[Card]:
    """Sort cards by rank, highest first. Equal ranks keep their order."""
    return sorted(cards, key=lambda c: c.rank.value, reverse=True)


def _is_consecutive(values: Sequence[int]) -> bool:
    return all(high - low == 1 for high, low in zip(values, values[1:]))


def order_straight(cards: Sequence[Card]) -> Optional[list[Card]]:
    """
    Order five cards as a straight, or return None if they are not one.

    The result is highest card first. An ace leads an ace-high straight
    (A-K-Q-J-T) and trails a wheel (5-4-3-2-A); it never does both.
    """
    ordered = sort_descending(cards)
    values = [c.rank.value for c in ordered]
    if len(set(values)) != len(values):
        return None

    if _is_consecutive(values):
        return ordered

    # Wheel: the ace plays as a one below the deuce
    if ordered[0].rank is Rank.ACE and _is_consecutive(values[1:] + [LOW_ACE_VALUE]):
        return ordered[1:] + ordered[:1]

    return None


def _straight_flush(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    if table.rank_count != CARDS_IN_HAND or table.suit_count != 1:
        return None
    return order_straight(cards)


def _four_of_a_kind(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    # Two ranks is either quads or a full house
    if table.rank_count != 2:
        return None
    quads = table.groups_of(4)
    if not quads:
        return None
    return quads[0] + table.groups_of(1)[0]


def _full_house(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    if table.rank_count != 2:
        return None
    return table.groups_of(3)[0] + table.groups_of(2)[0]


def _flush(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    if table.suit_count != 1:
        return None
    return sort_descending(cards)


def _straight(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    if table.rank_count != CARDS_IN_HAND:
        return None
    return order_straight(cards)


def _three_of_a_kind(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    # Three ranks is either 3-1-1 or 2-2-1
    if table.rank_count != 3 or table.groups_of(2):
        return None
    singles = [group[0] for group in table.groups_of(1)]
    return table.groups_of(3)[0] + sort_descending(singles)


def _two_pair(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    if table.rank_count != 3:
        return None
    pairs = sorted(table.groups_of(2), key=lambda group: group[0].rank.value, reverse=True)
    return [card for pair in pairs for card in pair] + table.groups_of(1)[0]


def _one_pair(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    if table.rank_count != 4:
        return None
    singles = [group[0] for group in table.groups_of(1)]
    return table.groups_of(2)[0] + sort_descending(singles)


def _high_card(cards: Sequence[Card], table: FrequencyTable) -> Optional[list[Card]]:
    return sort_descending(cards)


# Strongest first. Order matters: later classifiers rely on earlier ones.
CLASSIFIERS: tuple[tuple[Category, Classifier], ...] = (
    (Category.STRAIGHT_FLUSH, _straight_flush),
    (Category.FOUR_OF_A_KIND, _four_of_a_kind),
    (Category.FULL_HOUSE, _full_house),
    (Category.FLUSH, _flush),
    (Category.STRAIGHT, _straight),
    (Category.THREE_OF_A_KIND, _three_of_a_kind),
    (Category.TWO_PAIR, _two_pair),
    (Category.ONE_PAIR, _one_pair),
    (Category.HIGH_CARD, _high_card),
)


def classify(cards: Sequence[Card]) -> tuple[Category, list[Card]]:
    """
    Determine the strongest category of a five-card hand.

    Args:
        cards: Exactly five distinct cards, in any order

    Returns:
        The category and its five kickers, most significant first

    Raises:
        IllegalHandError: If the cards are not five distinct cards
    """
    if len(cards) != CARDS_IN_HAND:
        raise IllegalHandError(f"Hand must contain exactly {CARDS_IN_HAND} cards.")
    if len(set(cards)) != len(cards):
        raise IllegalHandError("Hand must not contain duplicate cards.")

    table = analyze(cards)
    for category, classifier in CLASSIFIERS:
        kickers = classifier(cards, table)
        if kickers is not None:
            logger.debug(
                f"Classified {[str(c) for c in cards]} as {category.name} "
                f"(fingerprint {table.fingerprint}, kickers {[str(c) for c in kickers]})"
            )
            return category, kickers

    # _high_card always matches
    raise AssertionError("No classifier matched")
