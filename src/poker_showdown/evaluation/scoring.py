"""Composite scoring of classified hands."""
from collections.abc import Sequence

from poker_showdown.core.card import Card
from poker_showdown.evaluation.constants import (
    CARDS_IN_HAND, KICKER_POSITION_MULTIPLIERS, KICKER_SCALE
)
from poker_showdown.evaluation.types import Category


def kicker_value(kickers: Sequence[Card]) -> int:
    """
    Weighted kicker total in units of the smallest position weight.

    Position i contributes rank * 10**(4 - i), so the sum is exact.
    """
    if len(kickers) != CARDS_IN_HAND:
        raise ValueError(f"Expected {CARDS_IN_HAND} kickers, got {len(kickers)}")
    return sum(
        card.rank.value * multiplier
        for card, multiplier in zip(kickers, KICKER_POSITION_MULTIPLIERS)
    )


def score(category: Category, kickers: Sequence[Card]) -> float:
    """
    Score a hand from its category and ordered kickers.

    score = category base + sum(kicker[i] * weight[i]) with weights
    1, 0.1, 0.01, 0.001, 0.0001. Hands with the same category and the
    same kicker ranks position by position get identical scores; suits
    never contribute.
    """
    return category.base_value + kicker_value(kickers) / KICKER_SCALE
