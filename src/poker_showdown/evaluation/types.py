"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any

from poker_showdown.core.card import Card, Rank
from poker_showdown.core.hand import Hand


@total_ordering
class Category(Enum):
    """
    Poker hand categories with their base scores.

    Base scores are 100 apart so a category difference always outweighs
    any difference in kickers.
    """
    HIGH_CARD = 100
    ONE_PAIR = 200
    TWO_PAIR = 300
    THREE_OF_A_KIND = 400
    STRAIGHT = 500
    FLUSH = 600
    FULL_HOUSE = 700
    FOUR_OF_A_KIND = 800
    STRAIGHT_FLUSH = 900

    @property
    def base_value(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. 'Full House'."""
        return self.name.replace('_', ' ').title()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.value < other.value


@dataclass(frozen=True)
class Evaluation:
    """
    Result of evaluating a single hand.

    Attributes:
        hand: The hand that was evaluated
        category: Strongest category the hand achieves
        kickers: All five cards, most significant tie-breaker first
        score: Composite strength; higher is stronger, equal means tied
    """
    hand: Hand
    category: Category
    kickers: tuple[Card, ...]
    score: float

    @property
    def kicker_ranks(self) -> tuple[Rank, ...]:
        return tuple(card.rank for card in self.kickers)

    def describe(self) -> str:
        """
        Human-readable description of the hand.

        Examples: "Royal Flush", "Straight Flush, Five high",
        "Full House, Kings over Fours", "One Pair of Fives".
        """
        ranks = self.kicker_ranks
        lead = ranks[0]
        if self.category is Category.STRAIGHT_FLUSH:
            if lead is Rank.ACE:
                return "Royal Flush"
            return f"Straight Flush, {lead.display_name} high"
        if self.category is Category.FOUR_OF_A_KIND:
            return f"Four {lead.plural_name}"
        if self.category is Category.FULL_HOUSE:
            return f"Full House, {lead.plural_name} over {ranks[3].plural_name}"
        if self.category in (Category.FLUSH, Category.STRAIGHT):
            return f"{self.category.display_name}, {lead.display_name} high"
        if self.category is Category.THREE_OF_A_KIND:
            return f"Three {lead.plural_name}"
        if self.category is Category.TWO_PAIR:
            return f"Two Pair, {lead.plural_name} and {ranks[2].plural_name}"
        if self.category is Category.ONE_PAIR:
            return f"One Pair of {lead.plural_name}"
        return f"High Card, {lead.display_name}"

    def __str__(self) -> str:
        hand_str = ' '.join(card.pretty() for card in self.hand)
        kickers_str = ' '.join(card.pretty() for card in self.kickers)
        return (
            f"Hand: {hand_str}\n"
            f"Category: {self.category.name}\n"
            f"Kickers: {kickers_str}"
        )

    def to_json(self) -> dict[str, Any]:
        """Convert to JSON-compatible dictionary."""
        return {
            "hand": [str(card) for card in self.hand],
            "category": self.category.name,
            "description": self.describe(),
            "kickers": [str(card) for card in self.kickers],
            "score": self.score,
        }
