"""Hand implementation."""

import logging
import re
from collections.abc import Iterable, Iterator

from .card import Card

logger = logging.getLogger(__name__)

# One card in a concatenated hand string: "10" takes three characters
_COMPACT_CARD = re.compile(r"10.|..|.", re.DOTALL)


class Hand:
    """
    A poker hand: an ordered, immutable sequence of cards.

    The hand does not enforce its own size or uniqueness; evaluation
    validates both before scoring.

    Attributes:
        cards: Tuple of cards in the order they were given
    """

    def __init__(self, cards: Iterable[Card]):
        """Create a hand from any iterable of cards."""
        self._cards: tuple[Card, ...] = tuple(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Cards in the order they were given. Read-only."""
        return self._cards

    def get_cards(self) -> list[Card]:
        """Get all cards in the hand, in construction order."""
        return list(self.cards)

    def has_duplicates(self) -> bool:
        """Check whether any two cards share both rank and suit."""
        return len(set(self.cards)) != len(self.cards)

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a string representation.

        Args:
            hand_str: Card codes either separated by whitespace or commas
                      ("As Kd 7c 7h 2s") or concatenated ("AsKd7c7h2s").
                      Each card is a rank (A, K, Q, J, T or 10, 9-2)
                      followed by a suit (s, h, d, c).

        Returns:
            Hand instance with the parsed cards

        Raises:
            ValueError: If the string format is invalid (e.g., wrong length, invalid cards)
        """
        tokens = [t for t in re.split(r'[\s,]+', hand_str.strip()) if t]
        if len(tokens) == 1 and len(tokens[0]) > 3:
            tokens = _COMPACT_CARD.findall(tokens[0])

        cards = []
        for i, card_str in enumerate(tokens):
            try:
                card = Card.from_string(card_str)
            except ValueError as e:
                raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")
            cards.append(card)

        hand = cls(cards)
        logger.debug(f"Created hand from string '{hand_str}': {[str(c) for c in cards]}")
        return hand

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.cards == other.cards

    def __hash__(self) -> int:
        return hash(self.cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(c) for c in self.cards)!r})"

    def __str__(self) -> str:
        """String representation showing cards in hand."""
        if not self.cards:
            return "Empty hand"
        return f"Hand: {' '.join(str(c) for c in self.cards)}"
