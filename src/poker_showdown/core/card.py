"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits. Suits carry no ordering for scoring purposes."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Suit glyph used when printing hands."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
    Suit.SPADES: '♠',
}


class Rank(Enum):
    """Card ranks, valued 2 (deuce) through 14 (ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return _RANK_CODES[self]

    @property
    def display_name(self) -> str:
        """Singular English name, e.g. 'Ace'."""
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        """Plural English name, e.g. 'Sixes'."""
        if self is Rank.SIX:
            return 'Sixes'
        return f"{self.display_name}s"

    @classmethod
    def from_string(cls, rank_str: str) -> 'Rank':
        """
        Parse a rank code.

        Args:
            rank_str: One of 2-9, T (or 10), J, Q, K, A; case-insensitive

        Raises:
            ValueError: If the code is not a known rank
        """
        code = rank_str.upper()
        if code == '10':
            code = 'T'
        try:
            return _RANKS_BY_CODE[code]
        except KeyError:
            raise ValueError(f"Invalid rank: {rank_str}")


_RANK_CODES = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}
_RANKS_BY_CODE = {code: rank for rank, code in _RANK_CODES.items()}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable and hashable; two cards are equal iff both
    rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def pretty(self) -> str:
        """Representation with a suit glyph, e.g. 'A♠'."""
        rank_str = '10' if self.rank is Rank.TEN else str(self.rank)
        return f"{rank_str}{self.suit.symbol}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades. '10s' is
                     accepted as well as 'Ts'.

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[:-1], card_str[-1]

        try:
            rank = Rank.from_string(rank_str)
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except (ValueError, StopIteration):
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
