"""Five-card poker hand evaluation package."""

from poker_showdown.core.card import Card, Rank, Suit
from poker_showdown.core.hand import Hand
from poker_showdown.evaluation.evaluator import HandEvaluator, evaluate
from poker_showdown.evaluation.types import Category, Evaluation
from poker_showdown.exceptions import (
    CannotEvaluateError,
    IllegalHandError,
    PokerShowdownError,
)

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "Category",
    "Evaluation",
    "HandEvaluator",
    "evaluate",
    "CannotEvaluateError",
    "IllegalHandError",
    "PokerShowdownError",
]
