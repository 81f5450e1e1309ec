"""Main poker hand evaluation interface."""
import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from poker_showdown.config import EvaluatorConfig
from poker_showdown.core.card import Card
from poker_showdown.core.hand import Hand
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.constants import CARDS_IN_HAND
from poker_showdown.evaluation.scoring import score
from poker_showdown.evaluation.types import Evaluation
from poker_showdown.exceptions import CannotEvaluateError, IllegalHandError

logger = logging.getLogger(__name__)

HandLike = Union[Hand, Iterable[Card]]


def _as_hand(hand: Optional[HandLike]) -> Optional[Hand]:
    if hand is None or isinstance(hand, Hand):
        return hand
    return Hand(hand)


class HandEvaluator:
    """
    Evaluates five-card hands and picks the winners among them.

    Every hand is evaluated independently; the hands sharing the highest
    score win. More than one winner means a split pot.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """
        Initialize evaluator.

        Args:
            config: Evaluation settings; defaults to sequential evaluation
        """
        self.config = config or EvaluatorConfig()

    def evaluate(self, hands: Optional[Sequence[HandLike]]) -> list[Evaluation]:
        """
        Determine the strongest hand(s).

        Args:
            hands: Two or more hands of five distinct cards each

        Returns:
            Evaluations of every hand tied for the highest score, in input order

        Raises:
            CannotEvaluateError: If hands is None or has fewer than two hands
            IllegalHandError: If any hand is not five distinct cards. No hand
                is scored in that case.
        """
        evaluations = self._evaluate_all(hands)

        by_score: dict[float, list[Evaluation]] = defaultdict(list)
        for evaluation in evaluations:
            by_score[evaluation.score].append(evaluation)

        best = max(by_score)
        winners = by_score[best]
        logger.info(
            f"{len(winners)} winner(s) among {len(evaluations)} hands: "
            f"{winners[0].category.name} with score {best}"
        )
        return winners

    def rank_hands(self, hands: Optional[Sequence[HandLike]]) -> list[Evaluation]:
        """
        Evaluate every hand and order them strongest first.

        Tied hands keep their input order. Validation is the same as evaluate().
        """
        evaluations = self._evaluate_all(hands)
        return sorted(evaluations, key=lambda e: e.score, reverse=True)

    def evaluate_hand(self, hand: HandLike) -> Evaluation:
        """
        Evaluate a single hand.

        Raises:
            IllegalHandError: If the hand is not five distinct cards
        """
        hand = _as_hand(hand)
        self._validate_hand(hand)
        return self._score_hand(hand)

    def compare_hands(self, hand1: HandLike, hand2: HandLike) -> int:
        """
        Compare two hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        first, second = self._evaluate_all([hand1, hand2])
        if first.score != second.score:
            return 1 if first.score > second.score else -1
        return 0

    def validate_hands(self, hands: Optional[Sequence[HandLike]]) -> list[Hand]:
        """
        Check a request before any hand is scored.

        Returns:
            The hands, each as a Hand

        Raises:
            CannotEvaluateError: If hands is None or has fewer than two hands
            IllegalHandError: For the first hand that is not five distinct cards
        """
        if hands is None or len(hands) < 2:
            logger.warning("Rejected request with fewer than two hands")
            raise CannotEvaluateError("At least two hands are required to determine a winning hand.")

        validated = []
        for index, hand in enumerate(hands):
            hand = _as_hand(hand)
            self._validate_hand(hand, index)
            validated.append(hand)
        return validated

    def _validate_hand(self, hand: Optional[Hand], index: Optional[int] = None) -> None:
        where = f" (hand {index + 1})" if index is not None else ""
        if hand is None or hand.size != CARDS_IN_HAND:
            logger.warning(f"Rejected hand{where}: {hand}")
            raise IllegalHandError(
                f"Hand must contain exactly {CARDS_IN_HAND} cards{where}.", hand_index=index
            )
        if hand.has_duplicates():
            logger.warning(f"Rejected hand{where} with duplicate cards: {hand}")
            raise IllegalHandError(f"Hand must not contain duplicate cards{where}.", hand_index=index)

    def _evaluate_all(self, hands: Optional[Sequence[HandLike]]) -> list[Evaluation]:
        validated = self.validate_hands(hands)
        if self.config.parallel:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                return list(executor.map(self._score_hand, validated))
        return [self._score_hand(hand) for hand in validated]

    def _score_hand(self, hand: Hand) -> Evaluation:
        category, kickers = classify(hand.cards)
        evaluation = Evaluation(
            hand=hand,
            category=category,
            kickers=tuple(kickers),
            score=score(category, kickers),
        )
        logger.debug(f"{hand} -> {evaluation.describe()} ({evaluation.score})")
        return evaluation


# Global evaluator instance
evaluator = HandEvaluator()


def evaluate(hands: Optional[Sequence[HandLike]]) -> list[Evaluation]:
    """Determine the winning hand(s) with the default evaluator."""
    return evaluator.evaluate(hands)
