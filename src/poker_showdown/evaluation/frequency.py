"""Group a hand's cards by rank and by suit."""
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from poker_showdown.core.card import Card, Rank, Suit


@dataclass(frozen=True)
class FrequencyTable:
    """
    Cards of a hand grouped by rank and by suit.

    Groups keep the actual cards, not just counts, so classifiers can
    build kicker sequences straight from them.
    """
    by_rank: dict[Rank, list[Card]]
    by_suit: dict[Suit, list[Card]]

    @property
    def rank_count(self) -> int:
        """Number of distinct ranks."""
        return len(self.by_rank)

    @property
    def suit_count(self) -> int:
        """Number of distinct suits."""
        return len(self.by_suit)

    @property
    def fingerprint(self) -> tuple[int, ...]:
        """Rank group sizes, largest first, e.g. (3, 2) for a full house."""
        return tuple(sorted((len(group) for group in self.by_rank.values()), reverse=True))

    def groups_of(self, size: int) -> list[list[Card]]:
        """All rank groups with exactly ``size`` cards."""
        return [group for group in self.by_rank.values() if len(group) == size]


def analyze(cards: Iterable[Card]) -> FrequencyTable:
    """Build the rank and suit groupings for ``cards``."""
    by_rank: dict[Rank, list[Card]] = defaultdict(list)
    by_suit: dict[Suit, list[Card]] = defaultdict(list)
    for card in cards:
        by_rank[card.rank].append(card)
        by_suit[card.suit].append(card)
    return FrequencyTable(by_rank=dict(by_rank), by_suit=dict(by_suit))
