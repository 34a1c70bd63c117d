from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class HandCategory(str, Enum):
    NONE = "NONE"
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"
    FOUR_OF_A_KIND = "FOUR_OF_A_KIND"
    FULL_HOUSE = "FULL_HOUSE"
    FLUSH = "FLUSH"
    STRAIGHT = "STRAIGHT"
    THREE_OF_A_KIND = "THREE_OF_A_KIND"
    TWO_PAIR = "TWO_PAIR"
    ONE_PAIR = "ONE_PAIR"
    HIGH_CARDS = "HIGH_CARDS"


@dataclass(frozen=True)
class HandRank:
    """Evaluator result. ``royal`` is only ever set on a straight flush."""

    category: HandCategory
    royal: bool = False

    def __post_init__(self) -> None:
        if self.royal and self.category is not HandCategory.STRAIGHT_FLUSH:
            raise ValueError("Only a straight flush can be royal")

    def to_payload(self) -> Dict[str, object]:
        return {"category": self.category.value, "royal": self.royal}


NO_HAND = HandRank(HandCategory.NONE)


@dataclass
class EvaluatorConfig:
    # Defaults keep the historical behaviour: a plain run reports FLUSH, a
    # plain flush reports STRAIGHT, and five cards of one rank report NONE.
    conventional_names: bool = False
    strict_counts: bool = True
    locale: str = "en"
