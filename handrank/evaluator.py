from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .cards import ACE, Card, parse_label
from .models import NO_HAND, EvaluatorConfig, HandCategory, HandRank

LOGGER = logging.getLogger("handrank.evaluator")

HAND_SIZE = 5
_DEFAULT_CONFIG = EvaluatorConfig()


def evaluate(cards: Sequence[Card], config: Optional[EvaluatorConfig] = None) -> HandRank:
    """Classify exactly five cards. Any other count yields ``NONE``."""
    config = config or _DEFAULT_CONFIG
    if len(cards) != HAND_SIZE:
        LOGGER.debug("Expected %s cards, got %s", HAND_SIZE, len(cards))
        return NO_HAND

    ordered = sorted(cards, key=lambda card: card.rank)
    count_values = sorted(_rank_counts(ordered).values(), reverse=True)

    high_count = count_values[0]
    if len(count_values) > 1:
        second_count = count_values[1]
    elif config.strict_counts:
        LOGGER.debug("All cards share rank %s; no second count", ordered[0].rank)
        return NO_HAND
    else:
        second_count = 0

    is_flush = _is_flush(ordered)
    is_run = _is_straight_run(ordered)

    if is_flush and is_run:
        royal = ordered[0].rank == ACE and ordered[1].rank == 10
        return HandRank(HandCategory.STRAIGHT_FLUSH, royal=royal)
    if high_count == 4:
        return HandRank(HandCategory.FOUR_OF_A_KIND)
    if high_count == 3 and second_count == 2:
        return HandRank(HandCategory.FULL_HOUSE)
    # Historically a plain run is reported as FLUSH and a plain flush as STRAIGHT.
    if is_run:
        return HandRank(HandCategory.STRAIGHT if config.conventional_names else HandCategory.FLUSH)
    if is_flush:
        return HandRank(HandCategory.FLUSH if config.conventional_names else HandCategory.STRAIGHT)
    if high_count == 3:
        return HandRank(HandCategory.THREE_OF_A_KIND)
    if high_count == 2 and second_count == 2:
        return HandRank(HandCategory.TWO_PAIR)
    if high_count == 2:
        return HandRank(HandCategory.ONE_PAIR)
    return HandRank(HandCategory.HIGH_CARDS)


def _rank_counts(cards: Sequence[Card]) -> Dict[int, int]:
    counts: Dict[int, int] = {}
    for card in cards:
        counts.setdefault(card.rank, 0)
        counts[card.rank] += 1
    return counts


def _is_flush(cards: Sequence[Card]) -> bool:
    return len({card.suit for card in cards}) == 1


def _is_straight_run(ordered: Sequence[Card]) -> bool:
    # Ace sits below two; the only other place it may connect is up to ten.
    for current, following in zip(ordered, ordered[1:]):
        if following.rank == current.rank + 1:
            continue
        if current.rank == ACE and following.rank == 10:
            continue
        return False
    return True


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def evaluate_labels(labels: Sequence[str], config: Optional[EvaluatorConfig] = None) -> HandRank:
    return evaluate(parse_cards(labels), config)
