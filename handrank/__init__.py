"""Five-card poker hand classification."""

from .cards import RANKS, SUITS, Card, Suit, build_deck, cards_to_labels, deal, parse_label
from .evaluator import HAND_SIZE, evaluate, evaluate_labels, parse_cards
from .labels import LOCALES, label_for
from .models import EvaluatorConfig, HandCategory, HandRank

__all__ = [
    "Card",
    "Suit",
    "RANKS",
    "SUITS",
    "build_deck",
    "cards_to_labels",
    "deal",
    "parse_label",
    "HAND_SIZE",
    "evaluate",
    "evaluate_labels",
    "parse_cards",
    "LOCALES",
    "label_for",
    "EvaluatorConfig",
    "HandCategory",
    "HandRank",
]
