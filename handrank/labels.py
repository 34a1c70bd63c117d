from __future__ import annotations

from typing import Dict, Tuple

from .models import HandCategory, HandRank

LabelKey = Tuple[HandCategory, bool]

LABELS: Dict[str, Dict[LabelKey, str]] = {
    "en": {
        (HandCategory.NONE, False): "No hand",
        (HandCategory.STRAIGHT_FLUSH, True): "Royal Flush",
        (HandCategory.STRAIGHT_FLUSH, False): "Straight Flush",
        (HandCategory.FOUR_OF_A_KIND, False): "Four of a Kind",
        (HandCategory.FULL_HOUSE, False): "Full House",
        (HandCategory.FLUSH, False): "Flush",
        (HandCategory.STRAIGHT, False): "Straight",
        (HandCategory.THREE_OF_A_KIND, False): "Three of a Kind",
        (HandCategory.TWO_PAIR, False): "Two Pair",
        (HandCategory.ONE_PAIR, False): "One Pair",
        (HandCategory.HIGH_CARDS, False): "High Cards",
    },
    "ja": {
        (HandCategory.NONE, False): "不成立",
        (HandCategory.STRAIGHT_FLUSH, True): "ロイヤルフラッシュ",
        (HandCategory.STRAIGHT_FLUSH, False): "ストレートフラッシュ",
        (HandCategory.FOUR_OF_A_KIND, False): "4カード",
        (HandCategory.FULL_HOUSE, False): "フルハウス",
        (HandCategory.FLUSH, False): "フラッシュ",
        (HandCategory.STRAIGHT, False): "ストレート",
        (HandCategory.THREE_OF_A_KIND, False): "3カード",
        (HandCategory.TWO_PAIR, False): "2ペア",
        (HandCategory.ONE_PAIR, False): "1ペア",
        (HandCategory.HIGH_CARDS, False): "ブタ",
    },
}

LOCALES = tuple(LABELS)


def label_for(rank: HandRank, locale: str = "en") -> str:
    try:
        table = LABELS[locale]
    except KeyError:
        raise ValueError(f"Unknown locale: {locale}") from None
    return table[(rank.category, rank.royal)]
