from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

LOGGER = logging.getLogger("handrank.cards")


class Suit(str, Enum):
    SPADE = "s"
    CLUB = "c"
    DIAMOND = "d"
    HEART = "h"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
}
SYMBOL_TO_SUIT = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({suit.value: suit for suit in Suit})

# Deck generation order; evaluation never depends on it.
SUITS = (Suit.SPADE, Suit.CLUB, Suit.DIAMOND, Suit.HEART)

ACE = 1
MIN_RANK = 1
MAX_RANK = 13
RANKS = range(MIN_RANK, MAX_RANK + 1)

RANK_SYMBOLS = {1: "A", 11: "J", 12: "Q", 13: "K"}
SYMBOL_TO_RANK = {"A": 1, "T": 10, "J": 11, "Q": 12, "K": 13}


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"Invalid suit: {self.suit}") from None
        object.__setattr__(self, "suit", suit)

        # Out-of-range ranks become aces instead of being rejected.
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank not in RANKS:
            LOGGER.warning("Rank %r out of range, using ace", self.rank)
            object.__setattr__(self, "rank", ACE)

    @property
    def label(self) -> str:
        return f"{rank_symbol(self.rank)}{self.suit.value}"

    @property
    def display(self) -> str:
        return f"{self.suit.symbol}{rank_symbol(self.rank)}"

    def same_suit(self, other: Card) -> bool:
        return self.suit == other.suit

    def same_rank(self, other: Card) -> bool:
        return self.rank == other.rank


def rank_symbol(rank: int) -> str:
    return RANK_SYMBOLS.get(rank, str(rank))


def build_deck(seed: Optional[int] = None, shuffle: bool = True) -> List[Card]:
    deck = [Card(suit, rank) for suit in SUITS for rank in RANKS]
    if shuffle:
        rng = random.Random(seed)
        rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    """Parse ``As``, ``10h``, ``Td`` or ``♠Q`` style labels into a card.

    Numeric ranks go through the same clamp as ``Card`` itself, so ``14s``
    comes back as the ace of spades.
    """
    text = label.strip()
    if len(text) < 2:
        raise ValueError(f"Invalid card label: {label}")

    if text[0] in SYMBOL_TO_SUIT:
        suit_part, rank_part = text[0], text[1:]
    else:
        suit_part, rank_part = text[-1], text[:-1]

    suit = SYMBOL_TO_SUIT.get(suit_part) or SYMBOL_TO_SUIT.get(suit_part.lower())
    if suit is None:
        raise ValueError(f"Invalid suit: {suit_part}")

    rank_part = rank_part.upper()
    if rank_part in SYMBOL_TO_RANK:
        rank = SYMBOL_TO_RANK[rank_part]
    elif rank_part.isdigit():
        rank = int(rank_part)
    else:
        raise ValueError(f"Invalid card label: {label}")
    return Card(suit, rank)
