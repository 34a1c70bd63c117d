from __future__ import annotations

import json
from typing import Iterable, List, Tuple

import websockets

from handrank.cards import Card, Suit

S, C, D, H = Suit.SPADE, Suit.CLUB, Suit.DIAMOND, Suit.HEART


def make_hand(pairs: Iterable[Tuple[Suit, int]]) -> List[Card]:
    """Build cards from (suit, rank) pairs, rank 1 being the ace."""
    return [Card(suit, rank) for suit, rank in pairs]


# Fake socket so server paths run without opening real connections.
class DummyWebSocket:
    def __init__(self, incoming: Iterable[object] = ()) -> None:
        self.incoming = [msg if isinstance(msg, str) else json.dumps(msg) for msg in incoming]
        self.sent: list[str] = []
        self.closed = False

    async def recv(self) -> str:
        if not self.incoming:
            raise websockets.ConnectionClosed(None, None)
        return self.incoming.pop(0)

    async def send(self, message: str) -> None:
        self.sent.append(message)

    async def close(self, *args, **kwargs) -> None:
        self.closed = True

    def __aiter__(self) -> "DummyWebSocket":
        return self

    async def __anext__(self) -> str:
        if not self.incoming:
            raise StopAsyncIteration
        return self.incoming.pop(0)

    def payloads(self) -> list[dict]:
        return [json.loads(raw) for raw in self.sent]
