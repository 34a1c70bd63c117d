from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Sequence

import websockets
from websockets.asyncio.server import ServerConnection, serve
from websockets.http11 import Request, Response

from handrank.cards import Card, build_deck, cards_to_labels, deal
from handrank.evaluator import HAND_SIZE, evaluate, parse_cards
from handrank.labels import label_for
from handrank.models import EvaluatorConfig

LOGGER = logging.getLogger("showdown_host")

# ShowdownServer is the network front for the evaluator.
# Every socket concern lives here; handrank stays pure.


class ShowdownServerError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def _config_payload(config: EvaluatorConfig) -> Dict[str, Any]:
    return {
        "hand_size": HAND_SIZE,
        "locale": config.locale,
        "conventional_names": config.conventional_names,
        "strict_counts": config.strict_counts,
    }


class ShowdownServer:
    def __init__(self, config: EvaluatorConfig) -> None:
        self.config = config
        self.connections = 0

    async def start(self, host: str = "0.0.0.0", port: int = 8765) -> None:
        async with serve(self._handle_connection, host, port, process_request=_process_request):
            LOGGER.info("Showdown server listening on %s:%s", host, port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        hello = await self._read_message(websocket)
        if not hello or hello.get("type") != "hello":
            await self._send_error(websocket, code="BAD_HELLO", msg="Expected hello")
            await websocket.close()
            return

        name_raw = hello.get("name")
        name = name_raw.strip() if isinstance(name_raw, str) else ""
        name = name or "REMOTE"

        self.connections += 1
        LOGGER.info("%s connected (%s open)", name, self.connections)
        await self._send_json(websocket, "welcome", {"name": name, "config": _config_payload(self.config)})

        try:
            async for raw in websocket:
                message = self._decode(raw)
                if message is None:
                    await self._send_error(websocket, code="BAD_JSON", msg="Message is not a JSON object")
                    continue
                try:
                    msg_type, payload = self.handle_message(message)
                except ShowdownServerError as exc:
                    error = {"code": exc.code, "msg": exc.msg}
                    if "req_id" in message:
                        error["req_id"] = message["req_id"]
                    await self._send_json(websocket, "error", error)
                    continue
                await self._send_json(websocket, msg_type, payload)
        except websockets.ConnectionClosed:
            pass
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Showdown session crashed for %s: %s", name, exc)
        finally:
            self.connections -= 1
            LOGGER.info("%s disconnected", name)

    def handle_message(self, message: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
        msg_type = message.get("type")
        if msg_type == "evaluate":
            cards = self._cards_from_message(message)
        elif msg_type == "deal":
            seed = message.get("seed")
            if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
                raise ShowdownServerError("BAD_SCHEMA", "seed must be an integer")
            cards = deal(build_deck(seed), HAND_SIZE)
        else:
            raise ShowdownServerError("UNKNOWN_TYPE", "Unsupported message type")

        payload = self.result_payload(cards)
        if "req_id" in message:
            payload["req_id"] = message["req_id"]
        return "result", payload

    def result_payload(self, cards: Sequence[Card]) -> Dict[str, Any]:
        rank = evaluate(cards, self.config)
        LOGGER.debug("Evaluated %s as %s", cards_to_labels(cards), rank.category.value)
        return {
            "cards": cards_to_labels(cards),
            **rank.to_payload(),
            "label": label_for(rank, self.config.locale),
        }

    def _cards_from_message(self, message: Dict[str, Any]) -> List[Card]:
        labels = message.get("cards")
        if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
            raise ShowdownServerError("BAD_SCHEMA", "cards must be a list of card labels")
        try:
            return parse_cards(labels)
        except ValueError as exc:
            raise ShowdownServerError("BAD_CARD", str(exc)) from exc

    async def _send_json(self, websocket: ServerConnection, msg_type: str, payload: Dict[str, Any]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except websockets.ConnectionClosed:
            pass

    async def _send_error(self, websocket: ServerConnection, code: str, msg: str) -> None:
        await self._send_json(websocket, "error", {"code": code, "msg": msg})

    def _envelope(self, msg_type: str, payload: Dict[str, Any]) -> str:
        body: Dict[str, Any] = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body, ensure_ascii=False)

    async def _read_message(self, websocket: ServerConnection) -> Optional[Dict[str, Any]]:
        try:
            raw = await asyncio.wait_for(websocket.recv(), timeout=5)
        except (asyncio.TimeoutError, websockets.ConnectionClosed):
            return None
        return self._decode(raw)

    def _decode(self, raw: str | bytes) -> Optional[Dict[str, Any]]:
        try:
            message = json.loads(raw)
        except json.JSONDecodeError:
            return None
        return message if isinstance(message, dict) else None


def _process_request(connection: ServerConnection, request: Request) -> Optional[Response]:
    """Answer plain HTTP health checks; let WebSocket upgrades through."""

    if request.headers.get("Upgrade", "").lower() == "websocket":
        return None

    path = request.path.split("?", 1)[0]
    if path in {"/", "/health", "/healthz"}:
        return connection.respond(HTTPStatus.OK, "showdown server running\n")
    return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")
