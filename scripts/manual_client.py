#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from itertools import count
from typing import Any, Dict, Optional

from websockets.asyncio.client import ClientConnection, connect

logging.basicConfig(level=logging.INFO)

# ManualClient sends hands typed at the terminal to a showdown server.

HELP_TEXT = """Enter five cards (e.g. "As 10s Js Qs Ks"), or:
  d [seed]  deal a random hand on the server
  h         show this help
  q         quit"""


class ManualClient:
    def __init__(self, name: str, url: str) -> None:
        self.name = name
        self.url = url
        self.websocket: Optional[ClientConnection] = None
        self.req_ids = count(1)

    async def run(self) -> None:
        async with connect(self.url) as ws:
            self.websocket = ws
            await self._send({"type": "hello", "v": 1, "name": self.name})
            self._print_message(await self._recv())
            await self._loop()

    async def _loop(self) -> None:
        print(HELP_TEXT)
        while True:
            request = self._prompt_request()
            if request is None:
                break
            if not request:
                continue
            await self._send(request)
            self._print_message(await self._recv())

    def _prompt_request(self) -> Optional[Dict[str, Any]]:
        line = input("hand> ").strip()
        if not line:
            return {}
        command, _, rest = line.partition(" ")
        command = command.lower()
        if command == "q":
            return None
        if command == "h":
            print(HELP_TEXT)
            return {}
        if command == "d":
            request: Dict[str, Any] = {"type": "deal", "req_id": str(next(self.req_ids))}
            if rest.strip():
                try:
                    request["seed"] = int(rest)
                except ValueError:
                    print("Seed must be an integer")
                    return {}
            return request
        labels = line.replace(",", " ").split()
        return {"type": "evaluate", "cards": labels, "req_id": str(next(self.req_ids))}

    def _print_message(self, msg: Dict[str, Any]) -> None:
        msg_type = msg.get("type", "?")
        print(f"\n>>> {msg_type.upper()}")
        if msg_type == "welcome":
            print(f"Connected as {msg.get('name')}, config: {json.dumps(msg.get('config'))}")
        elif msg_type == "result":
            print(f"{' '.join(msg.get('cards', []))}\n= {msg.get('label')} ({msg.get('category')})")
        elif msg_type == "error":
            print(f"Error {msg.get('code')}: {msg.get('msg')}")
        else:
            print(json.dumps(msg, indent=2, ensure_ascii=False))

    async def _recv(self) -> Dict[str, Any]:
        assert self.websocket is not None
        return json.loads(await self.websocket.recv())

    async def _send(self, payload: Dict[str, Any]) -> None:
        assert self.websocket is not None
        await self.websocket.send(json.dumps(payload))


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Showdown manual client")
    parser.add_argument("--url", default="ws://127.0.0.1:8765")
    parser.add_argument("--name", default="manual")
    return parser.parse_args(argv)


def main(argv: list[str]) -> None:
    args = parse_args(argv)
    client = ManualClient(name=args.name, url=args.url)
    try:
        asyncio.run(client.run())
    except (KeyboardInterrupt, EOFError):
        print("\nSession closed")


if __name__ == "__main__":
    main(sys.argv[1:])
