import argparse
import asyncio
import logging

from handrank.labels import LOCALES
from handrank.models import EvaluatorConfig

from .server import ShowdownServer

logging.basicConfig(level=logging.INFO)


def main() -> None:
    parser = argparse.ArgumentParser(description="Poker hand showdown server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--locale", choices=LOCALES, default="en")
    parser.add_argument(
        "--conventional-names",
        action="store_true",
        help="Report a plain run as STRAIGHT and a plain flush as FLUSH",
    )
    parser.add_argument(
        "--lenient-counts",
        action="store_true",
        help="Treat a missing second rank count as zero instead of returning NONE",
    )
    args = parser.parse_args()

    config = EvaluatorConfig(
        conventional_names=args.conventional_names,
        strict_counts=not args.lenient_counts,
        locale=args.locale,
    )

    server = ShowdownServer(config)
    asyncio.run(server.start(host=args.host, port=args.port))


if __name__ == "__main__":
    main()
