import argparse
import logging
from typing import List, Optional, Sequence

from .cards import Card, build_deck, deal
from .evaluator import HAND_SIZE, evaluate, parse_cards
from .labels import LOCALES, label_for
from .models import EvaluatorConfig

SHOWCASE_HANDS = [
    ["As", "10s", "Js", "Qs", "Ks"],
    ["2d", "3d", "4d", "5d", "6d"],
    ["7c", "7s", "7d", "7h", "8d"],
    ["3c", "9s", "3d", "3h", "9d"],
    ["Ah", "3h", "5h", "6h", "Kh"],
    ["Ac", "10s", "Jd", "Qh", "Kd"],
    ["Ah", "3s", "Ah", "As", "Kh"],
    ["9h", "3d", "Qh", "Qs", "3d"],
    ["9h", "7d", "Qs", "Qs", "3d"],
    ["3d", "7d", "Jd", "Qs", "5d"],
]


def format_result(cards: Sequence[Card], config: EvaluatorConfig) -> str:
    hand = ",".join(card.display for card in cards)
    return f"{hand}\n= {label_for(evaluate(cards, config), config.locale)}"


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Deal and classify five-card poker hands")
    parser.add_argument("--cards", help='Hand to classify, e.g. "As 10s Js Qs Ks"')
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed for the dealt hand")
    parser.add_argument("--showcase", action="store_true", help="Print one example hand per category")
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
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    config = EvaluatorConfig(
        conventional_names=args.conventional_names,
        strict_counts=not args.lenient_counts,
        locale=args.locale,
    )

    if args.showcase:
        for labels in SHOWCASE_HANDS:
            print(format_result(parse_cards(labels), config))
        return

    if args.cards:
        try:
            cards = parse_cards(args.cards.replace(",", " ").split())
        except ValueError as exc:
            parser.error(str(exc))
    else:
        cards = deal(build_deck(args.seed), HAND_SIZE)
    print(format_result(cards, config))


if __name__ == "__main__":
    main()
