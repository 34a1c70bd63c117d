import itertools

import pytest

from handrank.evaluator import evaluate, evaluate_labels
from handrank.labels import label_for
from handrank.models import EvaluatorConfig, HandCategory, HandRank

from .helpers import C, D, H, S, make_hand

ROYAL = make_hand([(S, 1), (S, 10), (S, 11), (S, 12), (S, 13)])
STRAIGHT_FLUSH = make_hand([(D, 2), (D, 3), (D, 4), (D, 5), (D, 6)])
FOUR = make_hand([(C, 7), (S, 7), (D, 7), (H, 7), (D, 8)])
FULL_HOUSE = make_hand([(C, 3), (S, 9), (D, 3), (H, 3), (D, 9)])
FLUSH_ONLY = make_hand([(H, 1), (H, 3), (H, 5), (H, 6), (H, 13)])
RUN_ONLY = make_hand([(C, 1), (S, 10), (D, 11), (H, 12), (D, 13)])
THREE = make_hand([(H, 1), (S, 3), (H, 1), (S, 1), (H, 13)])
TWO_PAIR = make_hand([(H, 9), (D, 3), (H, 12), (S, 12), (D, 3)])
ONE_PAIR = make_hand([(H, 9), (D, 7), (S, 12), (S, 12), (D, 3)])
HIGH_CARDS = make_hand([(D, 3), (D, 7), (D, 11), (S, 12), (D, 5)])

CASES = [
    (ROYAL, HandRank(HandCategory.STRAIGHT_FLUSH, royal=True)),
    (STRAIGHT_FLUSH, HandRank(HandCategory.STRAIGHT_FLUSH)),
    (FOUR, HandRank(HandCategory.FOUR_OF_A_KIND)),
    (FULL_HOUSE, HandRank(HandCategory.FULL_HOUSE)),
    # Flush-only and run-only hands keep their historical, swapped names.
    (FLUSH_ONLY, HandRank(HandCategory.STRAIGHT)),
    (RUN_ONLY, HandRank(HandCategory.FLUSH)),
    (THREE, HandRank(HandCategory.THREE_OF_A_KIND)),
    (TWO_PAIR, HandRank(HandCategory.TWO_PAIR)),
    (ONE_PAIR, HandRank(HandCategory.ONE_PAIR)),
    (HIGH_CARDS, HandRank(HandCategory.HIGH_CARDS)),
]


@pytest.mark.parametrize("cards, expected", CASES)
def test_evaluate_identifies_all_hand_categories(cards, expected):
    assert evaluate(cards) == expected


@pytest.mark.parametrize("cards, expected", CASES)
def test_evaluate_ignores_card_order(cards, expected):
    results = {evaluate(list(order)) for order in itertools.permutations(cards)}
    assert results == {expected}


def test_swapped_labels_are_reported_literally():
    assert label_for(evaluate(FLUSH_ONLY)) == "Straight"
    assert label_for(evaluate(RUN_ONLY)) == "Flush"
    assert label_for(evaluate(FLUSH_ONLY), "ja") == "ストレート"
    assert label_for(evaluate(RUN_ONLY), "ja") == "フラッシュ"


def test_conventional_names_correct_the_swap():
    config = EvaluatorConfig(conventional_names=True)
    assert evaluate(FLUSH_ONLY, config).category is HandCategory.FLUSH
    assert evaluate(RUN_ONLY, config).category is HandCategory.STRAIGHT
    assert evaluate(ROYAL, config) == HandRank(HandCategory.STRAIGHT_FLUSH, royal=True)


@pytest.mark.parametrize("size", [0, 1, 4, 6, 7])
def test_evaluate_rejects_wrong_hand_size(size):
    cards = (ROYAL + STRAIGHT_FLUSH)[:size]
    assert evaluate(cards).category is HandCategory.NONE


def test_ace_only_bridges_to_ten():
    wheel = make_hand([(C, 1), (S, 2), (D, 3), (H, 4), (D, 5)])
    assert evaluate(wheel).category is HandCategory.FLUSH  # a run, under the historical name

    broken = make_hand([(C, 1), (S, 2), (D, 3), (H, 4), (D, 13)])
    assert evaluate(broken).category is HandCategory.HIGH_CARDS

    king_to_ace = make_hand([(S, 9), (S, 10), (S, 11), (S, 12), (S, 13)])
    assert evaluate(king_to_ace) == HandRank(HandCategory.STRAIGHT_FLUSH)


def test_wheel_straight_flush_is_not_royal():
    wheel = make_hand([(H, 1), (H, 2), (H, 3), (H, 4), (H, 5)])
    assert evaluate(wheel) == HandRank(HandCategory.STRAIGHT_FLUSH, royal=False)


def test_four_of_a_kind_outranks_flush():
    cards = make_hand([(H, 4), (H, 4), (H, 4), (H, 4), (H, 9)])
    assert evaluate(cards).category is HandCategory.FOUR_OF_A_KIND


def test_five_of_a_rank_depends_on_strict_counts():
    cards = make_hand([(H, 6), (S, 6), (D, 6), (C, 6), (H, 6)])
    assert evaluate(cards).category is HandCategory.NONE

    lenient = EvaluatorConfig(strict_counts=False)
    assert evaluate(cards, lenient).category is HandCategory.HIGH_CARDS


def test_evaluate_does_not_mutate_hand():
    cards = list(FULL_HOUSE)
    evaluate(cards)
    assert cards == FULL_HOUSE


def test_evaluate_labels_parses_text():
    assert evaluate_labels(["As", "10s", "Js", "Qs", "Ks"]).royal
    assert evaluate_labels(["9h", "3d", "Qh", "Qs", "3d"]).category is HandCategory.TWO_PAIR


def test_royal_only_on_straight_flush():
    with pytest.raises(ValueError, match="royal"):
        HandRank(HandCategory.FLUSH, royal=True)
