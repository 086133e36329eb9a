from decimal import Decimal

import pytest

from lotto645.rules import LottoRules, Rank
from lotto645.scoring import classify, match_count, profit_rate, rank_of, tally, total_prize

RULES = LottoRules()
WINNING = (1, 2, 3, 4, 5, 6)
BONUS = 7


@pytest.mark.parametrize(
    "ticket, expected",
    [
        ((1, 2, 3, 4, 5, 6), Rank.FIRST),
        ((1, 2, 3, 4, 5, 7), Rank.SECOND),
        ((1, 2, 3, 4, 5, 8), Rank.THIRD),
        ((1, 2, 3, 4, 7, 8), Rank.FOURTH),
        ((1, 2, 3, 4, 8, 9), Rank.FOURTH),
        ((1, 2, 3, 7, 8, 9), Rank.FIFTH),
        ((1, 2, 7, 8, 9, 10), Rank.NONE),
        ((10, 20, 30, 40, 41, 42), Rank.NONE),
    ],
)
def test_rank_of(ticket, expected):
    assert rank_of(ticket, WINNING, BONUS, RULES) is expected


def test_five_with_bonus_is_second_not_third():
    assert classify(5, True, RULES) is Rank.SECOND
    assert classify(5, False, RULES) is Rank.THIRD


@pytest.mark.parametrize("matches", [0, 1, 2])
def test_bonus_never_lifts_low_matches(matches):
    assert classify(matches, True, RULES) is Rank.NONE
    assert classify(matches, False, RULES) is Rank.NONE


def test_match_count_ignores_order():
    assert match_count((6, 5, 4, 3, 2, 1), (1, 2, 3, 10, 11, 12)) == 3


def test_tally_covers_every_rank():
    tickets = [(1, 2, 3, 4, 5, 6), (1, 2, 3, 4, 5, 7), (1, 2, 3, 4, 5, 8), (10, 20, 30, 40, 41, 42)]
    results = tally(tickets, WINNING, BONUS, RULES)
    assert set(results) == set(Rank)
    assert results == {
        Rank.FIRST: 1,
        Rank.SECOND: 1,
        Rank.THIRD: 1,
        Rank.FOURTH: 0,
        Rank.FIFTH: 0,
        Rank.NONE: 1,
    }


def test_tally_is_deterministic():
    tickets = [(1, 2, 3, 7, 8, 9), (3, 4, 5, 6, 7, 8), (11, 12, 13, 14, 15, 16)]
    assert tally(tickets, WINNING, BONUS, RULES) == tally(tickets, WINNING, BONUS, RULES)


def test_total_prize():
    results = {rank: 0 for rank in Rank}
    results[Rank.FIFTH] = 2
    results[Rank.FOURTH] = 1
    results[Rank.NONE] = 5
    assert total_prize(results, RULES) == 60_000


@pytest.mark.parametrize(
    "total, amount, expected",
    [
        (5000, 8000, Decimal("62.5")),
        (0, 1000, Decimal("0.0")),
        (15000, 10000, Decimal("150.0")),
        (5000, 3000, Decimal("166.7")),
        # 0.05 exactly: half up
        (1, 2000, Decimal("0.1")),
        (1, 3000, Decimal("0.0")),
        (2_000_000_000, 1000, Decimal("200000000.0")),
    ],
)
def test_profit_rate(total, amount, expected):
    assert profit_rate(total, amount) == expected
