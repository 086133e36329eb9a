"""Ticket scoring: match counting, rank lookup, tally and payout."""

from __future__ import annotations
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable

from .rules import LottoRules, Rank, Ticket, WinningNumbers

logger = logging.getLogger(__name__)

ResultTally = Dict[Rank, int]


def match_count(ticket: Ticket, winning: WinningNumbers) -> int:
    return len(set(ticket) & set(winning))


def classify(matches: int, bonus_match: bool, rules: LottoRules) -> Rank:
    """First rule in ``rules.rank_rules`` that fits wins; NONE if none does."""
    for rule in rules.rank_rules:
        if rule.matches(matches, bonus_match):
            return rule.rank
    return Rank.NONE


def rank_of(ticket: Ticket, winning: WinningNumbers, bonus: int, rules: LottoRules) -> Rank:
    return classify(match_count(ticket, winning), bonus in ticket, rules)


def tally(
    tickets: Iterable[Ticket],
    winning: WinningNumbers,
    bonus: int,
    rules: LottoRules,
) -> ResultTally:
    results: ResultTally = {rank: 0 for rank in Rank}
    for ticket in tickets:
        results[rank_of(ticket, winning, bonus, rules)] += 1
    logger.debug("Tally: %s", {rank.value: n for rank, n in results.items()})
    return results


def total_prize(results: ResultTally, rules: LottoRules) -> int:
    return sum(count * rules.prize(rank) for rank, count in results.items())


def profit_rate(total: int, purchase_amount: int) -> Decimal:
    """Payout as a percentage of the amount spent, rounded half up to 0.1."""
    rate = Decimal(total) * 100 / Decimal(purchase_amount)
    return rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
