from __future__ import annotations
from decimal import Decimal
from typing import List

from pydantic import BaseModel

from .rules import LottoRules, Rank
from .scoring import ResultTally, profit_rate, total_prize


class RankResult(BaseModel):
    rank: Rank
    match_count: int
    bonus_required: bool
    prize: int
    count: int


class LottoReport(BaseModel):
    purchase_amount: int
    results: List[RankResult]
    total_prize: int
    profit_rate: Decimal


def build_report(results: ResultTally, purchase_amount: int, rules: LottoRules) -> LottoReport:
    """One row per winning tier in rule order; NONE only counts toward nothing."""
    rows = [
        RankResult(
            rank=rule.rank,
            match_count=rule.match_count,
            bonus_required=rule.bonus_required,
            prize=rules.prize(rule.rank),
            count=results.get(rule.rank, 0),
        )
        for rule in rules.rank_rules
    ]
    total = total_prize(results, rules)
    return LottoReport(
        purchase_amount=purchase_amount,
        results=rows,
        total_prize=total,
        profit_rate=profit_rate(total, purchase_amount),
    )


def format_rank_result(row: RankResult) -> str:
    bonus = ", 보너스 볼 일치" if row.bonus_required else ""
    return f"{row.match_count}개 일치{bonus} ({row.prize}원) - {row.count}개"


def render_report(report: LottoReport) -> List[str]:
    lines = ["당첨 통계", "---"]
    lines.extend(format_rank_result(row) for row in report.results)
    lines.append(f"총 수익률은 {report.profit_rate:.1f}%입니다.")
    return lines
