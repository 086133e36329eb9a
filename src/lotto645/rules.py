from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import (
    DuplicateNumberError,
    InvalidAmountError,
    InvalidFormatError,
    InvalidRangeError,
)

Ticket = Tuple[int, ...]        # a sorted 6-tuple of ticket numbers
WinningNumbers = Tuple[int, ...]  # 6 numbers in the order they were entered


class Rank(str, Enum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    THIRD = "THIRD"
    FOURTH = "FOURTH"
    FIFTH = "FIFTH"
    NONE = "NONE"


@dataclass(frozen=True)
class RankRule:
    match_count: int
    bonus_required: bool
    rank: Rank

    def matches(self, match_count: int, bonus_match: bool) -> bool:
        return self.match_count == match_count and (not self.bonus_required or bonus_match)


# Evaluated top to bottom. SECOND has to come before THIRD: both need 5 matches.
RANK_RULES: Tuple[RankRule, ...] = (
    RankRule(6, False, Rank.FIRST),
    RankRule(5, True, Rank.SECOND),
    RankRule(5, False, Rank.THIRD),
    RankRule(4, False, Rank.FOURTH),
    RankRule(3, False, Rank.FIFTH),
)

PRIZES: Tuple[Tuple[Rank, int], ...] = (
    (Rank.FIRST, 2_000_000_000),
    (Rank.SECOND, 30_000_000),
    (Rank.THIRD, 1_500_000),
    (Rank.FOURTH, 50_000),
    (Rank.FIFTH, 5_000),
    (Rank.NONE, 0),
)


@dataclass(frozen=True)
class LottoRules:
    ticket_price: int = 1000
    number_count: int = 6
    min_number: int = 1
    max_number: int = 45
    rank_rules: Tuple[RankRule, ...] = RANK_RULES
    prizes: Tuple[Tuple[Rank, int], ...] = PRIZES

    def prize(self, rank: Rank) -> int:
        return dict(self.prizes).get(rank, 0)

    def validate_amount(self, amount: int) -> None:
        """Check that a purchase amount buys a whole number of tickets."""
        if amount < self.ticket_price:
            raise InvalidAmountError(
                f"[ERROR] 구입 금액은 최소 {self.ticket_price:,}원 이상이어야 합니다."
            )
        if amount % self.ticket_price != 0:
            raise InvalidAmountError(
                f"[ERROR] 구입 금액은 {self.ticket_price:,}원 단위여야 합니다."
            )

    def validate_number(self, number: int) -> None:
        if not (self.min_number <= number <= self.max_number):
            raise InvalidRangeError(
                f"[ERROR] 번호는 {self.min_number}부터 {self.max_number} 사이의 숫자여야 합니다."
            )

    def validate_count(self, values: Iterable[object]) -> None:
        if len(list(values)) != self.number_count:
            raise InvalidFormatError(f"[ERROR] 당첨 번호는 {self.number_count}개여야 합니다.")

    def validate_unique(self, number: int, seen: Iterable[int]) -> None:
        if number in seen:
            raise DuplicateNumberError("[ERROR] 중복된 번호는 입력할 수 없습니다.")
