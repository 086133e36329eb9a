from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, List, Sequence, TypeVar

from .config import get_settings
from .errors import LottoInputError
from .generate import generate_tickets, ticket_count
from .logging_config import configure_logging
from .parsing import parse_bonus_number, parse_purchase_amount, parse_winning_numbers
from .report import build_report, render_report
from .rules import LottoRules, Ticket, WinningNumbers
from .scoring import tally

logger = logging.getLogger(__name__)

T = TypeVar("T")

AMOUNT_PROMPT = "구입금액을 입력해 주세요."
WINNING_PROMPT = "당첨 번호를 입력해 주세요."
BONUS_PROMPT = "보너스 번호를 입력해 주세요."


def _ask(prompt: str, parse: Callable[[str], T]) -> T:
    """Prompt until ``parse`` accepts the line. EOFError from input() is not caught."""
    while True:
        print(prompt)
        line = input()
        try:
            return parse(line)
        except LottoInputError as e:
            logger.info("Rejected input %r: %s", line, e.code)
            print(e.message)


def read_purchase_amount(rules: LottoRules) -> int:
    return _ask(AMOUNT_PROMPT, lambda line: parse_purchase_amount(line, rules))


def read_winning_numbers(rules: LottoRules) -> WinningNumbers:
    return _ask(WINNING_PROMPT, lambda line: parse_winning_numbers(line, rules))


def read_bonus_number(rules: LottoRules) -> int:
    return _ask(BONUS_PROMPT, lambda line: parse_bonus_number(line, rules))


def print_tickets(tickets: List[Ticket]) -> None:
    print(f"{len(tickets)}개를 구매했습니다.")
    for ticket in tickets:
        print(sorted(ticket))


def run(rules: LottoRules, seed: int | None = None) -> None:
    amount = read_purchase_amount(rules)
    tickets = generate_tickets(ticket_count(amount, rules), rules, seed=seed)
    print_tickets(tickets)

    winning = read_winning_numbers(rules)
    bonus = read_bonus_number(rules)

    report = build_report(tally(tickets, winning, bonus, rules), amount, rules)
    for line in render_report(report):
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Buy Lotto 6/45 tickets and check them against a draw.")
    ap.add_argument("--seed", type=int, default=None, help="Optional RNG seed for reproducible tickets")
    args = ap.parse_args(argv)

    configure_logging(get_settings())
    try:
        run(LottoRules(), seed=args.seed)
    except EOFError:
        logger.warning("Input closed before the draw was complete")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
