from __future__ import annotations
import re
from typing import List

from .errors import NumberFormatError
from .rules import LottoRules, WinningNumbers

INT_RE = re.compile(r"([+-]?)0*([0-9]+)")

# console integers are signed 32-bit; anything wider is not a number here
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

AMOUNT_FORMAT_MESSAGE = "[ERROR] 금액은 숫자로 입력해 주세요."
NUMBER_FORMAT_MESSAGE = "[ERROR] 번호는 숫자로 입력해 주세요."


def _parse_int(s: str, message: str) -> int:
    # int() alone would also take "1_000", " 12" and non-ASCII digits
    m = INT_RE.fullmatch(s)
    if not m or len(m.group(2)) > len(str(INT_MAX)):
        raise NumberFormatError(message)
    value = int(m.group(1) + m.group(2))
    if not (INT_MIN <= value <= INT_MAX):
        raise NumberFormatError(message)
    return value


def _chomp(line: str) -> str:
    return line.rstrip("\r\n")


def _split_fields(line: str) -> List[str]:
    parts = line.split(",")
    # trailing separators are ignored: "1,2,3,4,5,6," is six numbers
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_purchase_amount(line: str, rules: LottoRules) -> int:
    amount = _parse_int(_chomp(line), AMOUNT_FORMAT_MESSAGE)
    rules.validate_amount(amount)
    return amount


def parse_winning_numbers(line: str, rules: LottoRules) -> WinningNumbers:
    """
    Reads the winning combination from a comma separated line.

    The count is checked first, then each value in order is trimmed,
    parsed, range checked and compared against the values before it,
    so the first bad value decides which error is raised.
    """
    parts = _split_fields(_chomp(line))
    rules.validate_count(parts)
    numbers: List[int] = []
    for part in parts:
        n = _parse_int(part.strip(), NUMBER_FORMAT_MESSAGE)
        rules.validate_number(n)
        rules.validate_unique(n, numbers)
        numbers.append(n)
    return tuple(numbers)


def parse_bonus_number(line: str, rules: LottoRules) -> int:
    """Bonus number is range checked only; overlap with the winning set is allowed."""
    number = _parse_int(_chomp(line), NUMBER_FORMAT_MESSAGE)
    rules.validate_number(number)
    return number
