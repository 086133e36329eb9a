"""Input errors raised while reading the purchase amount and the draw."""

from __future__ import annotations


class LottoInputError(ValueError):
    """Base input error. ``message`` is what the console shows the player."""

    code = "invalid_input"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NumberFormatError(LottoInputError):
    """Input is not an integer."""

    code = "number_format"


class InvalidAmountError(LottoInputError):
    """Purchase amount below the ticket price or not a multiple of it."""

    code = "invalid_amount"


class InvalidFormatError(LottoInputError):
    """Wrong count of winning numbers."""

    code = "invalid_format"


class InvalidRangeError(LottoInputError):
    """Number outside the allowed pool."""

    code = "invalid_range"


class DuplicateNumberError(LottoInputError):
    """Same number entered twice in the winning set."""

    code = "duplicate_number"
