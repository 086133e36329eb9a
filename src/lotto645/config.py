"""Environment-based runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Process settings. Game constants live in ``LottoRules``, not here."""

    LOG_LEVEL: str = "WARNING"


def get_settings() -> Settings:
    """Read settings from the environment at call time."""

    return Settings(LOG_LEVEL=os.getenv("LOTTO_LOG_LEVEL", "WARNING"))
