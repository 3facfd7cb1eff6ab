"""
Page configuration: display precision, currency and logging.
The working-calendar assumption is not configurable; it lives in core/schema.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    rate_decimals: int = 2
    time_decimals: int = 1
    currency_symbol: str = "$"

    # root logger level used by core.logging_setup
    log_level: str = "INFO"
