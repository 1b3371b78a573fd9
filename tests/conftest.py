"""Pytest fixtures for pay-rates tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pay_rates.calculators.engine import build_pay_rate_table
from pay_rates.calculators.types import PayRateTable
from pay_rates.config import get_settings


class RecordingSink:
    """Sink that keeps every block it receives."""

    def __init__(self) -> None:
        self.blocks: list[str] = []

    def __call__(self, text: str) -> None:
        self.blocks.append(text)


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def hourly_table(recording_sink) -> PayRateTable:
    """Hourly 20..30 by 5 at 25% tax."""
    return build_pay_rate_table(
        Decimal("20"), Decimal("30"), Decimal("5"), "hourly", Decimal("25"), sink=recording_sink
    )


@pytest.fixture
def fresh_settings():
    """Clear cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
