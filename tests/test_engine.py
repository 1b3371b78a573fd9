"""Tests for pay rate table orchestration."""

import logging
from decimal import Decimal

import pytest

from pay_rates.calculators.engine import build_pay_rate_table
from pay_rates.calculators.rate_range import InvalidRangeError
from pay_rates.calculators.table import round_to_cents, take_home_ratio
from pay_rates.calculators.types import INVALID_PAY_TYPE_MESSAGE, PayType


class TestHourlyExample:
    """Hourly 20..30 by 5 at 25% tax."""

    def test_range(self, hourly_table):
        assert hourly_table.values == [Decimal("20"), Decimal("25"), Decimal("30")]
        assert hourly_table.pay_type is PayType.HOURLY
        assert not hourly_table.has_error

    def test_first_row(self, hourly_table):
        first = hourly_table.rates[0]
        ratio = take_home_ratio(hourly_table.tax_rate)

        assert first.yearly == Decimal("41600")
        assert round_to_cents(first.monthly) == Decimal("3466.67")
        assert first.weekly == Decimal("800")
        assert first.hourly == Decimal("20")
        assert round_to_cents(first.hourly * ratio) == Decimal("15.00")
        assert round_to_cents(first.yearly * ratio) == Decimal("31200.00")

    def test_sink_receives_whole_table_once(self, hourly_table, recording_sink):
        assert recording_sink.blocks == [hourly_table.text]
        assert len(hourly_table.text.splitlines()) == 5


class TestYearlyExample:
    """Yearly 50000..50000 by 1000 with no tax."""

    def test_single_row(self, recording_sink):
        table = build_pay_rate_table(50000, 50000, 1000, PayType.YEARLY, 0, sink=recording_sink)

        assert len(table.rates) == 1
        row = table.text.splitlines()[2]
        assert row.startswith("$  50000.00  $  50000.00")
        assert "$ 4166.67" in row
        assert "$ 961.54" in row
        assert row.endswith("$24.04")


class TestPayTypeValidation:
    """Unrecognized pay types are reported, not raised."""

    @pytest.mark.parametrize("pay_type", ["daily", "", "hourlyy", None, 3])
    def test_invalid_pay_type_returns_message(self, pay_type, recording_sink):
        table = build_pay_rate_table(20, 30, 5, pay_type, 25, sink=recording_sink)

        assert table.has_error
        assert table.message == INVALID_PAY_TYPE_MESSAGE
        assert table.text == ""
        assert table.rates == []
        assert recording_sink.blocks == []

    def test_invalid_pay_type_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pay_rates.calculators.engine"):
            build_pay_rate_table(20, 30, 5, "fortnightly", 25)
        assert "fortnightly" in caplog.text

    def test_invalid_pay_type_skips_range_checks(self):
        """A bad pay type is reported even when the range is also bad."""
        table = build_pay_rate_table(30, 20, 0, "daily", 25)
        assert table.message == INVALID_PAY_TYPE_MESSAGE

    @pytest.mark.parametrize("pay_type", ["Monthly", " WEEKLY ", "yearly", PayType.HOURLY])
    def test_names_are_case_insensitive(self, pay_type):
        table = build_pay_rate_table(100, 100, 1, pay_type, 0)
        assert table.pay_type is PayType.parse(pay_type)
        assert not table.has_error


class TestInvalidInput:
    """Invalid ranges and tax rates raise before anything is rendered."""

    def test_invalid_range_raises(self, recording_sink):
        with pytest.raises(InvalidRangeError):
            build_pay_rate_table(30, 20, 5, "hourly", 25, sink=recording_sink)
        assert recording_sink.blocks == []

    def test_non_numeric_tax_rate(self):
        with pytest.raises(ValueError, match="Tax rate must be numeric"):
            build_pay_rate_table(20, 30, 5, "hourly", "a lot")

    @pytest.mark.parametrize("tax_rate", ["inf", "-Infinity", "nan", Decimal("NaN")])
    def test_non_finite_tax_rate(self, tax_rate, recording_sink):
        with pytest.raises(ValueError, match="Tax rate must be a finite number"):
            build_pay_rate_table(20, 20, 1, "hourly", tax_rate, sink=recording_sink)
        assert recording_sink.blocks == []

    def test_no_sink_still_returns_text(self):
        table = build_pay_rate_table(20, 20, 1, "weekly", 10)
        assert table.text.splitlines()[2].startswith("$   1040.00")
