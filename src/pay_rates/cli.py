"""pay-rates command line interface.

Usage:
    pay-rates 20 30 5 --pay-type hourly --tax-rate 25
    pay-rates 50000 80000 5000 --pay-type yearly --format json
    python -m pay_rates 1000 2000 250 --pay-type weekly --output rates.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from pay_rates.calculators.engine import build_pay_rate_table
from pay_rates.config import Settings, get_settings
from pay_rates.schemas import PayRateTableResponse
from pay_rates.sinks import FileSink, OutputSink, stdout_sink

logger = logging.getLogger(__name__)


class PayRatesCli:
    """Command line front end for the pay rate table."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="pay-rates",
            description="Show equivalent yearly, monthly, weekly and hourly pay rates",
        )
        parser.add_argument("low", type=str, help="Lowest rate in the range")
        parser.add_argument("high", type=str, help="Highest rate in the range")
        parser.add_argument("increment", type=str, help="Step between rates")
        parser.add_argument(
            "--pay-type",
            type=str,
            default=self.settings.default_pay_type,
            help="What the rates represent: yearly, monthly, weekly or hourly "
            f"(default: {self.settings.default_pay_type})",
        )
        parser.add_argument(
            "--tax-rate",
            type=str,
            default=self.settings.default_tax_rate,
            help=f"Flat tax rate in percent (default: {self.settings.default_tax_rate})",
        )
        parser.add_argument(
            "--format",
            type=str,
            choices=["table", "json"],
            default="table",
            help="Output format",
        )
        parser.add_argument(
            "--output",
            type=str,
            help="Write output to this file instead of stdout",
        )
        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        sink: OutputSink = FileSink(parsed.output) if parsed.output else stdout_sink
        table_sink = sink if parsed.format == "table" else None

        try:
            table = build_pay_rate_table(
                parsed.low,
                parsed.high,
                parsed.increment,
                parsed.pay_type,
                parsed.tax_rate,
                sink=table_sink,
            )
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        if table.has_error:
            print(table.message, file=sys.stderr)
            return 1

        if parsed.format == "json":
            response = PayRateTableResponse.from_table(table)
            sink(response.model_dump_json(indent=2) + "\n")

        logger.info("Wrote %d rows to %r", len(table.rates), sink)
        return 0


def main() -> int:
    """CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cli = PayRatesCli(settings)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
