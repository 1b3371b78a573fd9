"""Entry point for ``python -m pay_rates``."""

import sys

from pay_rates.cli import main

if __name__ == "__main__":
    sys.exit(main())
