"""Entry point for running the salary calculator CLI."""

import sys

from salary_calculator.cli import main

if __name__ == "__main__":
    sys.exit(main())
