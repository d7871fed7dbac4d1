"""
Command-line excessive cancellations check.

Usage:
  python scripts/check_cancellations.py data/trades.csv
  python scripts/check_cancellations.py data/trades.csv --json
"""

import argparse
import json
import logging
import os
import sys

# Resolve project imports no matter where script is run from.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import LOG_LEVEL
from services.processing_service import ExcessiveCancellationsChecker

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Flag companies with excessive order cancellations.")
    parser.add_argument("csv", help="Path to trades CSV file (timestamp,company,D|F,quantity).")
    parser.add_argument("--json", action="store_true", help="Print the full JSON report.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")

    checker = ExcessiveCancellationsChecker(args.csv)
    try:
        report = checker.report()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.csv, e)
        return 1

    if args.json:
        print(json.dumps(report, indent=2))
        return 0

    excessive = sorted(checker.companies_involved_in_excessive_cancellations())
    print(f"Companies involved in excessive cancellations: {len(excessive)}")
    for company in excessive:
        print(f"  {company}")
    print(f"Well-behaved companies: {checker.total_number_of_well_behaved_companies()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
