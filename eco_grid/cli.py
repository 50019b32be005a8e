"""Command-line entry point for the interactive session."""

import argparse
import sys
from typing import List, Optional

from eco_grid.session import run_session


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments. The session takes no options."""
    parser = argparse.ArgumentParser(
        prog="eco-grid",
        description="Eco-Grid Energy Distributor: report solar and wind output",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    parse_args(argv)
    try:
        run_session()
    except (EOFError, KeyboardInterrupt):
        print("\nSession aborted.", file=sys.stderr)
        return 1
    return 0
