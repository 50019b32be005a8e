"""
Eco-Grid Energy Distributor - Main Entry Point
Run this file to start an interactive power report session.
"""

from eco_grid.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
