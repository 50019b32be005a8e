"""
Interactive session: read one solar panel and one wind turbine, then print
the summary and detailed reports for both.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Tuple

from eco_grid.console import InputReader
from eco_grid.energy import SUNLIGHT_PERCENT_RANGE, SolarPanel, WindTurbine

BANNER = "=== ECO-GRID ENERGY DISTRIBUTOR ==="


def read_solar_panel(reader: InputReader) -> SolarPanel:
    source_id = reader.read_non_empty_string("Enter Solar Panel ID: ")
    base_output = reader.read_non_negative_number("Enter Solar Panel Base Output (kW): ")
    low, high = SUNLIGHT_PERCENT_RANGE
    sunlight = reader.read_number_in_range("Enter Sunlight Percent (0-100): ", low, high)
    return SolarPanel(source_id, base_output, sunlight)


def read_wind_turbine(reader: InputReader) -> WindTurbine:
    source_id = reader.read_non_empty_string("Enter Wind Turbine ID: ")
    base_output = reader.read_non_negative_number("Enter Wind Turbine Base Output (kW): ")
    wind_speed = reader.read_non_negative_number("Enter Wind Speed (m/s): ")
    return WindTurbine(source_id, base_output, wind_speed)


def run_session(reader: Optional[InputReader] = None,
                out: Optional[TextIO] = None) -> Tuple[SolarPanel, WindTurbine]:
    """
    Run one interactive session.

    Args:
        reader: Input source; defaults to console prompts. Its ``write``
            callable receives the validation messages.
        out: Stream for the banner and reports (stdout when None).

    Returns:
        The solar panel and wind turbine that were reported on.
    """
    out = out if out is not None else sys.stdout
    reader = reader or InputReader()

    print(BANNER + "\n", file=out)

    solar = read_solar_panel(reader)
    wind = read_wind_turbine(reader)
    sources = (solar, wind)

    print("\n--- Summary Report ---", file=out)
    for source in sources:
        source.generate_report(file=out)

    print("\n--- Detailed Report ---", file=out)
    for source in sources:
        source.generate_report(detailed=True, file=out)

    print("\nSystem running successfully.\nSession Ended.", file=out)
    return solar, wind
