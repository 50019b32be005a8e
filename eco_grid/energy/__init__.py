"""energy – power sources and their output reports."""

from .sources import (
    SUNLIGHT_PERCENT_RANGE, WIND_SPEED_REFERENCE_MS,
    PowerSourceType, PowerSource, SolarPanel, WindTurbine,
    format_number,
)

__all__ = [
    "SUNLIGHT_PERCENT_RANGE", "WIND_SPEED_REFERENCE_MS",
    "PowerSourceType", "PowerSource", "SolarPanel", "WindTurbine",
    "format_number",
]
