"""
Power Source Module
Solar panels and wind turbines sharing one reporting contract.
Summary reports show effective output; detailed reports show base output.
"""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import List, Optional, TextIO, Tuple

# ---------------------------------------------------------------------------
# Output model constants
# ---------------------------------------------------------------------------
SUNLIGHT_PERCENT_RANGE: Tuple[float, float] = (0.0, 100.0)
"""Inclusive bounds for a solar panel's sunlight percentage."""

WIND_SPEED_REFERENCE_MS: float = 10.0
"""Wind speed (m/s) at which a turbine delivers exactly its base output.

effective_output = base_output * (wind_speed / WIND_SPEED_REFERENCE_MS)
"""

DETAILED_REPORT_HEADER = "=== Detailed Power Report ==="


class PowerSourceType(Enum):
    """Kinds of power source available."""
    SOLAR = auto()
    WIND = auto()


def format_number(value: float) -> str:
    """Shortest round-trip text for a number, without a trailing ".0" (100, 12.5, 1e+20)."""
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


class PowerSource(ABC):
    """
    Base power source: identity plus nameplate (base) output in kW.

    Both fields are validated on every assignment, so an instance can never
    hold an empty ID or a negative rating.
    """

    label: Optional[str] = None
    """Variant name shown in the summary line; None keeps the generic line."""

    def __init__(self, source_id: str, base_output: float):
        self.source_id = source_id
        self.base_output = base_output

    @property
    def source_id(self) -> str:
        return self._source_id

    @source_id.setter
    def source_id(self, value: str):
        if value is None or not str(value).strip():
            raise ValueError("Source ID cannot be empty.")
        self._source_id = str(value)

    @property
    def base_output(self) -> float:
        """Rated output in kW, independent of conditions."""
        return self._base_output

    @base_output.setter
    def base_output(self, value: float):
        value = float(value)
        if not value >= 0 or math.isinf(value):
            raise ValueError("Base output cannot be negative.")
        self._base_output = value

    @property
    @abstractmethod
    def source_type(self) -> PowerSourceType:
        """Which variant this source is."""

    @property
    @abstractmethod
    def effective_output(self) -> float:
        """Base output scaled by current conditions (kW)."""

    # -- reporting ----------------------------------------------------------

    def summary_line(self) -> str:
        """One-line summary: effective output for labelled variants, base output otherwise."""
        if self.label is not None:
            return (f"{self.label} [{self.source_id}] Effective Output: "
                    f"{self.effective_output:.2f} kW")
        return f"Power Source {self.source_id} producing {format_number(self.base_output)} kW."

    def report_lines(self, detailed: bool = False) -> List[str]:
        """
        Lines of the report without printing them.

        The detailed block always shows base output, for every variant;
        the non-detailed form dispatches to the variant's summary line.
        """
        if detailed:
            return [
                DETAILED_REPORT_HEADER,
                f"Source ID: {self.source_id}",
                f"Base Output: {format_number(self.base_output)} kW",
            ]
        return [self.summary_line()]

    def generate_report(self, detailed: bool = False, file: Optional[TextIO] = None):
        """Print the report to *file* (stdout when None)."""
        out = file if file is not None else sys.stdout
        for line in self.report_lines(detailed):
            print(line, file=out)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(source_id={self.source_id!r}, "
                f"base_output={self.base_output!r})")


class SolarPanel(PowerSource):
    """Solar panel whose output scales with the sunlight percentage."""

    label = "Solar Panel"

    def __init__(self, source_id: str, base_output: float, sunlight_percent: float):
        super().__init__(source_id, base_output)
        self.sunlight_percent = sunlight_percent

    @property
    def source_type(self) -> PowerSourceType:
        return PowerSourceType.SOLAR

    @property
    def sunlight_percent(self) -> float:
        return self._sunlight_percent

    @sunlight_percent.setter
    def sunlight_percent(self, value: float):
        low, high = SUNLIGHT_PERCENT_RANGE
        value = float(value)
        if not low <= value <= high:
            raise ValueError("Sunlight percent must be between 0 and 100.")
        self._sunlight_percent = value

    @property
    def effective_output(self) -> float:
        return self.base_output * (self.sunlight_percent / 100)


class WindTurbine(PowerSource):
    """Wind turbine whose output scales linearly with wind speed."""

    label = "Wind Turbine"

    def __init__(self, source_id: str, base_output: float, wind_speed: float):
        super().__init__(source_id, base_output)
        self.wind_speed = wind_speed

    @property
    def source_type(self) -> PowerSourceType:
        return PowerSourceType.WIND

    @property
    def wind_speed(self) -> float:
        """Wind speed in m/s."""
        return self._wind_speed

    @wind_speed.setter
    def wind_speed(self, value: float):
        value = float(value)
        if not value >= 0 or math.isinf(value):
            raise ValueError("Wind speed cannot be negative.")
        self._wind_speed = value

    @property
    def effective_output(self) -> float:
        return self.base_output * (self.wind_speed / WIND_SPEED_REFERENCE_MS)