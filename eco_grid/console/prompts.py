"""
Console input loops.

Each read re-prompts until the operator supplies a valid value; there is
no retry limit. End of input raises EOFError from the underlying read.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from eco_grid.energy.sources import format_number

EMPTY_INPUT_MESSAGE = "Input cannot be empty. Please try again."
NEGATIVE_INPUT_MESSAGE = "Invalid input. Must be a positive number. Try again."


def parse_number(raw: Optional[str]) -> Optional[float]:
    """Parse a finite float from *raw*, or return None."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class InputReader:
    """
    Prompts through ``read`` and reports problems through ``write``.

    Both default to the builtin ``input`` and ``print``; tests pass scripted
    callables instead.
    """

    def __init__(self, read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None):
        self.read = read or input
        self.write = write or print

    def read_non_empty_string(self, prompt: str) -> str:
        """Text that is not empty or all whitespace, returned as typed."""
        while True:
            raw = self.read(prompt)
            if raw is not None and raw.strip():
                return raw
            self.write(EMPTY_INPUT_MESSAGE)

    def read_non_negative_number(self, prompt: str) -> float:
        while True:
            value = parse_number(self.read(prompt))
            if value is not None and value >= 0:
                return value
            self.write(NEGATIVE_INPUT_MESSAGE)

    def read_number_in_range(self, prompt: str, min_value: float, max_value: float) -> float:
        """Number within ``[min_value, max_value]``, bounds inclusive."""
        while True:
            value = parse_number(self.read(prompt))
            if value is not None and min_value <= value <= max_value:
                return value
            self.write(f"Invalid input. Must be between {format_number(min_value)} "
                       f"and {format_number(max_value)}. Try again.")
