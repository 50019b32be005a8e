"""console – validating prompt loops for interactive sessions."""

from .prompts import InputReader

__all__ = ["InputReader"]
