"""
Shared pytest fixtures for the Eco-Grid test suite.
"""

import pytest
from eco_grid.console import InputReader
from eco_grid.energy import SolarPanel, WindTurbine


class ScriptedConsole:
    """Feeds canned answers to InputReader and records prompts and messages."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.messages = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, message):
        self.messages.append(message)

    def reader(self):
        return InputReader(read=self.read, write=self.write)


@pytest.fixture
def scripted_console():
    """Factory: scripted_console(["a", "b"]) -> ScriptedConsole."""
    return ScriptedConsole


@pytest.fixture
def half_sun_panel():
    """100 kW panel at 50% sunlight (50 kW effective)."""
    return SolarPanel("S1", 100, 50)


@pytest.fixture
def moderate_wind_turbine():
    """200 kW turbine at 5 m/s (100 kW effective)."""
    return WindTurbine("W1", 200, 5)
