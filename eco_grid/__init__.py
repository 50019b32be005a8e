"""
Eco-Grid Energy Distributor
===========================
Console tool that models solar panels and wind turbines, collects their
parameters interactively and prints summary and detailed output reports.

Package layout
--------------
eco_grid/
    energy/     – power source base class, solar panel and wind turbine
    console/    – validating console input loops
    session.py  – interactive session driving the reports
"""

__version__ = "1.0.0"
