"""REBOUND recovery engine: task prioritization and student risk assessment."""

__version__ = "0.1.0"
