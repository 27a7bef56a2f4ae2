"""Deterministic two-faction battle simulator."""

__version__ = "0.1.0"
