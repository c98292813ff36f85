"""Anytown problem formulations, cost tables, pump patterns, bounds and helpers."""

__version__ = "24.10.0"