"""Greeting REST service: default greeting plus per-name overrides stored in SQL."""

__version__ = "0.1.0"
