"""Persistence and dashboard aggregation for a single-owner rental portfolio."""

__version__ = "0.1.0"
