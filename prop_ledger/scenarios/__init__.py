"""Scenarios for generating realistic portfolio data sets."""

from prop_ledger.scenarios.portfolio import PortfolioScenario, month_starts

__all__ = ["PortfolioScenario", "month_starts"]
