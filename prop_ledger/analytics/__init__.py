"""Aggregations and display helpers over ledger snapshots."""

from prop_ledger.analytics.dashboard import (
    ApartmentProfit,
    Dashboard,
    HeadlineStats,
    MonthlyBucket,
    Occupancy,
    apartment_profit,
    build_dashboard,
    headline_stats,
    monthly_series,
    occupancy,
    profit_by_apartment,
)
from prop_ledger.analytics.formatting import (
    format_currency,
    format_file_size,
    ledger,
    resolve_apartment_name,
)

__all__ = [
    "ApartmentProfit",
    "Dashboard",
    "HeadlineStats",
    "MonthlyBucket",
    "Occupancy",
    "apartment_profit",
    "build_dashboard",
    "format_currency",
    "format_file_size",
    "headline_stats",
    "ledger",
    "monthly_series",
    "occupancy",
    "profit_by_apartment",
    "resolve_apartment_name",
]
