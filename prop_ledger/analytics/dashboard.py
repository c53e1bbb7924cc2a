"""Dashboard aggregates derived from collection snapshots.

Every function here is pure: it takes full snapshots and recomputes from
scratch, with no access to storage. ``build_dashboard`` is the one
convenience that reads a gateway.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

from prop_ledger.models import (
    Apartment,
    Tenant,
    Transaction,
    TransactionCategory,
    TransactionType,
)

if TYPE_CHECKING:
    from prop_ledger.config import LedgerConfig
    from prop_ledger.store.gateway import StorageGateway

FAMILY_SUPPORT_RATE = Decimal("0.10")

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class HeadlineStats:
    """Portfolio totals over all transactions."""

    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal  # May be negative
    family_support_allocation: Decimal  # Policy share of income
    family_support_expenses: Decimal  # Booked FAMILY_SUPPORT expenses, not reconciled with the above


@dataclass(frozen=True)
class Occupancy:
    occupied_count: int
    total_apartments: int
    total_tenants: int
    rate: float  # Percent, 0 when there are no apartments


@dataclass
class MonthlyBucket:
    label: str  # e.g. "Oct 2023"
    year: int
    month: int
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass
class ApartmentProfit:
    apartment_id: str
    name: str
    profit: Decimal = Decimal("0")


@dataclass(frozen=True)
class Dashboard:
    """Everything the dashboard view renders, from one snapshot."""

    stats: HeadlineStats
    occupancy: Occupancy
    monthly: list[MonthlyBucket] = field(default_factory=list)
    apartment_profit: list[ApartmentProfit] = field(default_factory=list)


def _sum(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), Decimal("0"))


def headline_stats(
    transactions: list[Transaction],
    family_support_rate: Decimal | float = FAMILY_SUPPORT_RATE,
) -> HeadlineStats:
    """Compute income, expenses, profit and family-support figures.

    Parameters
    ----------
    transactions : list[Transaction]
        Full transaction snapshot.
    family_support_rate : Decimal | float
        Share of gross income allocated to family support.

    Returns
    -------
    HeadlineStats
        Totals; the allocation is ``total_income * family_support_rate``.
    """
    rate = Decimal(str(family_support_rate))
    income = _sum(t for t in transactions if t.transaction_type == TransactionType.INCOME)
    expenses = _sum(t for t in transactions if t.transaction_type == TransactionType.EXPENSE)
    family_support = _sum(
        t
        for t in transactions
        if t.transaction_type == TransactionType.EXPENSE
        and t.category == TransactionCategory.FAMILY_SUPPORT
    )
    return HeadlineStats(
        total_income=income,
        total_expenses=expenses,
        net_profit=income - expenses,
        family_support_allocation=income * rate,
        family_support_expenses=family_support,
    )


def occupancy(apartments: list[Apartment], tenants: list[Tenant]) -> Occupancy:
    """Count apartments referenced by at least one tenant.

    Tenants without an apartment contribute nothing; several tenants in
    one apartment count once. Dangling references still count, matching
    how tenants are displayed.
    """
    occupied = {t.apartment_id for t in tenants if t.apartment_id}
    total = len(apartments)
    rate = len(occupied) / total * 100 if total else 0.0
    return Occupancy(
        occupied_count=len(occupied),
        total_apartments=total,
        total_tenants=len(tenants),
        rate=rate,
    )


def month_label(day: date) -> str:
    return f"{MONTH_ABBR[day.month - 1]} {day.year}"


def monthly_series(transactions: list[Transaction], chronological: bool = True) -> list[MonthlyBucket]:
    """Bucket transactions by the calendar month of their date.

    Parameters
    ----------
    transactions : list[Transaction]
        Full transaction snapshot.
    chronological : bool
        Sort buckets oldest first. When False, buckets keep the order in
        which their month was first encountered in ``transactions``.

    Returns
    -------
    list[MonthlyBucket]
        One bucket per (year, month) with income and expense sums.
    """
    buckets: dict[tuple[int, int], MonthlyBucket] = {}
    for t in transactions:
        key = (t.date.year, t.date.month)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = MonthlyBucket(label=month_label(t.date), year=key[0], month=key[1])
        if t.transaction_type == TransactionType.INCOME:
            bucket.income += t.amount
        else:
            bucket.expenses += t.amount

    if chronological:
        return [buckets[key] for key in sorted(buckets)]
    return list(buckets.values())


def apartment_profit(apartments: list[Apartment], transactions: list[Transaction]) -> list[ApartmentProfit]:
    """Net profit per apartment, in apartment order.

    Transactions with no apartment, or one that no longer exists, are
    left out rather than grouped into an extra row.
    """
    rows = {a.id: ApartmentProfit(apartment_id=a.id, name=a.name) for a in apartments}
    for t in transactions:
        row = rows.get(t.apartment_id) if t.apartment_id else None
        if row is None:
            continue
        if t.transaction_type == TransactionType.INCOME:
            row.profit += t.amount
        else:
            row.profit -= t.amount
    return list(rows.values())


def profit_by_apartment(apartments: list[Apartment], transactions: list[Transaction]) -> dict[str, Decimal]:
    """``apartment_profit`` as an ``{apartment_id: profit}`` mapping."""
    return {row.apartment_id: row.profit for row in apartment_profit(apartments, transactions)}


def build_dashboard(gateway: "StorageGateway", config: "LedgerConfig | None" = None) -> Dashboard:
    """Read fresh snapshots from ``gateway`` and compute every aggregate."""
    config = config or gateway.config
    apartments = gateway.apartments.get_all()
    tenants = gateway.tenants.get_all()
    transactions = gateway.transactions.get_all()
    return Dashboard(
        stats=headline_stats(transactions, config.family_support_rate),
        occupancy=occupancy(apartments, tenants),
        monthly=monthly_series(transactions, chronological=config.chronological_months),
        apartment_profit=apartment_profit(apartments, transactions),
    )
