"""Display helpers for ledger views."""

from decimal import ROUND_HALF_UP, Decimal

from prop_ledger.models import Apartment, Transaction, TransactionType

UNASSIGNED = "Unassigned"
UNKNOWN = "Unknown"
GLOBAL = "Global"


def resolve_apartment_name(
    apartment_id: str | None,
    apartments: list[Apartment],
    unassigned: str = UNASSIGNED,
    unknown: str = UNKNOWN,
) -> str:
    """Name of the referenced apartment, tolerating dangling references.

    Documents use ``unassigned=GLOBAL``; the transaction ledger uses "-"
    for both cases.
    """
    if not apartment_id:
        return unassigned
    for apartment in apartments:
        if apartment.id == apartment_id:
            return apartment.name
    return unknown


def ledger(
    transactions: list[Transaction],
    transaction_type: TransactionType | None = None,
) -> list[Transaction]:
    """Transactions of one type (or all), newest first.

    Same-day transactions keep their stored order.
    """
    selected = [
        t for t in transactions if transaction_type is None or t.transaction_type == transaction_type
    ]
    return sorted(selected, key=lambda t: t.date, reverse=True)


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_currency(amount: Decimal | int | float, symbol: str = "€") -> str:
    """Whole-unit amount with thousands separators, e.g. ``€1,200``."""
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,}"
