"""Demonstration dataset written on first access to a storage location."""

from datetime import date
from decimal import Decimal

from prop_ledger.models import (
    Apartment,
    DocumentMeta,
    PaymentFrequency,
    Tenant,
    Transaction,
    TransactionCategory,
    TransactionType,
)


def demo_apartments() -> list[Apartment]:
    return [
        Apartment(
            id="apt_1",
            name="Sunset Apt 101",
            address="123 Sunset Blvd",
            size=85.0,
            rooms=3,
            floor=1,
            notes="Renovated in 2023",
        ),
        Apartment(
            id="apt_2",
            name="Downtown Loft 4B",
            address="45 Main St",
            size=120.0,
            rooms=2,
            floor=4,
            notes="Luxury finish",
        ),
    ]


def demo_tenants() -> list[Tenant]:
    return [
        Tenant(
            id="ten_1",
            name="John Doe",
            email="john@example.com",
            phone="555-0101",
            apartment_id="apt_1",
            move_in_date=date(2023, 1, 1),
            rent_amount=Decimal("1200"),
            payment_frequency=PaymentFrequency.MONTHLY,
        ),
    ]


def demo_transactions() -> list[Transaction]:
    return [
        Transaction(
            id="tx_1",
            date=date(2023, 10, 1),
            amount=Decimal("1200"),
            transaction_type=TransactionType.INCOME,
            category=TransactionCategory.RENT,
            description="Oct Rent - Sunset",
            apartment_id="apt_1",
            is_recurring=True,
            is_paid=True,
        ),
        Transaction(
            id="tx_2",
            date=date(2023, 10, 5),
            amount=Decimal("450"),
            transaction_type=TransactionType.EXPENSE,
            category=TransactionCategory.MAINTENANCE,
            description="Plumbing Repair",
            apartment_id="apt_1",
            is_recurring=False,
            is_paid=True,
        ),
        Transaction(
            id="tx_3",
            date=date(2023, 11, 1),
            amount=Decimal("1200"),
            transaction_type=TransactionType.INCOME,
            category=TransactionCategory.RENT,
            description="Nov Rent - Sunset",
            apartment_id="apt_1",
            is_recurring=True,
            is_paid=True,
        ),
        Transaction(
            id="tx_4",
            date=date(2023, 11, 1),
            amount=Decimal("150"),
            transaction_type=TransactionType.EXPENSE,
            category=TransactionCategory.ELECTRICITY,
            description="Nov Electric",
            apartment_id="apt_1",
            is_recurring=True,
            is_paid=False,
        ),
    ]


def demo_documents() -> list[DocumentMeta]:
    return []


def demo_dataset() -> dict[str, list]:
    """Return the demonstration records keyed by collection name."""
    return {
        "apartments": demo_apartments(),
        "tenants": demo_tenants(),
        "transactions": demo_transactions(),
        "documents": demo_documents(),
    }
