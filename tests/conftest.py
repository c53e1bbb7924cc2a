"""Pytest configuration and fixtures."""

import itertools
from datetime import date
from decimal import Decimal

import pytest

from prop_ledger.config import LedgerConfig
from prop_ledger.models import (
    Apartment,
    PaymentFrequency,
    Tenant,
    Transaction,
    TransactionCategory,
    TransactionType,
)
from prop_ledger.store import InMemoryBackend, StorageGateway


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def backend() -> InMemoryBackend:
    """Fresh, never-initialized in-memory store."""
    return InMemoryBackend()


@pytest.fixture
def gateway(backend: InMemoryBackend) -> StorageGateway:
    """Gateway with demo seeding disabled and sequential ids."""
    counter = itertools.count(1)
    return StorageGateway(
        backend,
        config=LedgerConfig(seed_demo=False),
        id_factory=lambda: f"id-{next(counter)}",
    )


@pytest.fixture
def seeded_gateway(backend: InMemoryBackend) -> StorageGateway:
    """Gateway with default configuration (demo seeding on)."""
    return StorageGateway(backend)


@pytest.fixture
def apartment_fields() -> dict:
    return {
        "name": "Harbour View 2A",
        "address": "7 Quay Street",
        "size": 64.5,
        "rooms": 2,
        "floor": 2,
    }


@pytest.fixture
def tenant_fields() -> dict:
    return {
        "name": "Aoife Byrne",
        "email": "aoife@example.com",
        "phone": "555-0199",
        "apartment_id": None,
        "move_in_date": date(2024, 3, 1),
        "rent_amount": Decimal("1450"),
        "payment_frequency": PaymentFrequency.MONTHLY,
    }


@pytest.fixture
def transaction_fields() -> dict:
    return {
        "date": date(2024, 3, 1),
        "amount": Decimal("1450"),
        "transaction_type": TransactionType.INCOME,
        "category": TransactionCategory.RENT,
        "description": "Mar Rent",
        "apartment_id": None,
        "is_recurring": True,
        "is_paid": True,
    }


def make_transaction(
    transaction_type: TransactionType,
    amount: int | str,
    apartment_id: str | None = None,
    day: date = date(2024, 1, 15),
    category: TransactionCategory | None = None,
    tx_id: str = "tx",
) -> Transaction:
    """Build a transaction for aggregation tests."""
    if category is None:
        category = (
            TransactionCategory.RENT
            if transaction_type == TransactionType.INCOME
            else TransactionCategory.OTHER
        )
    return Transaction(
        id=tx_id,
        date=day,
        amount=Decimal(str(amount)),
        transaction_type=transaction_type,
        category=category,
        description="",
        apartment_id=apartment_id,
    )


def make_apartment(apartment_id: str, name: str | None = None) -> Apartment:
    return Apartment(
        id=apartment_id,
        name=name or f"Apartment {apartment_id}",
        address="1 Test Street",
        size=50.0,
        rooms=2,
        floor=1,
    )


def make_tenant(tenant_id: str, apartment_id: str | None) -> Tenant:
    return Tenant(
        id=tenant_id,
        name=f"Tenant {tenant_id}",
        email="",
        phone="",
        apartment_id=apartment_id,
        move_in_date=date(2024, 1, 1),
        rent_amount=Decimal("1000"),
        payment_frequency=PaymentFrequency.MONTHLY,
    )
