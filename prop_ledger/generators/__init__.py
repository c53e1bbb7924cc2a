"""Faker-backed generators for synthetic portfolios."""

from prop_ledger.generators.portfolio import (
    ApartmentGenerator,
    DocumentGenerator,
    TenantGenerator,
    TransactionGenerator,
)

__all__ = [
    "ApartmentGenerator",
    "DocumentGenerator",
    "TenantGenerator",
    "TransactionGenerator",
]
