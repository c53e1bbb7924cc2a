"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class TransactionCategory(str, Enum):
    RENT = "RENT"
    WATER = "WATER"
    ELECTRICITY = "ELECTRICITY"
    TRASH = "TRASH"
    MAINTENANCE = "MAINTENANCE"
    FAMILY_SUPPORT = "FAMILY_SUPPORT"
    TAX = "TAX"
    OTHER = "OTHER"

    @classmethod
    def for_type(cls, transaction_type: TransactionType) -> list["TransactionCategory"]:
        """Categories offered for a transaction type.

        Income is booked as rent only; every other category is an expense.
        """
        if TransactionType(transaction_type) == TransactionType.INCOME:
            return [cls.RENT]
        return [c for c in cls if c != cls.RENT]

    @property
    def label(self) -> str:
        """Human label, e.g. ``FAMILY_SUPPORT`` -> ``Family Support``."""
        return self.value.replace("_", " ").title()


class PaymentFrequency(str, Enum):
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    YEARLY = "YEARLY"


class DocumentType(str, Enum):
    CONTRACT = "CONTRACT"
    BILL = "BILL"
    OTHER = "OTHER"
