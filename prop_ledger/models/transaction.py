"""Transaction model."""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal

from prop_ledger.models.base import UNSET, Patch, to_money
from prop_ledger.models.enums import TransactionCategory, TransactionType


@dataclass
class Transaction:
    """Money in or out of the portfolio."""

    id: str
    date: datetime.date
    amount: Decimal
    transaction_type: TransactionType = field(metadata={"wire": "type"})
    category: TransactionCategory
    description: str
    apartment_id: str | None = None  # None means portfolio-wide
    is_recurring: bool = False
    is_paid: bool = False

    def __post_init__(self) -> None:
        self.amount = to_money(self.amount)

    @property
    def is_income(self) -> bool:
        return self.transaction_type == TransactionType.INCOME


@dataclass
class TransactionPatch(Patch):
    # Module-qualified so the field name does not shadow the type
    date: datetime.date = UNSET
    amount: Decimal = UNSET
    transaction_type: TransactionType = UNSET
    category: TransactionCategory = UNSET
    description: str = UNSET
    apartment_id: str | None = UNSET
    is_recurring: bool = UNSET
    is_paid: bool = UNSET

    def __post_init__(self) -> None:
        if self.amount is not UNSET:
            self.amount = to_money(self.amount)
