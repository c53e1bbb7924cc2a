"""Tenant model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from prop_ledger.models.base import UNSET, Patch, to_money
from prop_ledger.models.enums import PaymentFrequency


@dataclass
class Tenant:
    """A person renting, or having rented, an apartment."""

    id: str
    name: str
    email: str
    phone: str
    move_in_date: date
    rent_amount: Decimal
    payment_frequency: PaymentFrequency
    apartment_id: str | None = None  # Soft reference, may dangle
    move_out_date: date | None = None

    def __post_init__(self) -> None:
        self.rent_amount = to_money(self.rent_amount)


@dataclass
class TenantPatch(Patch):
    name: str = UNSET
    email: str = UNSET
    phone: str = UNSET
    move_in_date: date = UNSET
    rent_amount: Decimal = UNSET
    payment_frequency: PaymentFrequency = UNSET
    apartment_id: str | None = UNSET
    move_out_date: date | None = UNSET

    def __post_init__(self) -> None:
        if self.rent_amount is not UNSET:
            self.rent_amount = to_money(self.rent_amount)
