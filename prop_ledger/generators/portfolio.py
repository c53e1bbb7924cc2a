"""Generators for apartments, tenants, transactions and documents."""

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Any, Iterator

from prop_ledger.generators.base import BaseGenerator
from prop_ledger.models import (
    DocumentType,
    PaymentFrequency,
    TransactionCategory,
    TransactionType,
)

FieldDict = dict[str, Any]


class ApartmentGenerator(BaseGenerator):
    """Generate synthetic apartments."""

    BUILDING_NAMES = ["Sunset", "Harbour View", "Downtown", "Riverside", "Park Lane", "Old Mill"]

    def generate(self) -> FieldDict:
        floor = self.random.randint(0, 8)
        rooms = self.random.randint(1, 5)
        unit = f"{floor}{self.random.choice('ABCD')}" if floor else f"G{self.random.randint(1, 4)}"
        return {
            "name": f"{self.random.choice(self.BUILDING_NAMES)} Apt {unit}",
            "address": self.fake.street_address(),
            "size": float(rooms * self.random.randint(22, 40)),
            "rooms": rooms,
            "floor": floor,
            "notes": self.fake.sentence(nb_words=4) if self.random.random() < 0.4 else None,
        }

    def generate_batch(self, count: int) -> Iterator[FieldDict]:
        for _ in range(count):
            yield self.generate()


class TenantGenerator(BaseGenerator):
    """Generate synthetic tenants."""

    FREQUENCIES = list(PaymentFrequency)
    FREQUENCY_WEIGHTS = [0.85, 0.10, 0.05]

    def generate(self, apartment_id: str | None = None, move_in_date: date | None = None) -> FieldDict:
        """Generate a tenant, optionally placed in an apartment.

        Parameters
        ----------
        apartment_id : str | None
            Apartment the tenant rents.
        move_in_date : date | None
            Defaults to a date within the last two years.
        """
        name = self.fake.name()
        if move_in_date is None:
            move_in_date = date.today() - timedelta(days=self.random.randint(30, 730))
        return {
            "name": name,
            "email": self.fake.email(),
            "phone": self.fake.phone_number(),
            "apartment_id": apartment_id,
            "move_in_date": move_in_date,
            "rent_amount": Decimal(self.money(700, 2500)),
            "payment_frequency": self.random.choices(self.FREQUENCIES, weights=self.FREQUENCY_WEIGHTS, k=1)[0],
        }


class TransactionGenerator(BaseGenerator):
    """Generate synthetic income and expense transactions."""

    UTILITY_RANGES: dict[TransactionCategory, tuple[int, int]] = {
        TransactionCategory.WATER: (20, 80),
        TransactionCategory.ELECTRICITY: (60, 220),
        TransactionCategory.TRASH: (15, 40),
    }
    MAINTENANCE_JOBS = ["Plumbing Repair", "Boiler Service", "Window Replacement", "Painting", "Lock Change"]

    def rent(self, apartment_id: str, amount: Decimal, day: date, label: str) -> FieldDict:
        return {
            "date": day,
            "amount": amount,
            "transaction_type": TransactionType.INCOME,
            "category": TransactionCategory.RENT,
            "description": f"{day.strftime('%b')} Rent - {label}",
            "apartment_id": apartment_id,
            "is_recurring": True,
            "is_paid": day < date.today(),
        }

    def utility(self, apartment_id: str | None, category: TransactionCategory, day: date) -> FieldDict:
        low, high = self.UTILITY_RANGES[category]
        return {
            "date": day,
            "amount": Decimal(self.random.randint(low, high)),
            "transaction_type": TransactionType.EXPENSE,
            "category": category,
            "description": f"{day.strftime('%b')} {category.label}",
            "apartment_id": apartment_id,
            "is_recurring": True,
            "is_paid": self.random.random() < 0.8,
        }

    def maintenance(self, apartment_id: str | None, day: date) -> FieldDict:
        return {
            "date": day,
            "amount": Decimal(self.money(80, 900)),
            "transaction_type": TransactionType.EXPENSE,
            "category": TransactionCategory.MAINTENANCE,
            "description": self.random.choice(self.MAINTENANCE_JOBS),
            "apartment_id": apartment_id,
            "is_recurring": False,
            "is_paid": True,
        }

    def generate(self, apartment_id: str | None = None, day: date | None = None) -> FieldDict:
        """Generate one random expense of any non-rent category."""
        day = day or date.today() - timedelta(days=self.random.randint(0, 90))
        category = self.random.choice(TransactionCategory.for_type(TransactionType.EXPENSE))
        if category in self.UTILITY_RANGES:
            return self.utility(apartment_id, category, day)
        return {
            "date": day,
            "amount": Decimal(self.money(20, 600)),
            "transaction_type": TransactionType.EXPENSE,
            "category": category,
            "description": category.label,
            "apartment_id": apartment_id,
            "is_recurring": False,
            "is_paid": self.random.random() < 0.9,
        }


class DocumentGenerator(BaseGenerator):
    """Generate document metadata; no content is produced."""

    def generate(
        self,
        document_type: DocumentType = DocumentType.OTHER,
        apartment_id: str | None = None,
        name: str | None = None,
        uploaded: date | None = None,
    ) -> FieldDict:
        uploaded = uploaded or date.today()
        extension = "pdf" if document_type != DocumentType.OTHER else self.random.choice(["pdf", "jpg"])
        return {
            "name": name or f"{self.fake.word().title()}_{uploaded.isoformat()}.{extension}",
            "document_type": document_type,
            "apartment_id": apartment_id,
            "upload_date": datetime.combine(uploaded, time(9, 0), tzinfo=timezone.utc),
            "size": self.random.randint(50_000, 1_050_000),
            "url": None,
        }
