"""Portfolio scenario filling a storage gateway with a realistic history."""

import logging
import random
from datetime import date
from decimal import Decimal

from prop_ledger.generators import (
    ApartmentGenerator,
    DocumentGenerator,
    TenantGenerator,
    TransactionGenerator,
)
from prop_ledger.models import DocumentType, TransactionCategory, TransactionType
from prop_ledger.store.gateway import StorageGateway

logger = logging.getLogger(__name__)


def month_starts(months: int, until: date | None = None) -> list[date]:
    """First day of the last ``months`` calendar months, oldest first."""
    until = until or date.today()
    year, month = until.year, until.month
    starts = []
    for _ in range(months):
        starts.append(date(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return starts[::-1]


class PortfolioScenario:
    """Generate a small rental portfolio with monthly bookkeeping.

    This scenario creates:
    - Apartments, a share of them let to one tenant each
    - Monthly rent income for every let apartment
    - Monthly water and electricity bills for let apartments
    - Occasional maintenance expenses
    - A monthly family-support transfer from the portfolio
    - One contract document per tenant
    """

    def __init__(
        self,
        gateway: StorageGateway,
        num_apartments: int = 5,
        occupancy_rate: float = 0.8,
        months: int = 6,
        maintenance_rate: float = 0.15,
        until: date | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize portfolio scenario.

        Parameters
        ----------
        gateway : StorageGateway
            Gateway receiving the generated records.
        num_apartments : int
            Number of apartments to create.
        occupancy_rate : float
            Share of apartments that get a tenant.
        months : int
            Number of calendar months of history, ending with ``until``.
        maintenance_rate : float
            Chance of a maintenance expense per let apartment and month.
        until : date | None
            Last month of history (default: today).
        seed : int | None
            Random seed for reproducibility.
        """
        self.gateway = gateway
        self.num_apartments = num_apartments
        self.occupancy_rate = occupancy_rate
        self.months = months
        self.maintenance_rate = maintenance_rate
        self.until = until
        self.seed = seed

        self._random = random.Random(seed)
        self._apartment_gen = ApartmentGenerator(seed=seed)
        self._tenant_gen = TenantGenerator(seed=seed)
        self._transaction_gen = TransactionGenerator(seed=seed)
        self._document_gen = DocumentGenerator(seed=seed)

    def generate(self) -> dict[str, int]:
        """Write the scenario to the gateway.

        Returns
        -------
        dict[str, int]
            Number of records created per collection.
        """
        logger.info(
            "Starting portfolio scenario: %d apartments, %d months",
            self.num_apartments,
            self.months,
        )
        counts = {"apartments": 0, "tenants": 0, "transactions": 0, "documents": 0}
        starts = month_starts(self.months, self.until)
        let_units = []

        for fields in self._apartment_gen.generate_batch(self.num_apartments):
            apartment = self.gateway.apartments.add(**fields)
            counts["apartments"] += 1
            if self._random.random() < self.occupancy_rate:
                move_in = starts[0] if starts else None
                tenant = self.gateway.tenants.add(
                    **self._tenant_gen.generate(apartment.id, move_in_date=move_in)
                )
                counts["tenants"] += 1
                let_units.append((apartment, tenant))
                self.gateway.documents.add(
                    **self._document_gen.generate(
                        DocumentType.CONTRACT,
                        apartment.id,
                        name=f"Lease_{tenant.name.replace(' ', '_')}.pdf",
                        uploaded=tenant.move_in_date,
                    )
                )
                counts["documents"] += 1

        for start in starts:
            counts["transactions"] += self._book_month(start, let_units)

        logger.info(
            "Generated portfolio: %d apartments, %d tenants, %d transactions, %d documents",
            counts["apartments"],
            counts["tenants"],
            counts["transactions"],
            counts["documents"],
        )
        return counts

    def _book_month(self, start: date, let_units: list) -> int:
        """Book one month of rent and expenses; return transactions added."""
        booked = []
        income = Decimal("0")
        for apartment, tenant in let_units:
            booked.append(self._transaction_gen.rent(apartment.id, tenant.rent_amount, start, apartment.name))
            income += tenant.rent_amount
            for category in (TransactionCategory.WATER, TransactionCategory.ELECTRICITY):
                booked.append(self._transaction_gen.utility(apartment.id, category, start.replace(day=5)))
            if self._random.random() < self.maintenance_rate:
                day = start.replace(day=self._random.randint(2, 28))
                booked.append(self._transaction_gen.maintenance(apartment.id, day))

        if income:
            booked.append(
                {
                    "date": start.replace(day=10),
                    "amount": (income * Decimal("0.10")).quantize(Decimal("1")),
                    "transaction_type": TransactionType.EXPENSE,
                    "category": TransactionCategory.FAMILY_SUPPORT,
                    "description": f"{start.strftime('%b')} Family Support",
                    "apartment_id": None,
                    "is_recurring": True,
                    "is_paid": True,
                }
            )

        for fields in booked:
            self.gateway.transactions.add(**fields)
        return len(booked)
