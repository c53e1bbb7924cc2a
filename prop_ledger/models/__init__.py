"""Entity models for the property ledger."""

from prop_ledger.models.apartment import Apartment, ApartmentPatch
from prop_ledger.models.base import UNSET, Patch
from prop_ledger.models.document import DocumentMeta
from prop_ledger.models.enums import (
    DocumentType,
    PaymentFrequency,
    TransactionCategory,
    TransactionType,
)
from prop_ledger.models.tenant import Tenant, TenantPatch
from prop_ledger.models.transaction import Transaction, TransactionPatch

__all__ = [
    "UNSET",
    "Apartment",
    "ApartmentPatch",
    "DocumentMeta",
    "DocumentType",
    "Patch",
    "PaymentFrequency",
    "Tenant",
    "TenantPatch",
    "Transaction",
    "TransactionCategory",
    "TransactionPatch",
    "TransactionType",
]
