"""Record validation for the storage gateway.

Checks are limited to presence, type and range. They run on the full
record that would be persisted, so an update is validated after merging.
"""

import math
from dataclasses import MISSING, fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable

from prop_ledger.exceptions import RecordInvalidError
from prop_ledger.models.apartment import Apartment
from prop_ledger.models.document import DocumentMeta
from prop_ledger.models.enums import (
    DocumentType,
    PaymentFrequency,
    TransactionCategory,
    TransactionType,
)
from prop_ledger.models.tenant import Tenant
from prop_ledger.models.transaction import Transaction


def _require_text(record: Any, name: str, allow_empty: bool = False) -> None:
    value = getattr(record, name)
    if not isinstance(value, str):
        raise RecordInvalidError(name, f"expected text, got {type(value).__name__}")
    if not allow_empty and not value.strip():
        raise RecordInvalidError(name, "is required")


def _optional_text(record: Any, name: str) -> None:
    value = getattr(record, name)
    if value is not None and not isinstance(value, str):
        raise RecordInvalidError(name, f"expected text, got {type(value).__name__}")


def _require_int(record: Any, name: str, minimum: int | None = None) -> None:
    value = getattr(record, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordInvalidError(name, f"expected an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise RecordInvalidError(name, f"must be >= {minimum}, got {value}")


def _require_number(record: Any, name: str) -> None:
    value = getattr(record, name)
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise RecordInvalidError(name, f"expected a number, got {value!r}")
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite or value < 0:
        raise RecordInvalidError(name, f"must be a finite non-negative number, got {value}")


def _require_member(record: Any, name: str, enum_type: type[Enum]) -> None:
    value = getattr(record, name)
    if not isinstance(value, enum_type):
        raise RecordInvalidError(name, f"expected {enum_type.__name__}, got {value!r}")


def _require_date(record: Any, name: str, optional: bool = False) -> None:
    value = getattr(record, name)
    if value is None and optional:
        return
    # datetime is a date subclass but carries a time of day
    if isinstance(value, datetime) or not isinstance(value, date):
        raise RecordInvalidError(name, f"expected a calendar date, got {value!r}")


def _require_bool(record: Any, name: str) -> None:
    if not isinstance(getattr(record, name), bool):
        raise RecordInvalidError(name, f"expected a boolean, got {getattr(record, name)!r}")


def validate_apartment(apartment: Apartment) -> None:
    _require_text(apartment, "name")
    _require_text(apartment, "address")
    _require_number(apartment, "size")
    _require_int(apartment, "rooms", minimum=0)
    _require_int(apartment, "floor")
    _optional_text(apartment, "notes")


def validate_tenant(tenant: Tenant) -> None:
    _require_text(tenant, "name")
    _require_text(tenant, "email", allow_empty=True)
    _require_text(tenant, "phone", allow_empty=True)
    _optional_text(tenant, "apartment_id")
    _require_date(tenant, "move_in_date")
    _require_date(tenant, "move_out_date", optional=True)
    if tenant.move_out_date is not None and tenant.move_out_date < tenant.move_in_date:
        raise RecordInvalidError("move_out_date", "is before move_in_date")
    _require_number(tenant, "rent_amount")
    _require_member(tenant, "payment_frequency", PaymentFrequency)


def validate_transaction(transaction: Transaction) -> None:
    _require_date(transaction, "date")
    _require_number(transaction, "amount")
    _require_member(transaction, "transaction_type", TransactionType)
    _require_member(transaction, "category", TransactionCategory)
    _require_text(transaction, "description", allow_empty=True)
    _optional_text(transaction, "apartment_id")
    _require_bool(transaction, "is_recurring")
    _require_bool(transaction, "is_paid")


def validate_document(document: DocumentMeta) -> None:
    _require_text(document, "name")
    _require_member(document, "document_type", DocumentType)
    _optional_text(document, "apartment_id")
    if not isinstance(document.upload_date, datetime):
        raise RecordInvalidError("upload_date", f"expected a timestamp, got {document.upload_date!r}")
    _require_int(document, "size", minimum=0)
    _optional_text(document, "url")


VALIDATORS: dict[type, Callable[[Any], None]] = {
    Apartment: validate_apartment,
    Tenant: validate_tenant,
    Transaction: validate_transaction,
    DocumentMeta: validate_document,
}


def validate(record: Any) -> None:
    """Validate a record of any known kind.

    Raises
    ------
    RecordInvalidError
        Naming the first offending field.
    """
    try:
        validator = VALIDATORS[type(record)]
    except KeyError:
        raise TypeError(f"No validator for {type(record).__name__}") from None
    validator(record)


def require_fields(record_type: type, values: dict[str, Any]) -> None:
    """Check that ``values`` supplies every field of ``record_type`` without a default.

    ``id`` is skipped since the gateway assigns it.

    Raises
    ------
    RecordInvalidError
        Naming the first missing field in declaration order.
    """
    for f in fields(record_type):
        if f.name == "id" or f.name in values:
            continue
        if f.default is MISSING and f.default_factory is MISSING:
            raise RecordInvalidError(f.name, "is required")
