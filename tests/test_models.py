"""Tests for entity models, patches and validation."""

import math
import typing
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from prop_ledger.exceptions import RecordInvalidError
from prop_ledger.models import (
    UNSET,
    Apartment,
    ApartmentPatch,
    DocumentMeta,
    DocumentType,
    PaymentFrequency,
    Tenant,
    TenantPatch,
    Transaction,
    TransactionCategory,
    TransactionPatch,
    TransactionType,
)
from prop_ledger.models.validation import validate


@pytest.fixture
def apartment() -> Apartment:
    return Apartment(id="a1", name="Loft", address="1 Main St", size=40.0, rooms=1, floor=3)


@pytest.fixture
def tenant() -> Tenant:
    return Tenant(
        id="t1",
        name="Sam Carter",
        email="sam@example.com",
        phone="555-0102",
        move_in_date=date(2024, 1, 1),
        rent_amount=900,
        payment_frequency=PaymentFrequency.QUARTERLY,
    )


@pytest.fixture
def transaction() -> Transaction:
    return Transaction(
        id="x1",
        date=date(2024, 2, 1),
        amount=12.5,
        transaction_type=TransactionType.EXPENSE,
        category=TransactionCategory.WATER,
        description="Water bill",
    )


@pytest.fixture
def document() -> DocumentMeta:
    return DocumentMeta(
        id="d1",
        name="Bill.pdf",
        document_type=DocumentType.BILL,
        upload_date=datetime(2024, 2, 2, tzinfo=timezone.utc),
        size=2048,
    )


class TestModels:
    """Tests for model construction."""

    def test_apartment_defaults(self, apartment: Apartment) -> None:
        assert apartment.notes is None

    def test_tenant_rent_coerced_to_decimal(self, tenant: Tenant) -> None:
        assert tenant.rent_amount == Decimal("900")
        assert isinstance(tenant.rent_amount, Decimal)
        assert tenant.apartment_id is None
        assert tenant.move_out_date is None

    def test_transaction_float_amount_coerced(self, transaction: Transaction) -> None:
        assert transaction.amount == Decimal("12.5")
        assert transaction.is_recurring is False
        assert transaction.is_paid is False
        assert transaction.is_income is False

    def test_bool_amount_not_coerced(self) -> None:
        tx = Transaction(
            id="x",
            date=date(2024, 1, 1),
            amount=True,
            transaction_type=TransactionType.INCOME,
            category=TransactionCategory.RENT,
            description="",
        )
        assert tx.amount is True


class TestEnums:
    """Tests for enum helpers."""

    def test_income_categories(self) -> None:
        assert TransactionCategory.for_type(TransactionType.INCOME) == [TransactionCategory.RENT]

    def test_expense_categories_exclude_rent(self) -> None:
        categories = TransactionCategory.for_type(TransactionType.EXPENSE)

        assert TransactionCategory.RENT not in categories
        assert len(categories) == 7

    def test_for_type_accepts_tag(self) -> None:
        assert TransactionCategory.for_type("INCOME") == [TransactionCategory.RENT]

    def test_label(self) -> None:
        assert TransactionCategory.FAMILY_SUPPORT.label == "Family Support"

    def test_enums_are_strings(self) -> None:
        assert PaymentFrequency.YEARLY == "YEARLY"
        assert DocumentType("CONTRACT") is DocumentType.CONTRACT


class TestPatches:
    """Tests for partial-update structures."""

    def test_empty_patch(self) -> None:
        patch = ApartmentPatch()

        assert patch.changes() == {}
        assert patch.is_empty()
        assert patch.name is UNSET

    def test_only_set_fields(self) -> None:
        assert ApartmentPatch(rooms=4, notes=None).changes() == {"rooms": 4, "notes": None}

    def test_tenant_patch_coerces_rent(self) -> None:
        assert TenantPatch(rent_amount=1000).changes() == {"rent_amount": Decimal("1000")}

    def test_transaction_patch_leaves_amount_unset(self) -> None:
        assert TransactionPatch(is_paid=True).changes() == {"is_paid": True}

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(TypeError):
            TransactionPatch(colour="red")

    def test_unset_is_falsy_singleton(self) -> None:
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET

    def test_date_annotations_resolve(self) -> None:
        assert typing.get_type_hints(TransactionPatch)["date"] is date
        assert typing.get_type_hints(Transaction)["date"] is date


class TestValidation:
    """Tests for record validation rules."""

    def test_valid_records(
        self, apartment: Apartment, tenant: Tenant, transaction: Transaction, document: DocumentMeta
    ) -> None:
        for record in (apartment, tenant, transaction, document):
            validate(record)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("name", ""),
            ("address", "   "),
            ("size", -0.5),
            ("size", "big"),
            ("rooms", -1),
            ("rooms", 2.5),
            ("floor", True),
            ("notes", 5),
        ],
    )
    def test_invalid_apartment(self, apartment: Apartment, field: str, value: object) -> None:
        setattr(apartment, field, value)

        with pytest.raises(RecordInvalidError) as exc_info:
            validate(apartment)

        assert exc_info.value.field == field

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan, Decimal("Infinity"), Decimal("NaN")])
    def test_non_finite_numbers(self, apartment: Apartment, tenant: Tenant, value: object) -> None:
        for record, field in ((apartment, "size"), (tenant, "rent_amount")):
            setattr(record, field, value)

            with pytest.raises(RecordInvalidError) as exc_info:
                validate(record)

            assert exc_info.value.field == field

    def test_negative_floor_allowed(self, apartment: Apartment) -> None:
        apartment.floor = -1
        validate(apartment)

    def test_move_out_before_move_in(self, tenant: Tenant) -> None:
        tenant.move_out_date = date(2023, 12, 31)

        with pytest.raises(RecordInvalidError, match="move_out_date"):
            validate(tenant)

    def test_tenant_frequency_must_be_member(self, tenant: Tenant) -> None:
        tenant.payment_frequency = "WEEKLY"

        with pytest.raises(RecordInvalidError) as exc_info:
            validate(tenant)

        assert exc_info.value.field == "payment_frequency"

    def test_transaction_date_rejects_datetime(self, transaction: Transaction) -> None:
        transaction.date = datetime(2024, 2, 1, 12, 0)

        with pytest.raises(RecordInvalidError, match="date"):
            validate(transaction)

    def test_transaction_empty_description_allowed(self, transaction: Transaction) -> None:
        transaction.description = ""
        validate(transaction)

    def test_transaction_nan_amount(self, transaction: Transaction) -> None:
        transaction.amount = Decimal("NaN")

        with pytest.raises(RecordInvalidError, match="amount"):
            validate(transaction)

    def test_transaction_flags_must_be_bool(self, transaction: Transaction) -> None:
        transaction.is_paid = "yes"

        with pytest.raises(RecordInvalidError, match="is_paid"):
            validate(transaction)

    def test_document_size_must_be_int(self, document: DocumentMeta) -> None:
        document.size = 10.5

        with pytest.raises(RecordInvalidError, match="size"):
            validate(document)

    def test_document_upload_date_must_be_timestamp(self, document: DocumentMeta) -> None:
        document.upload_date = date(2024, 2, 2)

        with pytest.raises(RecordInvalidError, match="upload_date"):
            validate(document)

    def test_unknown_record_type(self) -> None:
        with pytest.raises(TypeError, match="No validator"):
            validate(object())
