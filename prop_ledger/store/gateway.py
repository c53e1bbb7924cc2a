"""Storage gateway over the four persisted collections."""

import logging
import uuid
from dataclasses import replace
from typing import Any, Callable, Generic, TypeVar

from prop_ledger.config import LedgerConfig
from prop_ledger.exceptions import (
    LedgerError,
    RecordNotFoundError,
    StorageCorruptError,
    StorageUnavailableError,
)
from prop_ledger.logging import get_logger
from prop_ledger.models import (
    Apartment,
    ApartmentPatch,
    DocumentMeta,
    Patch,
    Tenant,
    TenantPatch,
    Transaction,
    TransactionPatch,
)
from prop_ledger.models.validation import require_fields, validate
from prop_ledger.store.backends import KeyValueBackend
from prop_ledger.store.seed import demo_dataset
from prop_ledger.store.serialization import dump_records, load_records

logger = logging.getLogger(__name__)

T = TypeVar("T")

STORAGE_KEYS: dict[str, str] = {
    "apartments": "pm_apartments",
    "tenants": "pm_tenants",
    "transactions": "pm_transactions",
    "documents": "pm_documents",
}

# Presence of this key marks the storage location as initialized
SEED_MARKER = "apartments"

MAX_ID_ATTEMPTS = 16


def generate_id() -> str:
    """Return a random 128-bit hex token."""
    return uuid.uuid4().hex


class Collection(Generic[T]):
    """Append/delete access to one persisted collection.

    Records come back as fresh objects on every read, so mutating a
    returned record never touches storage.
    """

    def __init__(self, gateway: "StorageGateway", name: str, record_type: type[T]) -> None:
        self._gateway = gateway
        self.name = name
        self.key = STORAGE_KEYS[name]
        self.record_type = record_type
        self._log = get_logger(__name__, collection=name)

    def get_all(self) -> list[T]:
        """Return every record in storage order."""
        self._gateway.ensure_initialized()
        return self._load()

    def get(self, record_id: str) -> T | None:
        """Return the record with ``record_id``, or None."""
        for record in self.get_all():
            if record.id == record_id:
                return record
        return None

    def add(self, **fields: Any) -> T:
        """Create a record from ``fields`` and append it.

        The gateway assigns the id. A missing required field raises
        ``RecordInvalidError`` when validation is on; otherwise missing or
        unknown fields raise ``TypeError`` like any constructor call.
        """
        if "id" in fields:
            raise TypeError("id is assigned by the gateway")
        if self._gateway.config.validate_records:
            require_fields(self.record_type, fields)
        records = self.get_all()
        record = self.record_type(id=self._new_id(records), **fields)
        if self._gateway.config.validate_records:
            validate(record)
        records.append(record)
        self._save(records)
        self._log.debug("Added %s", record.id)
        return record

    def delete(self, record_id: str) -> bool:
        """Remove the record with ``record_id``.

        Returns
        -------
        bool
            False if nothing matched (only when ``strict_missing`` is off).
        """
        records = self.get_all()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            self._missing(record_id, "delete")
            return False
        self._save(remaining)
        self._log.debug("Deleted %s", record_id)
        return True

    def _missing(self, record_id: str, operation: str) -> None:
        if self._gateway.config.strict_missing:
            raise RecordNotFoundError(self.name, record_id)
        self._log.warning("Ignoring %s of unknown id %s", operation, record_id)

    def _new_id(self, records: list[T]) -> str:
        taken = {r.id for r in records}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._gateway.id_factory()
            if candidate not in taken:
                return candidate
        raise LedgerError(f"Could not generate a unique {self.name} id in {MAX_ID_ATTEMPTS} attempts")

    def _load(self) -> list[T]:
        payload = self._gateway.read(self.key)
        if payload is None:
            return []
        try:
            return load_records(self.record_type, payload)
        except StorageCorruptError as exc:
            if exc.key is not None:
                raise
            raise StorageCorruptError(f"{self.key}: {exc}", key=self.key) from exc

    def _save(self, records: list[T]) -> None:
        self._gateway.write(self.key, dump_records(records, pretty=self._gateway.config.storage.pretty_json))


class MutableCollection(Collection[T]):
    """Collection whose records accept partial updates."""

    def __init__(
        self,
        gateway: "StorageGateway",
        name: str,
        record_type: type[T],
        patch_type: type[Patch],
    ) -> None:
        super().__init__(gateway, name, record_type)
        self.patch_type = patch_type

    def update(self, record_id: str, patch: Patch | None = None, **fields: Any) -> bool:
        """Merge the set fields of ``patch`` over the matching record.

        Fields may be given as a patch instance or as keyword arguments,
        which are turned into one. Fields not in the patch are preserved.

        Returns
        -------
        bool
            False if nothing matched (only when ``strict_missing`` is off).
        """
        if patch is None:
            patch = self.patch_type(**fields)
        elif fields:
            raise TypeError("Pass either a patch or keyword fields, not both")
        if not isinstance(patch, self.patch_type):
            raise TypeError(f"{self.name} expects {self.patch_type.__name__}, got {type(patch).__name__}")

        records = self.get_all()
        for index, record in enumerate(records):
            if record.id == record_id:
                break
        else:
            self._missing(record_id, "update")
            return False

        updated = replace(record, **patch.changes())
        if self._gateway.config.validate_records:
            validate(updated)
        records[index] = updated
        self._save(records)
        self._log.debug("Updated %s fields=%s", record_id, sorted(patch.changes()))
        return True


class StorageGateway:
    """Typed access to the apartments, tenants, transactions and documents.

    Construct one per storage location and pass it to callers.

    Parameters
    ----------
    backend : KeyValueBackend
        Store holding one serialized collection per key.
    config : LedgerConfig | None
        Seeding, validation and missing-id behaviour.
    id_factory : Callable[[], str] | None
        Source of new record ids (default: random hex tokens).
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        config: LedgerConfig | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.backend = backend
        self.config = config or LedgerConfig()
        self.id_factory = id_factory or generate_id
        self._initialized = False

        self.apartments: MutableCollection[Apartment] = MutableCollection(
            self, "apartments", Apartment, ApartmentPatch
        )
        self.tenants: MutableCollection[Tenant] = MutableCollection(
            self, "tenants", Tenant, TenantPatch
        )
        self.transactions: MutableCollection[Transaction] = MutableCollection(
            self, "transactions", Transaction, TransactionPatch
        )
        self.documents: Collection[DocumentMeta] = Collection(self, "documents", DocumentMeta)

    @classmethod
    def from_config(cls, config: LedgerConfig) -> "StorageGateway":
        """Create a gateway on the backend described by ``config.storage``."""
        return cls(config.storage.build_backend(), config=config)

    @property
    def collections(self) -> dict[str, Collection]:
        return {
            "apartments": self.apartments,
            "tenants": self.tenants,
            "transactions": self.transactions,
            "documents": self.documents,
        }

    def read(self, key: str) -> str | None:
        try:
            return self.backend.get(key)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot read {key}: {exc}") from exc

    def write(self, key: str, payload: str) -> None:
        try:
            self.backend.set(key, payload)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot write {key}: {exc}") from exc

    def ensure_initialized(self) -> None:
        """Seed the demonstration dataset if this location was never used."""
        if self._initialized:
            return
        if self.read(STORAGE_KEYS[SEED_MARKER]) is None and self.config.seed_demo:
            self._seed()
        self._initialized = True

    def _seed(self) -> None:
        dataset = demo_dataset()
        # Marker collection goes last so a failed seed is retried next run
        names = sorted(dataset, key=lambda name: name == SEED_MARKER)
        for name in names:
            self.write(STORAGE_KEYS[name], dump_records(dataset[name], pretty=self.config.storage.pretty_json))
        logger.info(
            "Seeded demonstration data: %s",
            ", ".join(f"{len(dataset[name])} {name}" for name in STORAGE_KEYS),
        )

    def snapshot(self) -> dict[str, list]:
        """Return a full copy of every collection."""
        return {name: collection.get_all() for name, collection in self.collections.items()}

    def reset(self) -> None:
        """Drop every collection key, returning the location to first-run state."""
        for key in STORAGE_KEYS.values():
            try:
                self.backend.delete(key)
            except OSError as exc:
                raise StorageUnavailableError(f"Cannot delete {key}: {exc}") from exc
        self._initialized = False
        logger.info("Storage location reset")
