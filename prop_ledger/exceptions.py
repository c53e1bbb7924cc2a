"""Custom exception hierarchy for prop-ledger."""


class LedgerError(Exception):
    """Base exception for all prop-ledger errors."""


class StorageError(LedgerError):
    """Raised when the persistent store cannot serve a request."""


class StorageUnavailableError(StorageError):
    """Raised when the persistent store cannot be read or written."""


class StorageCorruptError(StorageError):
    """Raised when a stored payload cannot be decoded into records."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class RecordNotFoundError(LedgerError):
    """Raised when an update or delete targets an unknown id."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id


class RecordInvalidError(LedgerError):
    """Raised when a record fails validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
