"""Base helpers shared by the entity models."""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any


class _Unset:
    """Marker for a patch field that was not provided."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def to_money(value: Any) -> Any:
    """Coerce an int or float amount to ``Decimal``.

    Anything else is returned untouched so validation can report it.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    return value


@dataclass
class Patch:
    """Partial update for a record.

    Subclasses declare every updatable field with ``UNSET`` as default.
    A field explicitly set to ``None`` clears an optional value.
    """

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()
