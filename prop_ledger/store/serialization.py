"""Record serialization for persisted collections.

Records are stored as JSON objects with camelCase field names. Dates are
ISO ``YYYY-MM-DD`` strings, timestamps are ISO 8601 strings, money is a
plain JSON number and enums are their tag. Optional fields that are
``None`` are omitted.
"""

import json
import math
import types
import typing
from dataclasses import MISSING, Field, fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from prop_ledger.exceptions import RecordInvalidError, StorageCorruptError

T = TypeVar("T")


def wire_name(f: Field) -> str:
    """Return the persisted name of a dataclass field."""
    if "wire" in f.metadata:
        return f.metadata["wire"]
    head, *rest = f.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert a record dataclass to its persisted form."""
    result = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None and f.default is None:
            continue
        encoded = serialize_value(value)
        # JSON has no token for infinity or NaN
        if isinstance(encoded, float) and not math.isfinite(encoded):
            raise RecordInvalidError(f.name, f"cannot store non-finite number {value}")
        result[wire_name(f)] = encoded
    return result


@lru_cache(maxsize=None)
def _field_specs(record_type: type) -> tuple[tuple[Field, Any, bool], ...]:
    hints = typing.get_type_hints(record_type)
    specs = []
    for f in fields(record_type):
        hint = hints[f.name]
        optional = False
        if isinstance(hint, types.UnionType) or typing.get_origin(hint) is typing.Union:
            args = [a for a in typing.get_args(hint) if a is not type(None)]
            optional = len(args) < len(typing.get_args(hint))
            hint = args[0]
        specs.append((f, hint, optional))
    return tuple(specs)


def _decode(name: str, hint: Any, value: Any) -> Any:
    if isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError:
            raise StorageCorruptError(f"{name}: unknown {hint.__name__} tag {value!r}") from None
    if hint is bool:
        if isinstance(value, bool):
            return value
    elif hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif hint is Decimal:
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            try:
                return Decimal(str(value))
            except InvalidOperation:
                pass
    elif hint is str:
        if isinstance(value, str):
            return value
    elif hint is datetime:
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                pass
    elif hint is date:
        if isinstance(value, str):
            try:
                return date.fromisoformat(value)
            except ValueError:
                pass
    raise StorageCorruptError(f"{name}: cannot decode {value!r} as {getattr(hint, '__name__', hint)}")


def record_from_dict(record_type: type[T], data: Any) -> T:
    """Build a record from its persisted form.

    Raises
    ------
    StorageCorruptError
        If a required field is missing or any value has the wrong type.
        Unknown keys are ignored.
    """
    if not isinstance(data, dict):
        raise StorageCorruptError(f"{record_type.__name__}: expected an object, got {type(data).__name__}")

    kwargs = {}
    for f, hint, optional in _field_specs(record_type):
        key = wire_name(f)
        value = data.get(key)
        if value is None or (optional and hint in (date, datetime) and value == ""):
            if optional:
                kwargs[f.name] = None
                continue
            if f.default is not MISSING:
                continue
            raise StorageCorruptError(f"{record_type.__name__}: missing required field {key!r}")
        kwargs[f.name] = _decode(f"{record_type.__name__}.{key}", hint, value)
    return record_type(**kwargs)


def dump_records(records: list[Any], pretty: bool = False) -> str:
    """Serialize a collection to a JSON array."""
    data = [record_to_dict(record) for record in records]
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(data, ensure_ascii=False, allow_nan=False)


def load_records(record_type: type[T], payload: str) -> list[T]:
    """Deserialize a JSON array into records of ``record_type``."""
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as exc:
        raise StorageCorruptError(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(data, list):
        raise StorageCorruptError(f"Expected a JSON array, got {type(data).__name__}")
    return [record_from_dict(record_type, item) for item in data]
