"""
Row materialization: nullable database columns -> flat output records

Null policy:
- text columns -> "" (or left out when the field is omit-if-empty)
- numeric columns -> 0
- boolean columns -> False
- timestamps -> "" when absent, "YYYY-MM-DD HH:MM:SS" otherwise
- dates (birth / start-work kind) -> "" when absent, "YYYY-MM-DD" otherwise

Anything that cannot be decoded raises RecordDecodeError; callers never skip rows.
"""
import enum
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Sequence

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


class RecordDecodeError(ValueError):
    """A fetched column value does not fit its declared field kind"""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"column '{field}': {reason} ({value!r})")


class FieldKind(str, enum.Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    DATE = "date"


@dataclass(frozen=True)
class RecordField:
    """One output field, read from the column of the same name"""
    name: str
    kind: FieldKind = FieldKind.TEXT
    omit_if_empty: bool = False


def _parse_datetime(field: str, value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            raise RecordDecodeError(field, value, "not a timestamp")
    raise RecordDecodeError(field, value, "not a timestamp")


def format_timestamp(value: Any, field: str = "timestamp") -> str:
    """Full audit timestamp, or "" when absent"""
    if value is None:
        return ""
    return _parse_datetime(field, value).strftime(TIMESTAMP_FORMAT)


def format_date(value: Any, field: str = "date") -> str:
    """Date-only rendering, or "" when absent"""
    if value is None:
        return ""
    return _parse_datetime(field, value).strftime(DATE_FORMAT)


def _decode_text(field: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            raise RecordDecodeError(field, value, "not valid UTF-8")
    if isinstance(value, (uuid.UUID, int, float, Decimal)) and not isinstance(value, bool):
        return str(value)
    raise RecordDecodeError(field, value, "not a text value")


def _decode_number(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise RecordDecodeError(field, value, "not a number")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if value != value.to_integral_value():
            raise RecordDecodeError(field, value, "not an integer")
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise RecordDecodeError(field, value, "not an integer")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise RecordDecodeError(field, value, "not a number")
    raise RecordDecodeError(field, value, "not a number")


def _decode_boolean(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise RecordDecodeError(field, value, "not a boolean")


def decode_value(field: RecordField, value: Any) -> Any:
    """Apply the null policy and formatting for a single column value"""
    if field.kind is FieldKind.TIMESTAMP:
        return format_timestamp(value, field.name)
    if field.kind is FieldKind.DATE:
        return format_date(value, field.name)
    if value is None:
        if field.kind is FieldKind.NUMBER:
            return 0
        if field.kind is FieldKind.BOOLEAN:
            return False
        return ""
    if field.kind is FieldKind.NUMBER:
        return _decode_number(field.name, value)
    if field.kind is FieldKind.BOOLEAN:
        return _decode_boolean(field.name, value)
    return _decode_text(field.name, value)


def materialize(row: Mapping[str, Any], fields: Sequence[RecordField]) -> Dict[str, Any]:
    """
    Map one fetched row into an output record

    Args:
        row: Column name -> value mapping (a SQLAlchemy RowMapping or dict)
        fields: Output field policy, in output order

    Returns:
        Output record; omit-if-empty fields are absent when empty

    Raises:
        RecordDecodeError: If a column is missing or cannot be decoded
    """
    record: Dict[str, Any] = {}
    for field in fields:
        if field.name not in row:
            raise RecordDecodeError(field.name, None, "column missing from row")
        value = decode_value(field, row[field.name])
        if field.omit_if_empty and value == "":
            continue
        record[field.name] = value
    return record


def materialize_all(rows: Iterable[Mapping[str, Any]], fields: Sequence[RecordField]) -> list:
    """Materialize every row; the first decode failure aborts the whole batch"""
    return [materialize(row, fields) for row in rows]


def row_mapping(instance: Any) -> Dict[str, Any]:
    """Column values of an ORM instance keyed by column name"""
    return {column.key: getattr(instance, column.key) for column in instance.__table__.columns}
