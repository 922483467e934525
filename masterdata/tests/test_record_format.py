"""
Tests for row materialization and the null policy
"""
import uuid
from datetime import date, datetime
from decimal import Decimal

import pytest

from masterdata.utils.record_format import (
    FieldKind,
    RecordDecodeError,
    RecordField,
    format_date,
    format_timestamp,
    materialize,
)

FIELDS = (
    RecordField("id"),
    RecordField("name"),
    RecordField("age", FieldKind.NUMBER),
    RecordField("active", FieldKind.BOOLEAN),
    RecordField("birth_date", FieldKind.DATE),
    RecordField("created_date", FieldKind.TIMESTAMP),
    RecordField("updated_by", omit_if_empty=True),
    RecordField("updated_date", FieldKind.TIMESTAMP, omit_if_empty=True),
)


def _row(**overrides):
    row = {
        "id": "e1",
        "name": None,
        "age": None,
        "active": None,
        "birth_date": None,
        "created_date": None,
        "updated_by": None,
        "updated_date": None,
    }
    row.update(overrides)
    return row


def test_nulls_become_zero_values():
    record = materialize(_row(), FIELDS)
    assert record == {
        "id": "e1",
        "name": "",
        "age": 0,
        "active": False,
        "birth_date": "",
        "created_date": "",
    }


def test_omit_if_empty_fields_are_left_out():
    record = materialize(_row(), FIELDS)
    assert "updated_by" not in record
    assert "updated_date" not in record


def test_present_values_are_formatted():
    record = materialize(
        _row(
            name="Somchai",
            age=41,
            active=True,
            birth_date=date(1983, 4, 5),
            created_date=datetime(2024, 2, 3, 14, 5, 9, 123456),
            updated_by="u-9",
            updated_date=datetime(2024, 2, 4, 1, 2, 3),
        ),
        FIELDS,
    )
    assert record["name"] == "Somchai"
    assert record["age"] == 41
    assert record["active"] is True
    assert record["birth_date"] == "1983-04-05"
    assert record["created_date"] == "2024-02-03 14:05:09"
    assert record["updated_by"] == "u-9"
    assert record["updated_date"] == "2024-02-04 01:02:03"


def test_output_order_follows_field_policy():
    assert list(materialize(_row(), FIELDS)) == ["id", "name", "age", "active", "birth_date", "created_date"]


def test_date_kind_drops_time_of_day():
    assert format_date(datetime(2020, 1, 2, 23, 59, 59)) == "2020-01-02"
    assert format_date("2020-01-02 10:00:00") == "2020-01-02"


def test_timestamp_kind_accepts_dates_and_strings():
    assert format_timestamp(date(2020, 1, 2)) == "2020-01-02 00:00:00"
    assert format_timestamp("2020-01-02T03:04:05") == "2020-01-02 03:04:05"
    assert format_timestamp(None) == ""


def test_text_accepts_uuid_and_numeric():
    value = uuid.uuid4()
    record = materialize(_row(id=value, name=Decimal("13.7563")), FIELDS)
    assert record["id"] == str(value)
    assert record["name"] == "13.7563"


@pytest.mark.parametrize("overrides", [
    {"created_date": "not a date"},
    {"created_date": 12345},
    {"age": "forty"},
    {"age": 1.5},
    {"age": True},
    {"active": "yes"},
    {"name": object()},
])
def test_undecodable_values_raise(overrides):
    with pytest.raises(RecordDecodeError):
        materialize(_row(**overrides), FIELDS)


def test_missing_column_raises():
    row = _row()
    del row["name"]
    with pytest.raises(RecordDecodeError) as exc_info:
        materialize(row, FIELDS)
    assert exc_info.value.field == "name"
