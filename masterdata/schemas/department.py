"""
Department and position schemas
"""
from typing import Optional
from pydantic import BaseModel

from masterdata.utils.record_format import FieldKind, RecordField


class DepartmentOut(BaseModel):
    """Schema for department output"""
    department_id: int
    department_name: str
    created_date: Optional[str] = None
    updated_date: Optional[str] = None


class PositionOut(BaseModel):
    """Schema for position output"""
    position_id: int
    department_id: int
    position_name: str
    acronym: str
    created_date: Optional[str] = None
    updated_date: Optional[str] = None


DEPARTMENT_FIELDS = (
    RecordField("department_id", FieldKind.NUMBER),
    RecordField("department_name"),
    RecordField("created_date", FieldKind.TIMESTAMP, omit_if_empty=True),
    RecordField("updated_date", FieldKind.TIMESTAMP, omit_if_empty=True),
)

POSITION_FIELDS = (
    RecordField("position_id", FieldKind.NUMBER),
    RecordField("department_id", FieldKind.NUMBER),
    RecordField("position_name"),
    RecordField("acronym"),
    RecordField("created_date", FieldKind.TIMESTAMP, omit_if_empty=True),
    RecordField("updated_date", FieldKind.TIMESTAMP, omit_if_empty=True),
)
