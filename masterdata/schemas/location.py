"""
Geographic hierarchy schemas
"""
from typing import Optional
from pydantic import BaseModel

from masterdata.utils.record_format import FieldKind, RecordField


class GeographyOut(BaseModel):
    geography_id: int
    name: str


class ProvinceOut(BaseModel):
    province_id: int
    province_name_th: str
    province_name_en: str
    geography_id: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None


class DistrictOut(BaseModel):
    district_id: int
    name_th: str
    name_en: str
    province_id: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None


class SubDistrictOut(BaseModel):
    sub_district_id: int
    zip_code: int
    name_th: str
    name_en: str
    district_id: int
    lat: Optional[str] = None
    long: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None


# created/updated/deleted audit columns are shared by the soft-deleted levels
_AUDIT_FIELDS = (
    RecordField("created_at", FieldKind.TIMESTAMP, omit_if_empty=True),
    RecordField("updated_at", FieldKind.TIMESTAMP, omit_if_empty=True),
    RecordField("deleted_at", FieldKind.TIMESTAMP, omit_if_empty=True),
)

GEOGRAPHY_FIELDS = (
    RecordField("geography_id", FieldKind.NUMBER),
    RecordField("name"),
)

PROVINCE_FIELDS = (
    RecordField("province_id", FieldKind.NUMBER),
    RecordField("province_name_th"),
    RecordField("province_name_en"),
    RecordField("geography_id", FieldKind.NUMBER),
) + _AUDIT_FIELDS

DISTRICT_FIELDS = (
    RecordField("district_id", FieldKind.NUMBER),
    RecordField("name_th"),
    RecordField("name_en"),
    RecordField("province_id", FieldKind.NUMBER),
) + _AUDIT_FIELDS

SUB_DISTRICT_FIELDS = (
    RecordField("sub_district_id", FieldKind.NUMBER),
    RecordField("zip_code", FieldKind.NUMBER),
    RecordField("name_th"),
    RecordField("name_en"),
    RecordField("district_id", FieldKind.NUMBER),
    RecordField("lat", omit_if_empty=True),
    RecordField("long", omit_if_empty=True),
) + _AUDIT_FIELDS
