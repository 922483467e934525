"""
Employee schemas
"""
from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from masterdata.utils.record_format import FieldKind, RecordField


class EmployeeBase(BaseModel):
    """Fields a client supplies on create and on full replace"""
    employment_type: int = Field(default=0, description="Employment type code")
    title: int = Field(default=0, description="Title / prefix code")
    first_name_en: str = Field(..., min_length=1, max_length=100, description="First name (English)")
    last_name_en: str = Field(..., min_length=1, max_length=100, description="Last name (English)")
    first_name_th: str = Field(default="", max_length=100, description="First name (Thai)")
    last_name_th: str = Field(default="", max_length=100, description="Last name (Thai)")
    nick_name_en: str = Field(default="", max_length=50, description="Nickname (English)")
    nick_name_th: str = Field(default="", max_length=50, description="Nickname (Thai)")
    phone_number: str = Field(default="", max_length=50)
    company_email: str = Field(default="", max_length=150)
    nationality: str = Field(default="", max_length=100)
    gender: int = Field(default=0, description="Gender code")
    tax_id: str = Field(default="", max_length=20)
    birth_date: Optional[date] = Field(default=None, description="Birth date (YYYY-MM-DD)")
    start_work_date: Optional[date] = Field(default=None, description="First working day (YYYY-MM-DD)")
    status: int = Field(default=0, description="Employment status code")
    remark: str = ""
    department: str = Field(default="", max_length=150)
    position: str = Field(default="", max_length=150)
    photo: str = ""
    custom_attributes: str = ""
    is_active: bool = True

    @field_validator("birth_date", "start_work_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v):
        """Front-ends send "" for an unset date"""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee"""
    created_by: Optional[UUID] = Field(None, description="Creating user; system user when omitted")


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing an employee; every field is overwritten"""
    updated_by: Optional[UUID] = Field(None, description="Updating user")


class EmployeeOut(BaseModel):
    """Schema for employee output"""
    employee_id: str
    employment_type: int
    title: int
    first_name_en: str
    last_name_en: str
    first_name_th: str
    last_name_th: str
    nick_name_en: str
    nick_name_th: str
    phone_number: str
    company_email: str
    nationality: str
    gender: int
    tax_id: str
    birth_date: str
    start_work_date: str
    status: int
    remark: str
    department: str
    position: str
    photo: str
    custom_attributes: str
    created_by: str
    created_date: str
    updated_by: Optional[str] = None
    updated_date: Optional[str] = None
    is_active: bool


class EmployeeListResponse(BaseModel):
    """Paginated employee listing"""
    data: List[EmployeeOut]
    total: int
    page: int
    page_size: int
    total_pages: int


class EmployeeDeleted(BaseModel):
    message: str
    id: str


EMPLOYEE_FIELDS = (
    RecordField("employee_id"),
    RecordField("employment_type", FieldKind.NUMBER),
    RecordField("title", FieldKind.NUMBER),
    RecordField("first_name_en"),
    RecordField("last_name_en"),
    RecordField("first_name_th"),
    RecordField("last_name_th"),
    RecordField("nick_name_en"),
    RecordField("nick_name_th"),
    RecordField("phone_number"),
    RecordField("company_email"),
    RecordField("nationality"),
    RecordField("gender", FieldKind.NUMBER),
    RecordField("tax_id"),
    RecordField("birth_date", FieldKind.DATE),
    RecordField("start_work_date", FieldKind.DATE),
    RecordField("status", FieldKind.NUMBER),
    RecordField("remark"),
    RecordField("department"),
    RecordField("position"),
    RecordField("photo"),
    RecordField("custom_attributes"),
    RecordField("created_by"),
    RecordField("created_date", FieldKind.TIMESTAMP),
    RecordField("updated_by", omit_if_empty=True),
    RecordField("updated_date", FieldKind.TIMESTAMP, omit_if_empty=True),
    RecordField("is_active", FieldKind.BOOLEAN),
)
