"""
Employee model
"""
import uuid

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Date, Text
from sqlalchemy.sql import func
from masterdata.db.base import Base

SYSTEM_USER_ID = "00000000-0000-0000-0000-000000000000"


def _new_employee_id() -> str:
    return str(uuid.uuid4())


class Employee(Base):
    __tablename__ = "m_employee"

    employee_id = Column(String(36), primary_key=True, default=_new_employee_id)
    employment_type = Column(Integer, nullable=True)
    title = Column(Integer, nullable=True)
    first_name_en = Column(String(100), nullable=True)
    last_name_en = Column(String(100), nullable=True)
    first_name_th = Column(String(100), nullable=True)
    last_name_th = Column(String(100), nullable=True)
    nick_name_en = Column(String(50), nullable=True)
    nick_name_th = Column(String(50), nullable=True)
    phone_number = Column(String(50), nullable=True)
    company_email = Column(String(150), nullable=True, index=True)
    nationality = Column(String(100), nullable=True)
    gender = Column(Integer, nullable=True)
    tax_id = Column(String(20), nullable=True)
    birth_date = Column(Date, nullable=True)
    start_work_date = Column(Date, nullable=True)
    status = Column(Integer, nullable=True)
    remark = Column(Text, nullable=True)
    department = Column(String(150), nullable=True)
    position = Column(String(150), nullable=True)
    photo = Column(Text, nullable=True)
    custom_attributes = Column(Text, nullable=True)
    created_by = Column(String(36), nullable=False, default=SYSTEM_USER_ID)
    created_date = Column(DateTime, server_default=func.current_timestamp(), nullable=False, index=True)
    updated_by = Column(String(36), nullable=True)
    updated_date = Column(DateTime, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
