"""
Department and position reference models
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from masterdata.db.base import Base


class Department(Base):
    __tablename__ = "r_department"

    department_id = Column(Integer, primary_key=True)
    department_name = Column(String(150), nullable=False)
    created_date = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    updated_date = Column(DateTime, nullable=True)


class Position(Base):
    __tablename__ = "r_position"

    position_id = Column(Integer, primary_key=True)
    department_id = Column(Integer, ForeignKey("r_department.department_id"), nullable=False, index=True)
    position_name = Column(String(150), nullable=False)
    acronym = Column(String(20), nullable=True)
    created_date = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    updated_date = Column(DateTime, nullable=True)
