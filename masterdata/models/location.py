"""
Geographic hierarchy models: Geography -> Province -> District -> SubDistrict

Provinces, districts and sub-districts are soft-deleted: a row is live while
deleted_at is NULL.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from masterdata.db.base import Base


class Geography(Base):
    __tablename__ = "m_geography"

    geography_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)


class Province(Base):
    __tablename__ = "m_province"

    province_id = Column(Integer, primary_key=True)
    province_name_th = Column(String(150), nullable=False)
    province_name_en = Column(String(150), nullable=False)
    geography_id = Column(Integer, ForeignKey("m_geography.geography_id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)


class District(Base):
    __tablename__ = "m_district"

    district_id = Column(Integer, primary_key=True)
    name_th = Column(String(150), nullable=False)
    name_en = Column(String(150), nullable=False)
    province_id = Column(Integer, ForeignKey("m_province.province_id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)


class SubDistrict(Base):
    __tablename__ = "m_sub_district"

    sub_district_id = Column(Integer, primary_key=True)
    zip_code = Column(Integer, nullable=True)
    name_th = Column(String(150), nullable=False)
    name_en = Column(String(150), nullable=False)
    district_id = Column(Integer, ForeignKey("m_district.district_id"), nullable=False, index=True)
    lat = Column(String(50), nullable=True)
    long = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)
