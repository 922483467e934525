"""
Location service - geography hierarchy lookups

Only live rows (deleted_at IS NULL) are returned for the soft-deleted levels.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from masterdata.models.location import Geography, Province, District, SubDistrict
from masterdata.schemas.location import (
    GEOGRAPHY_FIELDS,
    PROVINCE_FIELDS,
    DISTRICT_FIELDS,
    SUB_DISTRICT_FIELDS,
)
from masterdata.utils.list_query import fetch_all


def list_geographies(db: Session) -> List[dict]:
    """All geographies ordered by id"""
    stmt = select(*Geography.__table__.c).order_by(Geography.geography_id)
    return fetch_all(db, stmt, GEOGRAPHY_FIELDS)


def list_provinces(db: Session, geography_id: Optional[int] = None) -> List[dict]:
    """Live provinces ordered by English name, optionally within one geography"""
    stmt = select(*Province.__table__.c).where(Province.deleted_at.is_(None))
    if geography_id is not None:
        stmt = stmt.where(Province.geography_id == geography_id)
    stmt = stmt.order_by(Province.province_name_en, Province.province_id)
    return fetch_all(db, stmt, PROVINCE_FIELDS)


def list_districts(db: Session, province_id: Optional[int] = None) -> List[dict]:
    """Live districts ordered by English name, optionally within one province"""
    stmt = select(*District.__table__.c).where(District.deleted_at.is_(None))
    if province_id is not None:
        stmt = stmt.where(District.province_id == province_id)
    stmt = stmt.order_by(District.name_en, District.district_id)
    return fetch_all(db, stmt, DISTRICT_FIELDS)


def list_sub_districts(db: Session, district_id: Optional[int] = None) -> List[dict]:
    """Live sub-districts ordered by English name, optionally within one district"""
    stmt = select(*SubDistrict.__table__.c).where(SubDistrict.deleted_at.is_(None))
    if district_id is not None:
        stmt = stmt.where(SubDistrict.district_id == district_id)
    stmt = stmt.order_by(SubDistrict.name_en, SubDistrict.sub_district_id)
    return fetch_all(db, stmt, SUB_DISTRICT_FIELDS)
