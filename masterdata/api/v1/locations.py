"""
Geography hierarchy lookup endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from masterdata.core.deps import get_db, parse_filter_id
from masterdata.schemas.location import GeographyOut, ProvinceOut, DistrictOut, SubDistrictOut
from masterdata.services.location_service import (
    list_geographies,
    list_provinces,
    list_districts,
    list_sub_districts,
)

router = APIRouter()


@router.get("/geographies", response_model=List[GeographyOut])
def list_geographies_endpoint(db: Session = Depends(get_db)):
    """List all geographies"""
    return list_geographies(db)


@router.get("/provinces", response_model=List[ProvinceOut], response_model_exclude_unset=True)
def list_provinces_endpoint(
    geography_id: Optional[str] = Query(None, description="Geography ID to filter provinces"),
    db: Session = Depends(get_db),
):
    """List live provinces, optionally filtered by geography_id"""
    return list_provinces(db, geography_id=parse_filter_id(geography_id, "geography_id"))


@router.get("/districts", response_model=List[DistrictOut], response_model_exclude_unset=True)
def list_districts_endpoint(
    province_id: Optional[str] = Query(None, description="Province ID to filter districts"),
    db: Session = Depends(get_db),
):
    """List live districts, optionally filtered by province_id"""
    return list_districts(db, province_id=parse_filter_id(province_id, "province_id"))


@router.get("/subdistricts", response_model=List[SubDistrictOut], response_model_exclude_unset=True)
def list_sub_districts_endpoint(
    district_id: Optional[str] = Query(None, description="District ID to filter sub-districts"),
    db: Session = Depends(get_db),
):
    """List live sub-districts, optionally filtered by district_id"""
    return list_sub_districts(db, district_id=parse_filter_id(district_id, "district_id"))
