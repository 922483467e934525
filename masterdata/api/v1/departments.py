"""
Department and position lookup endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from masterdata.core.deps import get_db, parse_filter_id
from masterdata.schemas.department import DepartmentOut, PositionOut
from masterdata.services.department_service import list_departments, list_positions

router = APIRouter()


@router.get("/departments", response_model=List[DepartmentOut], response_model_exclude_unset=True)
def list_departments_endpoint(db: Session = Depends(get_db)):
    """List all departments"""
    return list_departments(db)


@router.get("/positions", response_model=List[PositionOut], response_model_exclude_unset=True)
def list_positions_endpoint(
    department_id: Optional[str] = Query(None, description="Department ID to filter positions"),
    db: Session = Depends(get_db),
):
    """List positions, optionally filtered by department_id"""
    return list_positions(db, department_id=parse_filter_id(department_id, "department_id"))
