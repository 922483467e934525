"""
Department service - department and position lookups
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from masterdata.models.department import Department, Position
from masterdata.schemas.department import DEPARTMENT_FIELDS, POSITION_FIELDS
from masterdata.utils.list_query import fetch_all


def list_departments(db: Session) -> List[dict]:
    """All departments ordered by id"""
    stmt = select(*Department.__table__.c).order_by(Department.department_id)
    return fetch_all(db, stmt, DEPARTMENT_FIELDS)


def list_positions(db: Session, department_id: Optional[int] = None) -> List[dict]:
    """
    Positions ordered by name

    Args:
        db: Database session
        department_id: If given, only positions of this department
    """
    stmt = select(*Position.__table__.c)
    if department_id is not None:
        stmt = stmt.where(Position.department_id == department_id)
    stmt = stmt.order_by(Position.position_name, Position.position_id)
    return fetch_all(db, stmt, POSITION_FIELDS)
