"""
Employee endpoints: paginated listing plus single-record CRUD
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.orm import Session

from masterdata.core.deps import get_db
from masterdata.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeOut,
    EmployeeListResponse,
    EmployeeDeleted,
)
from masterdata.services.employee_service import (
    list_employees,
    get_employee_out,
    create_employee,
    update_employee,
    delete_employee,
)

router = APIRouter()


@router.get("/employees", response_model=EmployeeListResponse, response_model_exclude_unset=True)
def list_employees_endpoint(
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    page_size: Optional[str] = Query(None, description="Rows per page, 1-100 (default 10)"),
    sort_by: Optional[str] = Query(None, description="Sort field (default created_date)"),
    sort_order: Optional[str] = Query(None, description="asc or desc (default asc)"),
    search: Optional[str] = Query(None, description="Matches first/last name (EN) and company email"),
    db: Session = Depends(get_db),
):
    """
    List employees

    Bad page/page_size/sort_order values fall back to defaults; an unknown
    sort_by is rejected with 400.
    """
    return list_employees(
        db,
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        search=search,
    )


@router.post(
    "/employee",
    response_model=EmployeeOut,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_employee_endpoint(
    employee_data: EmployeeCreate,
    db: Session = Depends(get_db),
):
    """Create a new employee"""
    return create_employee(db, employee_data)


@router.get("/employee/{employee_id}", response_model=EmployeeOut, response_model_exclude_unset=True)
def get_employee_endpoint(
    employee_id: UUID,
    db: Session = Depends(get_db),
):
    """Get an employee by ID"""
    return get_employee_out(db, str(employee_id))


@router.put("/employee/{employee_id}", response_model=EmployeeOut, response_model_exclude_unset=True)
def update_employee_endpoint(
    employee_id: UUID,
    employee_data: EmployeeUpdate,
    db: Session = Depends(get_db),
):
    """Replace an employee; updated_date is set by the server"""
    return update_employee(db, str(employee_id), employee_data)


@router.delete("/employee/{employee_id}", response_model=EmployeeDeleted)
def delete_employee_endpoint(
    employee_id: UUID,
    db: Session = Depends(get_db),
):
    """
    Delete an employee

    Returns 404 if employee not found.
    """
    if not delete_employee(db, str(employee_id)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found"
        )
    return {"message": "Employee deleted successfully", "id": str(employee_id)}
