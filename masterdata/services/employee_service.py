"""
Employee service - business logic for employee records
"""
import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from masterdata.models.employee import Employee, SYSTEM_USER_ID
from masterdata.schemas.employee import EmployeeCreate, EmployeeUpdate, EMPLOYEE_FIELDS
from masterdata.utils.list_query import ListingSource, run_list_query
from masterdata.utils.pagination import SortFieldAllowList, UnknownSortFieldError, parse_list_request
from masterdata.utils.record_format import materialize, row_mapping

logger = logging.getLogger(__name__)

EMPLOYEE_SORT_FIELDS = SortFieldAllowList(
    fields=frozenset({
        "employee_id",
        "employment_type",
        "title",
        "first_name_en",
        "last_name_en",
        "first_name_th",
        "last_name_th",
        "nick_name_en",
        "nick_name_th",
        "phone_number",
        "company_email",
        "nationality",
        "gender",
        "birth_date",
        "start_work_date",
        "status",
        "department",
        "position",
        "created_by",
        "created_date",
        "updated_by",
        "updated_date",
        "is_active",
    }),
    default="created_date",
)

EMPLOYEE_LISTING = ListingSource(
    table=Employee.__table__,
    allow_list=EMPLOYEE_SORT_FIELDS,
    searchable=("first_name_en", "last_name_en", "company_email"),
    primary_key="employee_id",
)


def _employee_out(employee: Employee) -> Dict[str, Any]:
    return materialize(row_mapping(employee), EMPLOYEE_FIELDS)


def _not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee with id {employee_id} not found"
    )


def list_employees(
    db: Session,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List employees with pagination, sorting and search

    Args:
        db: Database session
        page, page_size, sort_by, sort_order, search: Raw query-string values

    Returns:
        List envelope: data, total, page, page_size, total_pages

    Raises:
        HTTPException: 400 if sort_by is not a sortable employee column
    """
    try:
        request = parse_list_request(
            EMPLOYEE_SORT_FIELDS,
            page=page,
            page_size=page_size,
            sort_by=sort_by,
            sort_order=sort_order,
            search=search,
        )
    except UnknownSortFieldError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return run_list_query(db, EMPLOYEE_LISTING, request, EMPLOYEE_FIELDS)


def get_employee(db: Session, employee_id: str) -> Optional[Employee]:
    """Get an employee by ID"""
    return db.query(Employee).filter(Employee.employee_id == employee_id).first()


def get_employee_out(db: Session, employee_id: str) -> Dict[str, Any]:
    """
    Get an employee record ready for output

    Raises:
        HTTPException: 404 if the employee does not exist
    """
    employee = get_employee(db, employee_id)
    if not employee:
        raise _not_found(employee_id)
    return _employee_out(employee)


def create_employee(db: Session, employee_data: EmployeeCreate) -> Dict[str, Any]:
    """
    Create a new employee

    Args:
        db: Database session
        employee_data: Employee creation data

    Returns:
        Created employee record, including server-assigned id and created_date
    """
    values = employee_data.model_dump(exclude={"created_by"})
    created_by = str(employee_data.created_by) if employee_data.created_by else SYSTEM_USER_ID
    employee = Employee(**values, created_by=created_by)
    try:
        db.add(employee)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(employee)

    logger.info("Created employee %s", employee.employee_id)
    return _employee_out(employee)


def update_employee(db: Session, employee_id: str, employee_data: EmployeeUpdate) -> Dict[str, Any]:
    """
    Replace every client-supplied field of an employee

    Args:
        db: Database session
        employee_id: ID of employee to update
        employee_data: Complete new state

    Returns:
        Updated employee record

    Raises:
        HTTPException: 404 if the employee does not exist
    """
    employee = get_employee(db, employee_id)
    if not employee:
        raise _not_found(employee_id)

    for name, value in employee_data.model_dump(exclude={"updated_by"}).items():
        setattr(employee, name, value)
    employee.updated_by = str(employee_data.updated_by) if employee_data.updated_by else None
    employee.updated_date = func.current_timestamp()

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(employee)

    logger.info("Updated employee %s", employee_id)
    return _employee_out(employee)


def delete_employee(db: Session, employee_id: str) -> bool:
    """
    Hard-delete an employee

    Returns:
        True if a row was deleted, False if the employee did not exist
    """
    try:
        deleted = (
            db.query(Employee)
            .filter(Employee.employee_id == employee_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    if deleted:
        logger.info("Deleted employee %s", employee_id)
    return deleted > 0
