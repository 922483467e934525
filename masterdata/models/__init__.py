"""
Database models
"""
from masterdata.models.employee import Employee, SYSTEM_USER_ID
from masterdata.models.department import Department, Position
from masterdata.models.location import Geography, Province, District, SubDistrict

__all__ = [
    "Employee",
    "SYSTEM_USER_ID",
    "Department",
    "Position",
    "Geography",
    "Province",
    "District",
    "SubDistrict",
]
