"""
Dependencies and request-parameter helpers for FastAPI endpoints
"""
from typing import Generator, Optional
from fastapi import HTTPException, status
from masterdata.db.session import SessionLocal


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def parse_filter_id(raw: Optional[str], name: str) -> Optional[int]:
    """
    Parse an optional integer filter from the query string

    Empty or missing means "no filter"; anything else must be an integer.

    Raises:
        HTTPException: 400 if the value is not an integer
    """
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name} parameter"
        )
