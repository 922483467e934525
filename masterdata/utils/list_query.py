"""
Count + page query assembly for listing endpoints

Both statements are built from one predicate, so `total` always counts the
same rows that `data` pages through. The two statements run as separate round
trips without a shared snapshot: under concurrent writes `total` may disagree
with what a page actually returns (read-committed, non-atomic pagination).
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from sqlalchemy import Table, func, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.selectable import Select

from masterdata.utils.pagination import ListRequest, SortFieldAllowList, SORT_DESC, total_pages
from masterdata.utils.record_format import RecordField, materialize_all

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class ListingSource:
    """A listable table: what may be searched, what may be sorted, how rows are keyed"""
    table: Table
    allow_list: SortFieldAllowList
    searchable: Tuple[str, ...]
    primary_key: str

    def __post_init__(self):
        columns = set(self.table.c.keys())
        unknown = (set(self.allow_list.fields) | set(self.searchable) | {self.primary_key}) - columns
        if unknown:
            raise ValueError(f"{self.table.name} has no column(s): {', '.join(sorted(unknown))}")

    def sort_column(self, name: str):
        """Allow-listed column object; raw names never reach SQL text"""
        if name not in self.allow_list:
            raise KeyError(name)
        return self.table.c[name]


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_search_predicate(source: ListingSource, search: str) -> Optional[ColumnElement]:
    """
    Case-insensitive substring match over the searchable columns

    Returns None for an empty search. The pattern is always a bound parameter.
    """
    if not search:
        return None
    pattern = f"%{escape_like(search)}%"
    return or_(
        *(source.table.c[name].ilike(pattern, escape=LIKE_ESCAPE) for name in source.searchable)
    )


def build_list_statements(source: ListingSource, request: ListRequest) -> Tuple[Select, Select]:
    """
    Build the (count, page) statement pair for one validated request

    The primary key is appended as a secondary sort key so repeated calls
    against an unchanged table page deterministically.
    """
    where = build_search_predicate(source, request.search)

    count_stmt = select(func.count()).select_from(source.table)
    page_stmt = select(*source.table.c)
    if where is not None:
        count_stmt = count_stmt.where(where)
        page_stmt = page_stmt.where(where)

    sort_column = source.sort_column(request.sort_by)
    ordering = [sort_column.desc() if request.sort_order == SORT_DESC else sort_column.asc()]
    if request.sort_by != source.primary_key:
        ordering.append(source.table.c[source.primary_key].asc())

    page_stmt = page_stmt.order_by(*ordering).limit(request.page_size).offset(request.offset)
    return count_stmt, page_stmt


def run_list_query(
    db: Session,
    source: ListingSource,
    request: ListRequest,
    fields: Sequence[RecordField],
) -> Dict[str, Any]:
    """
    Execute the count and page queries and build the list envelope

    A failing count raises before the page query is issued; a failing page
    query or row decode raises without returning partial data.
    """
    count_stmt, page_stmt = build_list_statements(source, request)

    total = db.execute(count_stmt).scalar_one()
    rows = db.execute(page_stmt).mappings().all()
    data = materialize_all(rows, fields)

    logger.debug(
        "Listed %s: page=%s page_size=%s total=%s returned=%s",
        source.table.name, request.page, request.page_size, total, len(data),
    )
    return {
        "data": data,
        "total": total,
        "page": request.page,
        "page_size": request.page_size,
        "total_pages": total_pages(total, request.page_size),
    }


def fetch_all(db: Session, stmt: Select, fields: Sequence[RecordField]) -> list:
    """Run an unpaginated lookup query; an empty result is []"""
    rows = db.execute(stmt).mappings().all()
    return materialize_all(rows, fields)
