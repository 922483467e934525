"""
List request parsing and page arithmetic

Raw query-string values are never trusted: page and page_size are clamped,
sort_order falls back to ascending, and sort_by must be allow-listed.
"""
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# OFFSET is bound as a signed 64-bit integer
MAX_OFFSET = 2 ** 63 - 1

_INTEGER_RE = re.compile(r"-?[0-9]+")

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_ORDERS = (SORT_ASC, SORT_DESC)


class UnknownSortFieldError(ValueError):
    """sort_by named a column outside the entity's allow-list"""

    def __init__(self, field: str, allowed: Iterable[str]):
        self.field = field
        self.allowed = sorted(allowed)
        super().__init__(
            f"Invalid sort_by field '{field}'. Allowed fields: {', '.join(self.allowed)}"
        )


@dataclass(frozen=True)
class SortFieldAllowList:
    """Column names an entity may be sorted by, plus the default one"""
    fields: FrozenSet[str]
    default: str

    def __post_init__(self):
        if self.default not in self.fields:
            raise ValueError(f"default sort field '{self.default}' is not in the allow-list")

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def resolve(self, raw: Optional[str]) -> str:
        """Empty -> default column; unknown -> UnknownSortFieldError"""
        if not raw:
            return self.default
        if raw not in self.fields:
            raise UnknownSortFieldError(raw, self.fields)
        return raw


@dataclass(frozen=True)
class ListRequest:
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = ""
    sort_order: str = SORT_ASC
    search: str = ""

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def _parse_int(raw: Optional[str]) -> Optional[int]:
    """Strict base-10 integer: optional minus sign and ASCII digits only"""
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # longer than the interpreter will convert
        return None


def parse_page(raw: Optional[str], page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Page number; anything unparseable, below 1 or past the largest offset becomes 1"""
    page = _parse_int(raw)
    if page is None or page < 1:
        return DEFAULT_PAGE
    if (page - 1) * page_size > MAX_OFFSET:
        return DEFAULT_PAGE
    return page


def parse_page_size(raw: Optional[str]) -> int:
    """Page size; anything unparseable or outside [1, 100] becomes 10"""
    page_size = _parse_int(raw)
    if page_size is None or page_size < 1 or page_size > MAX_PAGE_SIZE:
        return DEFAULT_PAGE_SIZE
    return page_size


def parse_sort_order(raw: Optional[str]) -> str:
    """Case-sensitive 'asc' / 'desc'; anything else is 'asc'"""
    if raw in SORT_ORDERS:
        return raw
    return SORT_ASC


def parse_list_request(
    allow_list: SortFieldAllowList,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    search: Optional[str] = None,
) -> ListRequest:
    """
    Build a validated ListRequest from raw query-string values

    Args:
        allow_list: Sortable columns of the target entity
        page, page_size, sort_by, sort_order, search: Raw values (None when absent)

    Returns:
        ListRequest with clamped, allow-listed values

    Raises:
        UnknownSortFieldError: If sort_by is non-empty and not allow-listed
    """
    size = parse_page_size(page_size)
    return ListRequest(
        page=parse_page(page, size),
        page_size=size,
        sort_by=allow_list.resolve(sort_by),
        sort_order=parse_sort_order(sort_order),
        search=search or "",
    )


def total_pages(total: int, page_size: int) -> int:
    """Ceiling division; zero rows means zero pages"""
    if total <= 0:
        return 0
    return (total + page_size - 1) // page_size
