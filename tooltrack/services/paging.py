import enum
import math
import unicodedata
from datetime import date
from functools import cmp_to_key
from typing import TypeVar
from pydantic import BaseModel
from tooltrack.exceptions import InvalidArgumentError
from tooltrack.schemas.pagination import PaginatedResponse, PaginationMeta, SortOrder

MAX_PAGE_SIZE = 1000

M = TypeVar("M", bound=BaseModel)
E = TypeVar("E", bound=enum.Enum)


def validate_page_args(page: int, page_size: int) -> None:
    if page < 1:
        raise InvalidArgumentError("Page number must be greater than 0")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise InvalidArgumentError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")


def coerce_choice(choices: type[E], value) -> E:
    try:
        return choices(value)
    except ValueError:
        allowed = ", ".join(c.value for c in choices)
        raise InvalidArgumentError(f"Unknown {choices.__name__} {value!r}, expected one of: {allowed}") from None


def validate_sort_field(model: type[BaseModel], field: str) -> None:
    if field not in model.model_fields:
        raise InvalidArgumentError(f"Cannot sort {model.__name__} by unknown field '{field}'")


def _collation_key(text: str) -> tuple[str, str, str]:
    # base letters first, then accents, then lowercase before uppercase
    base = "".join(c for c in unicodedata.normalize("NFKD", text) if not unicodedata.combining(c))
    return base.casefold(), text.casefold(), text.swapcase()


def locale_compare(a: str, b: str) -> int:
    ka, kb = _collation_key(a), _collation_key(b)
    return (ka > kb) - (ka < kb)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(a, b, order: SortOrder = SortOrder.asc) -> int:
    ascending = order == SortOrder.asc
    if a is None and b is None:
        return 0
    if a is None:
        return -1 if ascending else 1
    if b is None:
        return 1 if ascending else -1

    if isinstance(a, str) and isinstance(b, str):
        result = locale_compare(a, b)
    elif _is_number(a) and _is_number(b):
        result = (a > b) - (a < b)
    elif isinstance(a, date) and isinstance(b, date):
        result = (a > b) - (a < b)
    else:
        return 0
    return result if ascending else -result


def sort_records(records: list[M], field: str, order: SortOrder = SortOrder.asc) -> list[M]:
    """Stable sort of model instances by one of their fields."""
    return sorted(
        records,
        key=cmp_to_key(lambda a, b: compare_values(getattr(a, field), getattr(b, field), order)),
    )


def paginate(model: type[M], records: list[M], page: int, page_size: int) -> PaginatedResponse[M]:
    total = len(records)
    total_pages = math.ceil(total / page_size)
    start = (page - 1) * page_size
    return PaginatedResponse[model](
        data=[r.model_copy() for r in records[start:start + page_size]],
        pagination=PaginationMeta(
            current=page,
            page_size=page_size,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        ),
    )
