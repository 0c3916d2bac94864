import enum
from typing import TypeVar, Generic
from pydantic import BaseModel

T = TypeVar("T")


class SortOrder(str, enum.Enum):
    asc = "asc"
    desc = "desc"


class PaginationMeta(BaseModel):
    current: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool


class PaginatedResponse(BaseModel, Generic[T]):
    data: list[T]
    pagination: PaginationMeta
