"""Comment records and the dashboard's filter state.

All models are frozen: a change to the filter state always produces a new ``FilterState`` instance.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 50, 100)
DEFAULT_PAGE_SIZE = 10
SEARCHABLE_FIELDS: tuple[str, ...] = ("name", "email", "body")


class SortField(str, Enum):
    POST_ID = "postId"
    NAME = "name"
    EMAIL = "email"

    @property
    def attribute(self) -> str:
        """Attribute name of the field on ``Comment``."""
        return "post_id" if self is SortField.POST_ID else self.value

    @property
    def is_numeric(self) -> bool:
        return self is SortField.POST_ID


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Comment(BaseModel):
    """A single comment as served by the comments endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    post_id: int = Field(alias="postId")
    id: int
    name: str
    email: str
    body: str


class SortState(BaseModel):
    """Active sort field and direction. Either both are set or neither is."""

    model_config = ConfigDict(frozen=True)

    field: Optional[SortField] = None
    direction: Optional[SortDirection] = None

    @model_validator(mode="after")
    def _field_and_direction_together(self) -> "SortState":
        if (self.field is None) != (self.direction is None):
            raise ValueError("sort field and direction must both be set or both be empty")
        return self

    @property
    def is_active(self) -> bool:
        return self.field is not None


class FilterState(BaseModel):
    """Search term, sort state, current page and page size driving the dashboard."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: str = ""
    sort: SortState = Field(default_factory=SortState, alias="sortState")
    current_page: int = Field(default=1, ge=1, alias="currentPage")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, alias="pageSize")

    @field_validator("page_size")
    @classmethod
    def _supported_page_size(cls, value: int) -> int:
        if value not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page size must be one of {PAGE_SIZE_OPTIONS}, got {value}")
        return value

    def evolve(self, **changes) -> "FilterState":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return FilterState.model_validate(data)


class PaginationInfo(BaseModel):
    """Position of the visible page within the filtered, sorted collection.

    ``start_index`` and ``end_index`` are the 1-based, inclusive bounds shown to the user.
    """

    model_config = ConfigDict(frozen=True)

    current_page: int
    total_pages: int
    total_items: int
    page_size: int
    start_index: int
    end_index: int

    @classmethod
    def compute(cls, total_items: int, current_page: int, page_size: int) -> "PaginationInfo":
        start = (current_page - 1) * page_size
        return cls(
            current_page=current_page,
            total_pages=math.ceil(total_items / page_size),
            total_items=total_items,
            page_size=page_size,
            start_index=start + 1,
            end_index=min(start + page_size, total_items),
        )

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def label(self) -> str:
        return f"{self.start_index} to {self.end_index} of {self.total_items} items"
