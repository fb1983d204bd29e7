"""
Pydantic models for the list uploads request.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from image_uploads.core.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)


class ListUploadsRequest(BaseModel):
    """
    Validation model for the list uploads API.

    Accepts the camelCase query string names used by API clients
    (searchQuery, sortBy, sortDirection, page, pageSize) as well as
    their snake_case field names.
    """

    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    # Filter: case-insensitive substring on name
    search_query: str | None = Field(
        None,
        alias="searchQuery",
        description="Substring match on upload name",
    )

    # Sorting
    sort_by: Literal["created_at"] | None = Field(
        None,
        alias="sortBy",
        description="Sort field",
    )
    sort_direction: Literal["asc", "desc"] | None = Field(
        None,
        alias="sortDirection",
        description="Sort direction, only applied together with sortBy",
    )

    # Pagination
    page: int = Field(
        default=DEFAULT_PAGE,
        ge=1,
        le=MAX_PAGE,
        description="1-based page number",
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        alias="pageSize",
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description=f"Results per page ({MIN_PAGE_SIZE}-{MAX_PAGE_SIZE})",
    )

    @field_validator("search_query")
    @classmethod
    def empty_search_is_none(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("sort_by", mode="before")
    @classmethod
    def normalize_sort_by(cls, value: object) -> object:
        """Accept the camelCase field name used in query strings."""
        if value == "createdAt":
            return "created_at"
        return value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

