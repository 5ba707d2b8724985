"""Pagination input validation and response helpers."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paginate.utils.errors import PaginationError, describe_validation_error


class PaginationParams(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    length: int = Field(default=0, ge=0, description="Total number of items")
    limit: int = Field(default=0, ge=0, description="Max items per page")
    offset: int = Field(default=0, ge=0, description="Zero-based page offset")


def validate_params(length: int, limit: int, offset: int = 0) -> PaginationParams:
    """Validate raw inputs, raising PaginationError on failure."""
    try:
        return PaginationParams(length=length, limit=limit, offset=offset)
    except ValidationError as e:
        raise PaginationError(describe_validation_error(e)) from e


def build_pagination_response(
    pages, offset: int, items: Optional[list] = None
) -> dict:
    """Describe the page at ``offset`` for an API response.

    ``pages`` is a Pages instance; its cursor is not touched.
    """
    page = pages.with_offset(offset)
    has_more = not pages.with_offset(offset + 1).is_empty
    response = {
        "offset": page.offset,
        "count": page.count,
        "start": page.start,
        "end": page.end,
        "length": pages.length,
        "limit": pages.limit,
        "page_count": pages.page_count(),
        "has_more": has_more,
        "next_offset": offset + 1 if has_more else None,
    }
    if items is not None:
        response["items"] = items
    return response
