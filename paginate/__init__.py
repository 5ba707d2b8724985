"""Framework agnostic pagination over a known number of items.

Iterate every page::

    from paginate import Pages

    for page in Pages(100, 5):
        print(page)

Or look up a single page::

    page = Pages(35, 5).with_offset(3)
    rows = items[page.as_slice()]
"""
from paginate.config import PaginateConfig
from paginate.pages import Page, Pages, compute_page
from paginate.utils.errors import PaginationError, describe_validation_error
from paginate.utils.formatting import ResponseFormat, format_page, format_pages
from paginate.utils.pagination import (
    PaginationParams,
    build_pagination_response,
    validate_params,
)

__all__ = [
    "Page",
    "Pages",
    "PaginateConfig",
    "PaginationError",
    "PaginationParams",
    "ResponseFormat",
    "build_pagination_response",
    "compute_page",
    "describe_validation_error",
    "format_page",
    "format_pages",
    "validate_params",
]
