"""Page windows over a known number of items.

``compute_page`` is the pure offset -> range mapping. ``Pages`` holds a
length and a page size and iterates consecutive non-empty pages, advancing
a cursor that is never reset.
"""
import copy
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from paginate.config import config
from paginate.utils.pagination import validate_params

logger = logging.getLogger(__name__)


class Page(BaseModel):
    """One page of items; ``end`` is the inclusive index of the last item."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0, description="Zero-based page offset")
    count: int = Field(default=0, ge=0, description="Items on this page")
    start: int = Field(default=0, ge=0, description="Index of the first item")
    end: int = Field(default=0, ge=0, description="Index of the last item")

    @model_validator(mode="after")
    def check_bounds(self) -> "Page":
        if self.count == 0:
            if self.start or self.end:
                raise ValueError("an empty page must have start == end == 0")
        elif self.end != self.start + self.count - 1:
            raise ValueError("end must equal start + count - 1")
        return self

    @property
    def is_empty(self) -> bool:
        """A page without items is empty."""
        return self.count == 0

    def as_slice(self) -> slice:
        """Slice selecting this page's items from a sequence."""
        if self.is_empty:
            return slice(0, 0)
        return slice(self.start, self.end + 1)

    def __str__(self) -> str:
        return (
            f"offset: {self.offset}, total: {self.count}, "
            f"start: {self.start}, end: {self.end}"
        )


def compute_page(length: int, limit: int, offset: int) -> Page:
    """Return the page at ``offset`` for ``length`` items, ``limit`` per page.

    Raises PaginationError unless all three are non-negative ints.
    """
    params = validate_params(length, limit, offset)
    length, limit, offset = params.length, params.limit, params.offset
    start = min(offset * limit, length)
    end = min(start + limit, length)
    count = max(end - start, 0)
    if count == 0:
        return Page(offset=offset)
    return Page(offset=offset, count=count, start=start, end=end - 1)


class Pages:
    """Pagination over ``length`` items with at most ``limit`` per page.

    Iterating yields consecutive non-empty pages from the current cursor
    and stops at the first empty one. The cursor keeps advancing on every
    ``next()``, so an exhausted instance stays exhausted; use
    ``restarted()`` to iterate again.
    """

    def __init__(self, length: int, limit: Optional[int] = None):
        if limit is None:
            limit = config.default_limit
        params = validate_params(length, limit)
        self._length = params.length
        self._limit = params.limit
        self._offset = 0

        if self._limit == 0:
            logger.warning(
                f"Pages(length={self._length}, limit=0): no page will contain items"
            )
        logger.debug(
            f"Pages created (length={self._length}, limit={self._limit}, "
            f"page_count={self.page_count()})"
        )

    @property
    def offset(self) -> int:
        """Offset of the next page iteration will produce."""
        return self._offset

    @property
    def length(self) -> int:
        return self._length

    @property
    def limit(self) -> int:
        return self._limit

    def page_count(self) -> int:
        """Total number of pages; 0 when ``limit`` is 0."""
        if self._limit == 0:
            return 0
        return (self._length + self._limit - 1) // self._limit

    def with_offset(self, offset: int) -> Page:
        """Get the page at ``offset`` without touching the cursor."""
        return compute_page(self._length, self._limit, offset)

    def copy(self) -> "Pages":
        """Duplicate, cursor included."""
        return copy.copy(self)

    def restarted(self) -> "Pages":
        """Duplicate with the cursor back at offset 0."""
        clone = copy.copy(self)
        clone._offset = 0
        return clone

    def __iter__(self):
        return self

    def __next__(self) -> Page:
        page = compute_page(self._length, self._limit, self._offset)
        self._offset += 1
        if page.is_empty:
            logger.debug(f"Pages exhausted at offset {self._offset - 1}")
            raise StopIteration
        return page

    def __eq__(self, other):
        if not isinstance(other, Pages):
            return NotImplemented
        return (self._length, self._limit, self._offset) == (
            other._length,
            other._limit,
            other._offset,
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Pages(length={self._length}, limit={self._limit}, "
            f"offset={self._offset})"
        )
