# (c) Nelen & Schuurmans

from collections.abc import Sequence
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .value_object import ValueObject

__all__ = [
    "DEFAULT_LIMIT_PER_PAGE",
    "DEFAULT_THROTTLE",
    "DeliveryListQuery",
    "NO_THROTTLE",
    "Page",
    "PageQuery",
    "PaginationState",
]

T = TypeVar("T")

DEFAULT_LIMIT_PER_PAGE = 10
DEFAULT_THROTTLE = 0.15  # in seconds
NO_THROTTLE = -1.0


class PageQuery(ValueObject):
    """Pagination parameters of a list operation.

    Args:
        limit_per_page: Items requested per call; the API may return fewer.
            Values <= 0 select DEFAULT_LIMIT_PER_PAGE.
        max_page_number: Stop after this many pages. 0 means no limit.
        throttle: Seconds to wait between two fetches. NO_THROTTLE disables the
            delay, other values <= 0 select DEFAULT_THROTTLE.
        start_offset: The offset of the first fetch.
    """

    limit_per_page: int = 0
    max_page_number: int = Field(default=0, ge=0)
    throttle: float = 0.0
    start_offset: int = Field(default=0, ge=0)

    @classmethod
    def unthrottled(cls) -> "PageQuery":
        return cls(throttle=NO_THROTTLE)

    @property
    def limit(self) -> int:
        if self.limit_per_page > 0:
            return self.limit_per_page
        return DEFAULT_LIMIT_PER_PAGE

    @property
    def delay(self) -> float:
        if self.throttle == NO_THROTTLE:
            return 0.0
        return self.throttle if self.throttle > 0 else DEFAULT_THROTTLE

    def is_last(self, page_number: int) -> bool:
        return self.max_page_number > 0 and page_number >= self.max_page_number


class DeliveryListQuery(PageQuery):
    status: str | None = None


class PaginationState(BaseModel):
    """Cursor of a single pagination run; owned by the task producing the pages"""

    offset: int = 0
    page_number: int = 0
    more: bool = True


class Page(BaseModel, Generic[T]):
    """One fetched batch of items.

    Check ``error`` before using ``items``: a failing fetch produces a final page
    with the error and no items.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: Sequence[T] = ()
    page_number: int
    offset: int = 0
    error: Exception | None = None
