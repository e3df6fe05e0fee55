import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Sequence
from typing import Any
from typing import Generic
from typing import TypeVar

from uber_api.domain import NO_THROTTLE
from uber_api.domain import Page
from uber_api.domain import PageQuery
from uber_api.domain import PaginationState

__all__ = ["FetchPage", "PageStream", "paginate", "stream_once", "wait_unless"]


logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# fetch(offset, limit) -> items of one page
FetchPage = Callable[[int, int], Awaitable[Sequence[T]]]


async def wait_unless(
    aw: Awaitable[R], *events: asyncio.Event
) -> tuple[bool, R | None]:
    """Await ``aw`` unless one of ``events`` is set first.

    Returns ``(True, result)`` if ``aw`` completed and ``(False, None)`` if an event
    won. In the latter case ``aw`` is cancelled, so that e.g. a pending
    ``Queue.put`` never delivers its item afterwards.
    """
    if any(event.is_set() for event in events):
        if asyncio.iscoroutine(aw):
            aw.close()
        return False, None
    task = asyncio.ensure_future(aw)
    waiters = [asyncio.ensure_future(event.wait()) for event in events]
    try:
        await asyncio.wait([task, *waiters], return_when=asyncio.FIRST_COMPLETED)
    finally:
        for waiter in waiters:
            waiter.cancel()
        if not task.done():
            task.cancel()
        await asyncio.gather(task, *waiters, return_exceptions=True)
    if task.cancelled():
        return False, None
    return True, task.result()


class PageStream(Generic[T]):
    """Pages produced by a background task, consumed with ``async for``.

    The producer fetches the next page only after the consumer took the previous
    one, so at most one unconsumed page exists. The stream ends on the first fetch
    that returns no items, on a failing fetch (its exception is in the last page's
    ``error``), when ``query.max_page_number`` pages were delivered or when
    ``cancel()`` is called.

    Always iterate until the end, call ``cancel()`` or use the stream as an
    async context manager; otherwise the producer waits forever for a consumer.
    """

    def __init__(
        self,
        fetch: FetchPage[T],
        query: PageQuery,
        publish_empty: bool = False,
    ):
        self._fetch = fetch
        self._query = query
        self._publish_empty = publish_empty
        self._queue: asyncio.Queue[Page[T]] = asyncio.Queue(maxsize=1)
        self._cancelled = asyncio.Event()
        self._closed = asyncio.Event()
        self._task = asyncio.create_task(self._produce())

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def cancel(self) -> None:
        """Stop producing pages; pages that were not consumed yet are dropped"""
        if not self._cancelled.is_set():
            logger.debug("pagination cancelled")
        self._cancelled.set()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def aclose(self) -> None:
        self.cancel()
        await self.wait_closed()

    async def __aenter__(self) -> "PageStream[T]":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __aiter__(self) -> "PageStream[T]":
        return self

    async def __anext__(self) -> Page[T]:
        while not self._cancelled.is_set():
            if not self._queue.empty():
                page = self._queue.get_nowait()
                self._queue.task_done()
                return page
            if self._closed.is_set():
                break
            done, page = await wait_unless(
                self._queue.get(), self._closed, self._cancelled
            )
            if done:
                self._queue.task_done()
                if not self._cancelled.is_set():
                    return page  # type: ignore
        raise StopAsyncIteration

    async def _publish(self, page: Page[T]) -> bool:
        published, _ = await wait_unless(self._queue.put(page), self._cancelled)
        return published

    async def _wait_taken(self) -> bool:
        """Wait until the consumer took the published page; False if cancelled"""
        taken, _ = await wait_unless(self._queue.join(), self._cancelled)
        return taken

    async def _throttle(self, delay: float) -> bool:
        """Sleep for ``delay`` seconds; returns False if cancelled in the meantime"""
        if delay <= 0:
            return not self._cancelled.is_set()
        slept, _ = await wait_unless(asyncio.sleep(delay), self._cancelled)
        return slept

    async def _produce(self) -> None:
        state = PaginationState(offset=self._query.start_offset)
        logger.debug("pagination started at offset %d", state.offset)
        try:
            while state.more and not self._cancelled.is_set():
                if state.page_number > 0:
                    if not await self._wait_taken():
                        break
                    if not await self._throttle(self._query.delay):
                        break
                try:
                    items = await self._fetch(state.offset, self._query.limit)
                except Exception as e:
                    logger.warning(
                        "fetching page %d (offset %d) failed: %r",
                        state.page_number + 1,
                        state.offset,
                        e,
                    )
                    await self._publish(
                        Page(
                            page_number=state.page_number + 1,
                            offset=state.offset,
                            error=e,
                        )
                    )
                    break
                if not items and not self._publish_empty:
                    break
                state.page_number += 1
                page = Page(
                    items=list(items),
                    page_number=state.page_number,
                    offset=state.offset,
                )
                state.offset += len(items)
                state.more = not self._query.is_last(state.page_number)
                if not await self._publish(page):
                    break
        finally:
            self._closed.set()
            logger.debug(
                "pagination stopped after %d page(s) at offset %d",
                state.page_number,
                state.offset,
            )


def paginate(fetch: FetchPage[T], query: PageQuery | None = None) -> PageStream[T]:
    """Start paginating. Without query: all pages, default limit, no throttle."""
    return PageStream(fetch, query if query is not None else PageQuery.unthrottled())


def stream_once(fetch: Callable[[], Awaitable[Sequence[T]]]) -> PageStream[T]:
    """A stream of exactly one page (possibly without items): for estimates"""

    async def fetch_page(offset: int, limit: int) -> Sequence[Any]:
        return await fetch()

    return PageStream(
        fetch_page,
        PageQuery(max_page_number=1, throttle=NO_THROTTLE),
        publish_empty=True,
    )
