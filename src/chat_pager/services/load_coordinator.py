"""Single-flight load coordination for chat_pager.

This module provides the coordinator that serializes range fetches:
at most one fetch in flight, at most one request waiting behind it.
"""

import asyncio
from functools import partial

from chat_pager.errors import ChatPagerError, FetchFailure, FetchTimeout, LoadSuperseded
from chat_pager.interfaces.source import MessageSourceInterface
from chat_pager.logging import get_logger
from chat_pager.models.message import Message
from chat_pager.models.range import LoadRange, PageBounds
from chat_pager.services.message_window import MessageWindow

__all__ = [
    "LoadCoordinator",
]

logger = get_logger(__name__)

_Pending = tuple[LoadRange, asyncio.Future[list[Message]]]


class LoadCoordinator:
    """Single-flight loader with one coalesced follow-up slot.

    - Idle: request_range() starts a fetch immediately.
    - Busy: the request takes the pending slot. A request already in
      the slot is failed with LoadSuperseded (last writer wins).
    - On completion the in-flight flag is cleared first, the caller is
      resolved, then the pending request is issued as a fresh fetch of
      its own range on the next loop iteration, after the resolved
      caller has had a chance to merge. Until then the slot still
      coalesces new requests.
    - With a window, the pending range is trimmed to the ids still
      missing when it is issued; a fully loaded range resolves to []
      without a fetch.

    Every accepted request resolves exactly once, with messages or an
    exception, through the future returned by request_range(). All
    state is owned by the event loop that calls request_range().

    Example:
        coordinator = LoadCoordinator(source)
        messages = await coordinator.request_range(LoadRange(start=1, end=20))
    """

    def __init__(
        self,
        source: MessageSourceInterface,
        fetch_timeout: float | None = None,
        drop_pending_on_failure: bool = False,
        window: MessageWindow | None = None,
    ) -> None:
        """Initialize coordinator.

        Args:
            source: Message source to fetch from
            fetch_timeout: Seconds before a fetch fails with FetchTimeout (None: no limit)
            drop_pending_on_failure: If True, a failed fetch also fails the
                pending request instead of issuing it
            window: Window used to trim pending ranges to the ids still missing
        """
        self._source = source
        self._fetch_timeout = fetch_timeout
        self._drop_pending_on_failure = drop_pending_on_failure
        self._window = window

        self._is_loading = False
        self._pending: _Pending | None = None
        self._in_flight: asyncio.Task[None] | None = None
        self._in_flight_range: LoadRange | None = None
        self._fetch_count = 0
        self._page_bounds = PageBounds()

    # === STATE ===

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def in_flight_range(self) -> LoadRange | None:
        return self._in_flight_range

    @property
    def pending_range(self) -> LoadRange | None:
        return self._pending[0] if self._pending else None

    @property
    def fetch_count(self) -> int:
        """Number of fetches issued to the source."""
        return self._fetch_count

    @property
    def page_bounds(self) -> PageBounds:
        return self._page_bounds

    def set_page_bounds(self, lower: int, upper: int) -> None:
        """Record the settled page window (advisory only)."""
        self._page_bounds = PageBounds(lower_page=lower, upper_page=upper)

    # === REQUESTS ===

    def request_range(self, load_range: LoadRange) -> asyncio.Future[list[Message]]:
        """Request a range of messages.

        Must be called from the coordinating event loop.

        Args:
            load_range: Inclusive id range to load

        Returns:
            Future resolved with the fetched messages, or failed with
            FetchFailure / LoadSuperseded
        """
        future: asyncio.Future[list[Message]] = asyncio.get_running_loop().create_future()

        if not self._is_loading and self._pending is None:
            self._start(load_range, future)
            return future

        if self._pending is not None:
            superseded_range, superseded = self._pending
            logger.debug(
                "load_request_superseded",
                start=superseded_range.start,
                end=superseded_range.end,
            )
            if not superseded.done():
                superseded.set_exception(LoadSuperseded(superseded_range))

        self._pending = (load_range, future)
        logger.debug("load_request_coalesced", start=load_range.start, end=load_range.end)
        return future

    async def close(self) -> None:
        """Cancel the in-flight fetch and the pending request.

        Their futures are cancelled. The coordinator stays usable.
        """
        self._cancel_pending()

        task = self._in_flight
        if task is not None and not task.done():
            task.cancel()
            # wait() does not raise for the cancelled task, only for our own cancellation
            await asyncio.wait({task})

    # === INTERNALS ===

    def _start(self, load_range: LoadRange, future: asyncio.Future[list[Message]]) -> None:
        self._is_loading = True
        self._in_flight_range = load_range
        self._fetch_count += 1
        logger.debug("fetch_started", start=load_range.start, end=load_range.end)
        task = asyncio.create_task(self._run(load_range, future))
        task.add_done_callback(partial(self._on_task_done, future))
        self._in_flight = task

    def _on_task_done(
        self,
        future: asyncio.Future[list[Message]],
        task: asyncio.Task[None],
    ) -> None:
        # A task cancelled before its first step never runs _run's cleanup.
        # Only touch state still owned by this task.
        if self._in_flight is task:
            self._finish()
            self._cancel_pending()
        if not future.done():
            future.cancel()

    async def _run(self, load_range: LoadRange, future: asyncio.Future[list[Message]]) -> None:
        try:
            messages = await self._fetch(load_range)
        except asyncio.CancelledError:
            self._finish()
            future.cancel()
            self._cancel_pending()
            logger.debug("fetch_cancelled", start=load_range.start, end=load_range.end)
            raise
        except FetchFailure as e:
            logger.warning(
                "fetch_failed",
                start=load_range.start,
                end=load_range.end,
                reason=e.reason,
            )
            self._finish()
            if not future.done():
                future.set_exception(e)
            self._schedule_drain(failed=True)
            return

        logger.debug(
            "fetch_completed",
            start=load_range.start,
            end=load_range.end,
            received=len(messages),
        )
        self._finish()
        if not future.done():
            future.set_result(messages)
        self._schedule_drain(failed=False)

    async def _fetch(self, load_range: LoadRange) -> list[Message]:
        """Fetch and validate one range; every failure becomes FetchFailure."""
        try:
            if self._fetch_timeout is None:
                result = await self._source.fetch(load_range.start, load_range.count)
            else:
                try:
                    result = await asyncio.wait_for(
                        self._source.fetch(load_range.start, load_range.count),
                        timeout=self._fetch_timeout,
                    )
                except TimeoutError as e:
                    raise FetchTimeout(load_range, self._fetch_timeout) from e
        except FetchFailure:
            raise
        except ChatPagerError as e:
            raise FetchFailure(load_range, str(e)) from e
        except Exception as e:
            raise FetchFailure(load_range, f"{type(e).__name__}: {e}") from e

        return self._validate(load_range, result)

    @staticmethod
    def _validate(load_range: LoadRange, result: object) -> list[Message]:
        if not isinstance(result, list):
            raise FetchFailure(load_range, f"expected a list, got {type(result).__name__}")
        if len(result) > load_range.count:
            raise FetchFailure(
                load_range, f"received {len(result)} messages for {load_range.count} ids"
            )

        previous_id: int | None = None
        for item in result:
            if not isinstance(item, Message):
                raise FetchFailure(load_range, f"unexpected item {type(item).__name__}")
            if not load_range.contains(item.id):
                raise FetchFailure(load_range, f"message {item.id} outside requested range")
            if previous_id is not None and item.id <= previous_id:
                raise FetchFailure(load_range, "message ids not strictly ascending")
            previous_id = item.id
        return result

    def _finish(self) -> None:
        self._is_loading = False
        self._in_flight = None
        self._in_flight_range = None

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            _, future = self._pending
            self._pending = None
            future.cancel()

    def _schedule_drain(self, failed: bool) -> None:
        # Resolved callers resume before the pending request is issued
        if self._pending is not None:
            asyncio.get_running_loop().call_soon(self._drain, failed)

    def _drain(self, failed: bool) -> None:
        """Issue the pending request, if any. Runs with is_loading cleared."""
        if self._pending is None or self._is_loading:
            return

        load_range, future = self._pending
        self._pending = None

        if future.done():
            # Caller gave up on it while it was waiting
            return

        if failed and self._drop_pending_on_failure:
            logger.info("pending_request_dropped", start=load_range.start, end=load_range.end)
            future.set_exception(FetchFailure(load_range, "dropped after preceding fetch failed"))
            return

        if self._window is not None:
            trimmed = self._trim(load_range)
            if trimmed is None:
                logger.debug(
                    "pending_request_already_loaded",
                    start=load_range.start,
                    end=load_range.end,
                )
                future.set_result([])
                return
            load_range = trimmed

        self._start(load_range, future)

    def _trim(self, load_range: LoadRange) -> LoadRange | None:
        """Narrow a range to the span of ids the window is still missing."""
        assert self._window is not None
        missing = self._window.missing_ranges(load_range.start, load_range.end)
        if not missing:
            return None
        trimmed = LoadRange(start=missing[0].start, end=missing[-1].end)
        if trimmed != load_range:
            logger.debug(
                "pending_request_trimmed",
                start=trimmed.start,
                end=trimmed.end,
                requested_start=load_range.start,
                requested_end=load_range.end,
            )
        return trimmed
