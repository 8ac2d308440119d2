"""Event poller that keeps listing like counts in sync with user likes."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from listing_likes.domain.contracts.event_poller import EventPollerProtocol
from listing_likes.domain.models.like_change import LikeChangeOutcome
from listing_likes.domain.models.poll_cycle_report import PollCycleReport

if TYPE_CHECKING:
    from listing_likes.domain.contracts.update_reporter import UpdateReporterProtocol
    from listing_likes.domain.models.event_page import EventPage
    from listing_likes.domain.models.listing import Listing
    from listing_likes.domain.ports import (
        CursorStore,
        LikeAggregator,
        LikeCountUpdater,
        MarketplaceApi,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikeEventPollerServices:
    """Collaborators of the event poller."""

    marketplace_api: MarketplaceApi
    aggregator: LikeAggregator
    like_count_updater: LikeCountUpdater
    cursor_store: CursorStore
    reporter: UpdateReporterProtocol


@dataclass(frozen=True)
class PollerSettings:
    """Polling settings, fixed at process start."""

    start_time: datetime
    event_types: str = "user/updated"
    poll_wait_seconds: float = 0.25
    poll_idle_wait_seconds: float = 10.0


class LikeEventPoller(EventPollerProtocol):
    """Polls user/updated events and applies the derived like count changes.

    Cycles never overlap: the next query is only sent after every listing
    update of the current batch finished and the cursor was saved. The cursor
    is advanced only after a batch was fully applied, so a crash in between
    makes the batch be processed again on restart.
    """

    def __init__(
        self,
        services: LikeEventPollerServices,
        settings: PollerSettings,
        cursor: int | None = None,
    ) -> None:
        """Initialize the event poller.

        Args:
            services: API, aggregation, update, cursor and reporting collaborators.
            settings: Polling settings.
            cursor: Sequence ID to resume after, or None to start from settings.start_time.
        """
        self.services = services
        self.settings = settings
        self.cursor = cursor
        self._stop_requested = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def is_resuming(self) -> bool:
        """Whether the poller knows a cursor to resume after."""
        return self.cursor is not None

    async def _fetch_page(self) -> EventPage:
        """Query the next page of events after the cursor (or since start time)."""
        api = self.services.marketplace_api
        if self.cursor is not None:
            return await api.query_events(
                self.settings.event_types, start_after_sequence_id=self.cursor
            )
        return await api.query_events(
            self.settings.event_types, created_at_start=self.settings.start_time
        )

    async def _apply_deltas(
        self, listing_ids: list[str], deltas: dict[str, int]
    ) -> list[Listing | None]:
        """Apply every delta concurrently; one failure cancels and awaits the rest."""
        updater = self.services.like_count_updater
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(updater.apply_delta(listing_id, deltas[listing_id]))
                    for listing_id in listing_ids
                ]
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from eg
        return [task.result() for task in tasks]

    async def poll_once(self) -> PollCycleReport:
        """Run one poll cycle and return what it did.

        Errors from the API or the cursor store propagate; the cursor is then
        left where it was.
        """
        cursor_before = self.cursor
        page = await self._fetch_page()
        aggregate = self.services.aggregator.aggregate(page.events)

        listing_ids = list(aggregate.deltas)
        results = await self._apply_deltas(listing_ids, aggregate.deltas)

        updated_listings = []
        skipped_listings = []
        for listing_id, listing in zip(listing_ids, results, strict=True):
            if listing is None:
                skipped_listings.append(listing_id)
                continue
            updated_listings.append(listing)
            self.services.reporter.report_listing_updated(listing)

        last_sequence_id = page.last_sequence_id
        if last_sequence_id is not None:
            self.services.cursor_store.save(last_sequence_id)
            self.cursor = last_sequence_id

        delay = (
            self.settings.poll_wait_seconds if page.is_full else self.settings.poll_idle_wait_seconds
        )
        report = PollCycleReport(
            cursor_before=cursor_before,
            cursor_after=self.cursor,
            events_fetched=len(page.events),
            full_page=page.is_full,
            delay_seconds=delay,
            updated_listings=updated_listings,
            skipped_listings=skipped_listings,
            ignored_events=aggregate.count(LikeChangeOutcome.IGNORED),
            ambiguous_events=aggregate.count(LikeChangeOutcome.AMBIGUOUS),
        )
        logger.debug(
            f"Poll cycle: events={report.events_fetched} updated={len(updated_listings)} "
            f"skipped={len(skipped_listings)} ignored={report.ignored_events} "
            f"ambiguous={report.ambiguous_events} cursor={cursor_before}->{self.cursor} "
            f"next_poll_in={delay}s"
        )
        return report

    def request_stop(self) -> None:
        """Ask the poll loop to stop before its next cycle."""
        self._stop_requested.set()

    async def _wait_or_stop(self, delay: float) -> None:
        """Sleep for delay seconds, returning early when a stop is requested."""
        try:
            await asyncio.wait_for(self._stop_requested.wait(), timeout=delay)
        except TimeoutError:
            pass

    async def run(self) -> None:
        """Poll until a stop is requested. Errors end the loop."""
        if self.cursor is not None:
            logger.info(f"Polling {self.settings.event_types} events after sequence ID {self.cursor}")
        else:
            logger.info(
                f"Polling {self.settings.event_types} events created since "
                f"{self.settings.start_time.isoformat()}"
            )

        while not self._stop_requested.is_set():
            report = await self.poll_once()
            await self._wait_or_stop(report.delay_seconds)

        logger.info(f"Event poller stopped at sequence ID {self.cursor}")

    async def start(self) -> None:
        """Start the event poller as a background task."""
        if self._task is not None and not self._task.done():
            logger.warning("Event poller already running")
            return

        self._stop_requested.clear()
        self._task = asyncio.create_task(self.run())
        logger.info("Started event poller task")

    async def stop(self) -> None:
        """Stop the event poller after the current cycle and wait for it."""
        self.request_stop()
        if self._task is not None:
            await self._task
            logger.info("Stopped event poller")
