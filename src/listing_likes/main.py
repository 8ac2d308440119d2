"""Main entry point for the listing likes event poller."""

import asyncio
import logging
import signal
import sys
from datetime import UTC, datetime

import aiohttp
from pydantic import ValidationError

from listing_likes.adapters.api_rate_limiter import build_rate_limiters
from listing_likes.adapters.config import AppConfig
from listing_likes.adapters.console import ConsoleReporter
from listing_likes.adapters.pollers import LikeEventPoller, LikeEventPollerServices, PollerSettings
from listing_likes.adapters.sharetribe_api import SharetribeIntegrationClient
from listing_likes.adapters.state import FileCursorStore
from listing_likes.application.services import LikeAggregationService, LikeCountService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _install_signal_handlers(poller: LikeEventPoller) -> None:
    """Stop the poller between cycles on SIGINT/SIGTERM."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, poller.request_stop)
        except NotImplementedError:
            # Not supported on this platform; KeyboardInterrupt still ends the process
            logger.debug(f"Signal handler for {sig.name} not supported")


async def run(config: AppConfig) -> None:
    """Wire the components together and poll until stopped."""
    # Captured once: with no stored cursor, polling starts at events created from now on
    start_time = datetime.now(UTC)

    cursor_store = FileCursorStore(config.state_file)
    cursor = cursor_store.load()

    reporter = ConsoleReporter()
    reporter.report_startup(cursor)

    rate_limiters = build_rate_limiters(config.rate_limit_profile)

    async with aiohttp.ClientSession() as session:
        marketplace_api = SharetribeIntegrationClient(session, config, rate_limiters)
        services = LikeEventPollerServices(
            marketplace_api=marketplace_api,
            aggregator=LikeAggregationService(),
            like_count_updater=LikeCountService(marketplace_api),
            cursor_store=cursor_store,
            reporter=reporter,
        )
        settings = PollerSettings(
            start_time=start_time,
            event_types=config.event_types,
            poll_wait_seconds=config.poll_wait_seconds,
            poll_idle_wait_seconds=config.poll_idle_wait_seconds,
        )
        poller = LikeEventPoller(services, settings, cursor=cursor)
        _install_signal_handlers(poller)

        await poller.run()


def main() -> None:
    """Application entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)

    try:
        config.require_credentials()
    except ValueError as e:
        logger.error(str(e))
        logger.error("Set them in the environment or in a .env file.")
        sys.exit(1)

    logger.info(
        f"Starting listing likes poller: base_url={config.sharetribe_integration_base_url} "
        f"profile={config.rate_limit_profile} state_file={config.state_file}"
    )
    asyncio.run(run(config))


if __name__ == "__main__":
    main()
