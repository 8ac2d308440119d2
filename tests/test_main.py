"""Tests for the application entry point."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from listing_likes.adapters.config import AppConfig
from listing_likes.main import main, run


def test_main_exits_when_credentials_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given no client credentials, when starting, then the process exits with status 1."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LIKE_LISTING_CLIENT_ID", raising=False)
    monkeypatch.delenv("LIKE_LISTING_CLIENT_SECRET", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1


def test_main_exits_on_invalid_configuration(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given an invalid rate limit profile, when starting, then the process exits with status 1."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RATE_LIMIT_PROFILE", "turbo")

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_run_resumes_from_stored_cursor(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a stored cursor, when running, then the poller resumes after it."""
    state_file = tmp_path / "likes.state"
    state_file.write_text("77", encoding="utf-8")
    config = AppConfig.for_testing(
        like_listing_client_id="id",
        like_listing_client_secret="secret",
        state_file=str(state_file),
        poll_wait_ms=100,
        poll_idle_wait_ms=5000,
    )
    poller = MagicMock()
    poller.run = AsyncMock()

    with (
        patch("listing_likes.main.LikeEventPoller", return_value=poller) as poller_cls,
        patch("listing_likes.main._install_signal_handlers"),
    ):
        await run(config)

    _services, settings = poller_cls.call_args.args
    assert poller_cls.call_args.kwargs["cursor"] == 77
    assert settings.poll_wait_seconds == 0.1
    assert settings.poll_idle_wait_seconds == 5.0
    assert settings.event_types == "user/updated"
    poller.run.assert_awaited_once()
    assert "Resuming event polling from last seen event with sequence ID 77" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_starts_fresh_without_state(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given no state file, when running, then polling starts from the current time."""
    config = AppConfig.for_testing(
        like_listing_client_id="id",
        like_listing_client_secret="secret",
        state_file=str(tmp_path / "missing.state"),
    )
    poller = MagicMock()
    poller.run = AsyncMock()

    with (
        patch("listing_likes.main.LikeEventPoller", return_value=poller) as poller_cls,
        patch("listing_likes.main._install_signal_handlers"),
    ):
        await run(config)

    assert poller_cls.call_args.kwargs["cursor"] is None
    assert "Starting event polling from current time." in capsys.readouterr().out
