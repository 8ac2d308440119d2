"""Tests for the like count service."""

import pytest

from listing_likes.application.services import LikeCountService
from tests.fakes import FakeMarketplaceApi


@pytest.mark.asyncio
async def test_apply_delta_adds_to_existing_likes() -> None:
    """Given a listing with 5 likes, when applying +2, then it is updated to 7."""
    api = FakeMarketplaceApi(listings={"L1": {"likes": 5}})

    listing = await LikeCountService(api).apply_delta("L1", 2)

    assert listing is not None
    assert listing.likes == 7
    assert api.updates == [("L1", {"likes": 7})]


@pytest.mark.asyncio
async def test_apply_delta_treats_missing_likes_as_zero() -> None:
    """Given a listing without a likes field, when applying +1, then it has 1 like."""
    api = FakeMarketplaceApi(listings={"L1": {"category": "bikes"}})

    listing = await LikeCountService(api).apply_delta("L1", 1)

    assert listing is not None
    assert listing.public_data == {"category": "bikes", "likes": 1}


@pytest.mark.asyncio
async def test_apply_delta_subtracts() -> None:
    """Given a listing with 3 likes, when applying -1, then it has 2 likes."""
    api = FakeMarketplaceApi(listings={"L1": {"likes": 3}})

    listing = await LikeCountService(api).apply_delta("L1", -1)

    assert listing is not None
    assert listing.likes == 2


@pytest.mark.asyncio
async def test_apply_delta_returns_none_for_missing_listing() -> None:
    """Given a listing that does not exist, when applying a delta, then nothing is written."""
    api = FakeMarketplaceApi()

    listing = await LikeCountService(api).apply_delta("gone", 1)

    assert listing is None
    assert api.updates == []
