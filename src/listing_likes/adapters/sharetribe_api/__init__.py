"""Sharetribe Integration API adapter."""

from listing_likes.adapters.sharetribe_api.errors import MarketplaceApiError
from listing_likes.adapters.sharetribe_api.integration_client import SharetribeIntegrationClient

__all__ = ["MarketplaceApiError", "SharetribeIntegrationClient"]
