"""Configuration adapters."""

from listing_likes.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
