"""
Configuration module for the product search service.

Usage:
    from config import get_settings

    settings = get_settings()
    search_url = settings.search_url
"""

from config.settings import Settings, get_settings, get_settings_for_testing

__all__ = ["Settings", "get_settings", "get_settings_for_testing"]
