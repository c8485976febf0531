"""
FastAPI dependencies for dependency injection.

This module provides the single Shortener store that is injected into
every route. Handlers never reach for a module global; tests swap the
store through `app.dependency_overrides[get_shortener]`.
"""

from functools import lru_cache

from shorten_app.config import settings
from shorten_app.services.shortener import Shortener


@lru_cache()
def get_shortener() -> Shortener:
    """
    Get the Shortener store (singleton).

    @lru_cache ensures this is created only once per process.

    Returns:
        Shortener building short links on settings.base_url
    """
    return Shortener(domain=settings.base_url)
