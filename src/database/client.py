"""
Hear Me Out - Supabase Client

Builds the Supabase client from settings. Sessions never call this
directly; they receive a repository wrapping the client.
"""

import logging
from functools import lru_cache

from supabase import Client, create_client

from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """Create a Supabase client for the configured project."""
    logger.debug("Connecting to Supabase at %s", settings.supabase_url)
    return create_client(settings.supabase_url, settings.supabase_anon_key)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Process-wide client built from the cached settings."""
    return create_supabase_client(get_settings())
