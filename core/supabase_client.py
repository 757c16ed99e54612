# core/supabase_client.py
# Supabase client for the remote relational backend

import os
import logging

from supabase import create_client

logger = logging.getLogger("studio.sync")

_supabase_client = None


def get_supabase_client():
    """
    Get the Supabase client instance (singleton pattern).
    Uses service_role key; rows are filtered by owner_id in every query.
    """
    global _supabase_client

    if _supabase_client is None:
        url = os.environ.get("SUPABASE_URL")
        key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

        if not url or not key:
            logger.warning("Supabase credentials not configured")
            return None

        try:
            _supabase_client = create_client(url, key)
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            return None
        logger.info("Supabase client initialized")

    return _supabase_client


def reset_supabase_client():
    """Forget the cached client (credentials rotated, tests)."""
    global _supabase_client
    _supabase_client = None
