# festivals/tasks.py
"""
Periodic festival rollover.

Scheduled daily through CELERY_BEAT_SCHEDULE; every festival load also
rolls forward on its own, so a missed run only delays the update.
"""
import logging

from celery import shared_task
from django.contrib.auth import get_user_model

from core.backends import get_backends
from core.identity import user_identity
from core.migration import MigrationCoordinator
from .domains import FESTIVALS

logger = logging.getLogger("studio.festivals")


def festival_store():
    remote, local = get_backends()
    migrator = MigrationCoordinator(remote, local) if remote is not None else None
    backend = remote if remote is not None else local
    return FESTIVALS.store_class(FESTIVALS, backend, local=local, migrator=migrator)


def rollover_for(user_id):
    """Load (and thereby roll forward) the festivals of one user."""
    store = festival_store()
    store.load(user_id)
    return len(store)


@shared_task
def rollover_festivals(user_id=None):
    """
    Roll festivals forward for ``user_id``, or for every active user.
    Returns the number of users processed.
    """
    if user_id:
        rollover_for(user_id)
        return 1

    processed = 0
    for user in get_user_model().objects.filter(is_active=True).iterator():
        rollover_for(user_identity(user))
        processed += 1
    logger.info(f"Festival rollover done for {processed} user(s)")
    return processed
