# core/migration.py
"""
One-time copy of on-device data into the remote backend.

Completion is detected by data presence: as soon as the remote store holds
at least one row of a domain for a user, that domain counts as migrated for
good, even if the device copy changes later or the remote rows are deleted
afterwards. There is no separate "migrated" marker.
"""
import logging

from .exceptions import SyncError

logger = logging.getLogger("studio.sync.migration")


class MigrationCoordinator:
    def __init__(self, remote, local):
        self.remote = remote
        self.local = local

    def migrate_if_needed(self, user_id, domain) -> int:
        """
        Copy the legacy records of ``domain`` to the remote store if it has none.

        Returns the number of records copied. Never raises: a failed
        migration is logged and the caller goes on loading whatever the
        remote store holds.
        """
        if not user_id or self.remote is self.local:
            return 0
        try:
            if self.remote.exists(domain, user_id):
                return 0
            records = self.local.select_all(domain, user_id)
            if not records:
                return 0
            self.remote.insert(domain, user_id, records)
        except SyncError as e:
            logger.error(f"Migration of {domain.name} for user {user_id} failed: {e}")
            return 0

        logger.info(f"Migrated {len(records)} {domain.name} record(s) for user {user_id}")
        return len(records)

    def migrate_all(self, user_id, domains) -> dict:
        return {domain.name: self.migrate_if_needed(user_id, domain) for domain in domains}
