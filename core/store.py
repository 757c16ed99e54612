# core/store.py
"""
Generic domain store.

A store owns the in-memory collection of one domain for the active identity.
Reads never touch the backend; every mutation is written through to the
backend first and only applied in memory once the write succeeded, so a
failed write leaves the collection exactly as it was.
"""
import logging
import uuid
from typing import Callable, List, Optional

from .exceptions import SyncError

logger = logging.getLogger("studio.sync")

Record = dict


def new_id() -> str:
    return uuid.uuid4().hex


class DomainStore:
    def __init__(self, domain, backend, local=None, migrator=None):
        self.domain = domain
        self.backend = backend
        self.local = local if local is not None else backend
        self.migrator = migrator
        self.user_id = None
        self.loading = False
        self.reset()

    def __repr__(self):
        return f"<{type(self).__name__} {self.domain.name} user={self.user_id}>"

    # --- lifecycle ------------------------------------------------------

    def reset(self):
        self._items: List[Record] = self.default_records()

    def default_records(self) -> List[Record]:
        return []

    def target(self):
        # Anonymous sessions never reach a remote store
        return self.backend if self.user_id else self.local

    def load(self, user_id):
        """
        Replace the collection with the records of ``user_id``.

        ``None`` resets to the empty/default collection. Read failures are
        logged and leave the store usable with no data.
        """
        self.user_id = user_id
        if not user_id:
            self.reset()
            return
        self.loading = True
        try:
            if self.migrator is not None:
                self.migrator.migrate_if_needed(user_id, self.domain)
            try:
                records = self.target().select_all(self.domain, user_id)
            except SyncError as e:
                logger.error(f"Failed to load {self.domain.name} for user {user_id}: {e}")
                records = None
            self._populate(self.loaded(records))
        finally:
            self.loading = False

    def loaded(self, records) -> List[Record]:
        """Hook over freshly read records; ``None`` means the read failed."""
        return records or []

    # --- reads ----------------------------------------------------------

    def order(self, records: List[Record]) -> List[Record]:
        return records

    def all(self) -> List[Record]:
        return self.order(list(self._records()))

    def get(self, record_id) -> Optional[Record]:
        return self.find_by(lambda r: r.get("id") == record_id)

    def find_by(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        for record in self._records():
            if predicate(record):
                return record
        return None

    def filter(self, predicate: Callable[[Record], bool]) -> List[Record]:
        return self.order([r for r in self._records() if predicate(r)])

    def __len__(self):
        return len(self._records())

    def __iter__(self):
        return iter(self.all())

    # --- writes ---------------------------------------------------------

    def prepare(self, record: Record) -> Record:
        """Hook applied to a new record before it is written."""
        return record

    def prepare_update(self, fields: dict) -> dict:
        return fields

    def create(self, record: Record) -> Record:
        record = self.prepare(dict(record))
        if not record.get("id"):
            record["id"] = new_id()
        record = self.domain.decode(record)
        saved = self.target().insert(self.domain, self.user_id, [record])
        created = saved[0] if saved else record
        self._append(created)
        logger.debug(f"Created {self.domain.name} {created['id']}")
        return created

    def update(self, record_id, fields: dict) -> Optional[Record]:
        fields = self.prepare_update({
            key: value for key, value in fields.items() if key not in ("id", "project_id")
        })
        fields = self.domain.coerce(fields)
        stored = self.target().update(self.domain, self.user_id, record_id, fields)
        if stored is None:
            return None
        current = self.get(record_id)
        if current is None:
            return None
        merged = {**current, **stored}
        self._replace(record_id, merged)
        return merged

    def remove(self, record_id) -> bool:
        deleted = self.target().delete(self.domain, self.user_id, record_id)
        self._discard(record_id)
        return deleted

    # --- collection primitives -----------------------------------------

    def _records(self) -> List[Record]:
        return self._items

    def _populate(self, records):
        self._items = list(records)

    def _append(self, record):
        self._items.append(record)

    def _replace(self, record_id, record):
        self._items = [record if r.get("id") == record_id else r for r in self._items]

    def _discard(self, record_id):
        self._items = [r for r in self._items if r.get("id") != record_id]


class ProjectScopedStore(DomainStore):
    """
    Store whose records belong to a project.

    The collection is partitioned by project id; every known project has a
    partition, possibly empty.
    """

    def reset(self):
        self._partitions = {}

    def _records(self):
        return [r for items in self._partitions.values() for r in items]

    def _populate(self, records):
        partitions = {}
        for record in records:
            partitions.setdefault(record.get("project_id"), []).append(record)
        self._partitions = partitions

    def _append(self, record):
        self._partitions.setdefault(record.get("project_id"), []).append(record)

    def _replace(self, record_id, record):
        for project_id, items in self._partitions.items():
            self._partitions[project_id] = [
                record if r.get("id") == record_id else r for r in items
            ]

    def _discard(self, record_id):
        for project_id, items in self._partitions.items():
            self._partitions[project_id] = [r for r in items if r.get("id") != record_id]

    def project_ids(self):
        return list(self._partitions)

    def for_project(self, project_id) -> List[Record]:
        return self.order(list(self._partitions.get(project_id, [])))

    def has_partition(self, project_id) -> bool:
        return project_id in self._partitions

    def ensure_partition(self, project_id):
        self._partitions.setdefault(project_id, [])

    def create(self, record: Record) -> Record:
        if not record.get("project_id"):
            raise ValueError(f"{self.domain.name} records need a project_id")
        return super().create(record)

    def seed(self, project_id):
        """Persist and expose an empty partition for a new project."""
        try:
            self.target().seed(self.domain, self.user_id, project_id)
        except SyncError as e:
            logger.warning(f"Could not persist empty {self.domain.name} for project {project_id}: {e}")
        self.ensure_partition(project_id)

    def purge(self, project_id) -> int:
        """Delete every record of ``project_id`` and drop its partition."""
        removed = self.target().delete_where(self.domain, self.user_id, project_id)
        self._partitions.pop(project_id, None)
        return removed
