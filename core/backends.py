# core/backends.py
"""
Storage backends behind the domain stores.

Every backend speaks records (decoded dicts) and is scoped by the owning
user and, for project-scoped domains, by project:

    select_all(domain, user_id, project_id=None) -> [record]
    insert(domain, user_id, records)             -> [record]
    update(domain, user_id, record_id, fields)   -> record | None
    delete(domain, user_id, record_id)           -> bool
    delete_where(domain, user_id, project_id)    -> int
    exists(domain, user_id)                      -> bool
    seed(domain, user_id, project_id)            -> None

Three implementations are interchangeable: ``LocalBackend`` keeps whole
collections as JSON text in a key/value store (the legacy on-device layout),
``OrmBackend`` keeps one row per record in the Django database and
``SupabaseBackend`` does the same through the Supabase REST API.
"""
import json
import logging

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, transaction

from .codecs import dumps, jsonable
from .exceptions import BackendError, CorruptPayload, IdentityRequired
from .storage import get_local_store, scoped_key
from .supabase_client import get_supabase_client

logger = logging.getLogger("studio.sync")

_DECODE_ERRORS = (ValueError, TypeError, ArithmeticError)


class StorageBackend:
    name = "base"

    def select_all(self, domain, user_id, project_id=None):
        raise NotImplementedError

    def insert(self, domain, user_id, records):
        raise NotImplementedError

    def update(self, domain, user_id, record_id, fields):
        raise NotImplementedError

    def delete(self, domain, user_id, record_id):
        raise NotImplementedError

    def delete_where(self, domain, user_id, project_id):
        raise NotImplementedError

    def exists(self, domain, user_id):
        raise NotImplementedError

    def seed(self, domain, user_id, project_id):
        """Create an empty partition for ``project_id``; row stores need none."""

    def _decode_rows(self, domain, rows):
        try:
            return [domain.decode(row) for row in rows]
        except _DECODE_ERRORS as e:
            raise CorruptPayload(f"Malformed {domain.name} row from {self.name}: {e}") from e


# -------------------------------------------------------------------
# LOCAL (on-device key/value)
# -------------------------------------------------------------------
class LocalBackend(StorageBackend):
    """
    Whole-collection JSON payloads under ``scoped_key(domain.storage_key, user)``.

    User-scoped domains are stored as a list of records, project-scoped ones
    as ``{project_id: [records]}`` (``{project_id: record}`` for single-record
    domains). Keys are camelCase, as older clients wrote them.
    """
    name = "local"

    def __init__(self, store=None):
        self.store = store if store is not None else get_local_store()

    def _key(self, domain, user_id):
        return scoped_key(domain.storage_key, user_id)

    def _load(self, domain, user_id):
        """Return ``{partition: [raw dicts]}``; user-scoped data uses partition None."""
        text = self.store.get(self._key(domain, user_id))
        if text is None:
            return {}
        try:
            data = json.loads(text)
        except ValueError as e:
            raise CorruptPayload(f"Invalid JSON under {self._key(domain, user_id)}: {e}") from e

        if domain.project_scoped:
            if not isinstance(data, dict):
                raise CorruptPayload(f"Expected an object under {self._key(domain, user_id)}")
            partitions = {}
            for project_id, items in data.items():
                if items is None:
                    items = []
                elif isinstance(items, dict):
                    items = [items]
                partitions[project_id] = items
        else:
            if not isinstance(data, list):
                raise CorruptPayload(f"Expected a list under {self._key(domain, user_id)}")
            partitions = {None: data}

        for items in partitions.values():
            if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
                raise CorruptPayload(f"Unexpected record shape under {self._key(domain, user_id)}")
        return partitions

    def _load_for_write(self, domain, user_id):
        try:
            return self._load(domain, user_id)
        except CorruptPayload as e:
            logger.warning(f"Discarding unreadable local {domain.name} payload: {e}")
            return {}

    def _save(self, domain, user_id, partitions):
        if domain.project_scoped:
            data = {}
            for project_id, items in partitions.items():
                if domain.single:
                    if items:
                        data[project_id] = items[-1]
                else:
                    data[project_id] = items
        else:
            data = partitions.get(None, [])
        self.store.set(self._key(domain, user_id), dumps(data))

    def _partition_of(self, domain, record):
        return record.get("project_id") if domain.project_scoped else None

    def select_all(self, domain, user_id, project_id=None):
        partitions = self._load(domain, user_id)
        records = []
        try:
            for partition, items in partitions.items():
                if project_id is not None and partition != project_id:
                    continue
                records.extend(domain.from_legacy(item, partition) for item in items)
        except _DECODE_ERRORS as e:
            raise CorruptPayload(f"Malformed local {domain.name} record: {e}") from e
        return records

    def insert(self, domain, user_id, records):
        partitions = self._load_for_write(domain, user_id)
        stored = []
        for record in records:
            partition = self._partition_of(domain, record)
            if domain.single:
                partitions[partition] = []
            partitions.setdefault(partition, []).append(domain.to_legacy(record))
            stored.append(domain.decode(record))
        self._save(domain, user_id, partitions)
        return stored

    def update(self, domain, user_id, record_id, fields):
        partitions = self._load_for_write(domain, user_id)
        for partition, items in partitions.items():
            for index, item in enumerate(items):
                if item.get("id") != record_id:
                    continue
                merged = {**item, **domain.to_legacy(fields)}
                items[index] = merged
                self._save(domain, user_id, partitions)
                return domain.from_legacy(merged, partition)
        return None

    def delete(self, domain, user_id, record_id):
        partitions = self._load_for_write(domain, user_id)
        for items in partitions.values():
            for index, item in enumerate(items):
                if item.get("id") == record_id:
                    del items[index]
                    self._save(domain, user_id, partitions)
                    return True
        return False

    def delete_where(self, domain, user_id, project_id):
        partitions = self._load_for_write(domain, user_id)
        removed = partitions.pop(project_id, None)
        if removed is None:
            return 0
        self._save(domain, user_id, partitions)
        return len(removed)

    def exists(self, domain, user_id):
        return any(self._load(domain, user_id).values())

    def seed(self, domain, user_id, project_id):
        if not domain.project_scoped or domain.single:
            return
        partitions = self._load_for_write(domain, user_id)
        if project_id not in partitions:
            partitions[project_id] = []
            self._save(domain, user_id, partitions)


# -------------------------------------------------------------------
# ORM (Django database)
# -------------------------------------------------------------------
class OrmBackend(StorageBackend):
    """
    Row-per-record storage in the Django database.

    Models carry a surrogate primary key; the record id lives in
    ``record_id``, unique per owner.
    """
    name = "orm"

    def _model(self, domain):
        return apps.get_model(domain.model)

    def _queryset(self, domain, user_id):
        if not user_id:
            raise IdentityRequired(f"{domain.name}: the database backend needs a user")
        return self._model(domain).objects.filter(owner_id=user_id)

    @staticmethod
    def _to_model(row):
        row = dict(row)
        row["record_id"] = row.pop("id")
        return row

    def _fetch(self, queryset, domain):
        columns = ["record_id"] + [c for c in domain.columns if c != "id"]
        rows = []
        for values in queryset.values(*columns):
            values["id"] = values.pop("record_id")
            rows.append(values)
        return self._decode_rows(domain, rows)

    def select_all(self, domain, user_id, project_id=None):
        try:
            queryset = self._queryset(domain, user_id)
            if project_id is not None:
                queryset = queryset.filter(project_id=project_id)
            return self._fetch(queryset.order_by("pk"), domain)
        except DatabaseError as e:
            raise BackendError(f"Failed to read {domain.name}: {e}") from e

    def insert(self, domain, user_id, records):
        model = self._model(domain)
        rows = [self._to_model(domain.to_row(r, user_id)) for r in records]
        try:
            with transaction.atomic():
                model.objects.bulk_create([model(**row) for row in rows])
        except DatabaseError as e:
            raise BackendError(f"Failed to insert {domain.name}: {e}") from e
        return [domain.decode(r) for r in records]

    def update(self, domain, user_id, record_id, fields):
        changes = domain.to_row_fields(fields)
        try:
            queryset = self._queryset(domain, user_id).filter(record_id=record_id)
            if changes:
                updated = queryset.update(**changes)
                if not updated:
                    return None
            rows = self._fetch(queryset, domain)
        except DatabaseError as e:
            raise BackendError(f"Failed to update {domain.name} {record_id}: {e}") from e
        return rows[0] if rows else None

    def delete(self, domain, user_id, record_id):
        try:
            deleted, _ = self._queryset(domain, user_id).filter(record_id=record_id).delete()
        except DatabaseError as e:
            raise BackendError(f"Failed to delete {domain.name} {record_id}: {e}") from e
        return deleted > 0

    def delete_where(self, domain, user_id, project_id):
        try:
            deleted, _ = self._queryset(domain, user_id).filter(project_id=project_id).delete()
        except DatabaseError as e:
            raise BackendError(f"Failed to purge {domain.name} for project {project_id}: {e}") from e
        return deleted

    def exists(self, domain, user_id):
        try:
            return self._queryset(domain, user_id).exists()
        except DatabaseError as e:
            raise BackendError(f"Failed to query {domain.name}: {e}") from e


# -------------------------------------------------------------------
# SUPABASE (PostgREST tables)
# -------------------------------------------------------------------
class SupabaseBackend(StorageBackend):
    """
    Row-per-record storage in Supabase tables named after ``domain.table``.

    Every table has ``owner_id`` and ``id`` text columns (plus ``project_id``
    for project-scoped domains); filtering happens server side.
    """
    name = "supabase"

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        client = self._client or get_supabase_client()
        if client is None:
            raise BackendError("Supabase client is not configured")
        return client

    def _table(self, domain, user_id):
        if not user_id:
            raise IdentityRequired(f"{domain.name}: the Supabase backend needs a user")
        return self.client.table(domain.table)

    def _execute(self, query, action, domain):
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Supabase {action} on {domain.table} failed: {e}")
            raise BackendError(f"Supabase {action} on {domain.table} failed: {e}") from e
        return response.data or []

    def select_all(self, domain, user_id, project_id=None):
        query = self._table(domain, user_id).select("*").eq("owner_id", user_id)
        if project_id is not None:
            query = query.eq("project_id", project_id)
        return self._decode_rows(domain, self._execute(query, "select", domain))

    def insert(self, domain, user_id, records):
        rows = [jsonable(domain.to_row(r, user_id)) for r in records]
        query = self._table(domain, user_id).insert(rows)
        return self._decode_rows(domain, self._execute(query, "insert", domain))

    def update(self, domain, user_id, record_id, fields):
        changes = jsonable(domain.to_row_fields(fields))
        query = (
            self._table(domain, user_id)
            .update(changes)
            .eq("owner_id", user_id)
            .eq("id", record_id)
        )
        rows = self._decode_rows(domain, self._execute(query, "update", domain))
        return rows[0] if rows else None

    def delete(self, domain, user_id, record_id):
        query = self._table(domain, user_id).delete().eq("owner_id", user_id).eq("id", record_id)
        return bool(self._execute(query, "delete", domain))

    def delete_where(self, domain, user_id, project_id):
        query = (
            self._table(domain, user_id)
            .delete()
            .eq("owner_id", user_id)
            .eq("project_id", project_id)
        )
        return len(self._execute(query, "delete", domain))

    def exists(self, domain, user_id):
        query = self._table(domain, user_id).select("id").eq("owner_id", user_id).limit(1)
        return bool(self._execute(query, "select", domain))


REMOTE_BACKENDS = {
    "orm": OrmBackend,
    "supabase": SupabaseBackend,
}


def get_backends():
    """
    Return ``(remote, local)`` as configured by ``SYNC["REMOTE_BACKEND"]``.

    ``remote`` is None in local-only mode.
    """
    local = LocalBackend()
    name = settings.SYNC.get("REMOTE_BACKEND") or ""
    if not name:
        return None, local
    try:
        return REMOTE_BACKENDS[name](), local
    except KeyError:
        raise ImproperlyConfigured(f"Unknown SYNC REMOTE_BACKEND: {name!r}")
