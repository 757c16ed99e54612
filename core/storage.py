# core/storage.py
# On-device key/value storage, namespaced per user

import copy
import json
import logging
from pathlib import Path
from urllib.parse import quote

from django.conf import settings

from .exceptions import BackendError

logger = logging.getLogger("studio.sync")

# Every logical key a user may own on the device
USER_KEYS = [
    "projects",
    "collaborators",
    "budgets",
    "scripts",
    "documents",
    "directors",
    "visitors",
    "tasks",
    "globalContacts",
    "festivals",
    "calendarEvents",
    "customCategories",
    "customSubcategories",
    "customStatuses",
    "customCollaboratorCategories",
    "readNotifications",
]


def scoped_key(logical_key: str, user_id) -> str:
    """
    Storage key of ``logical_key`` for ``user_id``.

    Anonymous (local-only) sessions use the bare logical key.
    """
    if not user_id:
        return logical_key
    return f"{logical_key}_{user_id}"


class MemoryKeyValueStore:
    """Process-local store, used by tests and throwaway sessions."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class FileKeyValueStore:
    """
    One UTF-8 text file per key under ``root``.

    Values are opaque strings; the backend decides how to encode them.
    """

    def __init__(self, root):
        self.root = Path(root)

    def _path(self, key):
        return self.root / f"{quote(key, safe='')}.json"

    def get(self, key):
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise BackendError(f"Cannot read local key {key}: {e}") from e

    def set(self, key, value):
        path = self._path(key)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            tmp.write_text(value, encoding="utf-8")
            tmp.replace(path)
        except OSError as e:
            raise BackendError(f"Cannot write local key {key}: {e}") from e

    def remove(self, key):
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise BackendError(f"Cannot remove local key {key}: {e}") from e


def get_local_store():
    return FileKeyValueStore(settings.SYNC["LOCAL_STORE_DIR"])


def clear_user_data(store, user_id):
    """Remove every key the user owns on the device."""
    for key in USER_KEYS:
        store.remove(scoped_key(key, user_id))
    logger.info(f"Cleared local data for user {user_id}")


class DeviceSetting:
    """
    A JSON value kept only on the device, under the user's scoped key.

    Unreadable values are logged and read back as ``default``.
    """

    def __init__(self, logical_key, user_id, default, store=None):
        self.key = scoped_key(logical_key, user_id)
        self.default = default
        self.store = store if store is not None else get_local_store()

    def get(self):
        text = self.store.get(self.key)
        if text is None:
            return copy.deepcopy(self.default)
        try:
            return json.loads(text)
        except ValueError:
            logger.warning(f"Ignoring unreadable value under {self.key}")
            return copy.deepcopy(self.default)

    def set(self, value):
        self.store.set(self.key, json.dumps(value))
