import copy
from types import SimpleNamespace

from core.backends import LocalBackend
from core.session import Workspace
from core.storage import MemoryKeyValueStore


def build_workspace(remote=None, local_store=None, identity=None, user_id=None):
    """Workspace over an in-memory device store and an optional remote backend."""
    local = LocalBackend(local_store if local_store is not None else MemoryKeyValueStore())
    workspace = Workspace.build(remote, local, identity=identity)
    if user_id:
        workspace.switch(user_id)
    return workspace


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.action = "select"
        self.payload = None
        self.filters = []
        self.max_rows = None

    def select(self, *columns):
        self.action = "select"
        return self

    def insert(self, rows):
        self.action, self.payload = "insert", rows
        return self

    def update(self, changes):
        self.action, self.payload = "update", changes
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def limit(self, count):
        self.max_rows = count
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        if self.client.fail:
            raise ConnectionError("supabase unreachable")

        rows = self.client.tables.setdefault(self.table, [])
        if self.action == "insert":
            rows.extend(copy.deepcopy(self.payload))
            data = copy.deepcopy(self.payload)
        elif self.action == "update":
            data = []
            for row in rows:
                if self._matches(row):
                    row.update(self.payload)
                    data.append(dict(row))
        elif self.action == "delete":
            data = [dict(r) for r in rows if self._matches(r)]
            rows[:] = [r for r in rows if not self._matches(r)]
        else:
            data = [dict(r) for r in rows if self._matches(r)]
            if self.max_rows is not None:
                data = data[:self.max_rows]
        return SimpleNamespace(data=data)


class FakeSupabase:
    """Just enough of the supabase-py query builder for the backend."""

    def __init__(self):
        self.tables = {}
        self.fail = False

    def table(self, name):
        return FakeQuery(self, name)
