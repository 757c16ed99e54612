# core/domains.py
"""
Table-driven description of every data domain.

A ``Domain`` tells the generic store and the backends everything that differs
between entity families: where the legacy on-device payload lives, which
remote table and ORM model hold the rows, how fields are typed, which fields
are optional, and how values written by older clients are upgraded.
"""
import copy
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .codecs import CONVERTERS, camel_to_snake, snake_to_camel

SCOPE_USER = "user"
SCOPE_PROJECT = "project"


@dataclass(frozen=True)
class Domain:
    name: str
    storage_key: str
    table: str
    model: str
    fields: Tuple[str, ...]
    scope: str = SCOPE_USER
    # At most one record per project (directors)
    single: bool = False
    types: Dict[str, str] = field(default_factory=dict)
    defaults: Dict[str, object] = field(default_factory=dict)
    # Optional field -> value written to the remote row when it is unset
    optional: Dict[str, object] = field(default_factory=dict)
    # Legacy camelCase key -> field name, when the name changed
    aliases: Dict[str, str] = field(default_factory=dict)
    # field -> {legacy value: current value}
    value_maps: Dict[str, Dict[str, str]] = field(default_factory=dict)
    store_class: Optional[type] = None

    @property
    def project_scoped(self) -> bool:
        return self.scope == SCOPE_PROJECT

    @property
    def columns(self) -> Tuple[str, ...]:
        if self.project_scoped:
            return ("id", "project_id") + self.fields
        return ("id",) + self.fields

    # --- decoding -----------------------------------------------------

    def coerce(self, values: dict) -> dict:
        """Convert the typed fields present in ``values``; other keys pass through."""
        out = dict(values)
        for name, kind in self.types.items():
            if name in out:
                out[name] = CONVERTERS[kind](out[name])
        for name, mapping in self.value_maps.items():
            value = out.get(name)
            if isinstance(value, list):
                out[name] = [mapping.get(v, v) for v in value]
            elif value in mapping:
                out[name] = mapping[value]
        return out

    def decode(self, row: dict) -> dict:
        """
        Build an in-memory record from a backend row.

        Unknown columns (owner ids, surrogate keys) are dropped, defaults fill
        missing required values and unset optional fields are omitted.
        """
        record = {key: row[key] for key in self.columns if key in row}
        for name, default in self.defaults.items():
            if record.get(name) in (None, ""):
                record[name] = copy.deepcopy(default)
        for name, kind in self.types.items():
            if kind == "list" and record.get(name) is None:
                record[name] = []
        record = self.coerce(record)
        for name in self.optional:
            if name in record and record[name] in (None, "", []):
                del record[name]
        return record

    def from_legacy(self, raw: dict, project_id=None) -> dict:
        """Decode one camelCase record from the on-device payload."""
        renamed = {}
        for key, value in raw.items():
            renamed[self.aliases.get(key, camel_to_snake(key))] = value
        if self.project_scoped and project_id is not None:
            renamed["project_id"] = project_id
        return self.decode(renamed)

    # --- encoding -----------------------------------------------------

    def to_legacy(self, record: dict) -> dict:
        reverse = {name: key for key, name in self.aliases.items()}
        return {
            reverse.get(name, snake_to_camel(name)): value
            for name, value in record.items()
            if name in self.columns
        }

    def to_row(self, record: dict, owner_id: str) -> dict:
        """Flatten a record into a remote row owned by ``owner_id``."""
        row = {"owner_id": owner_id}
        for name in self.columns:
            row[name] = self._column_value(name, record.get(name))
        return row

    def _column_value(self, name, value):
        if value is not None:
            return value
        if name in self.optional:
            return copy.deepcopy(self.optional[name])
        if self.types.get(name) == "list":
            return []
        return None

    def to_row_fields(self, fields: dict) -> dict:
        """Restrict a partial update to writable columns."""
        row = {}
        for name, value in fields.items():
            if name not in self.fields:
                continue
            row[name] = self._column_value(name, value)
        return row


class DomainRegistry:
    """Every domain known to the workspace, in registration order."""

    def __init__(self):
        self._domains = {}

    def register(self, domain: Domain) -> Domain:
        if domain.name in self._domains:
            raise ValueError(f"Domain already registered: {domain.name}")
        self._domains[domain.name] = domain
        return domain

    def get(self, name: str) -> Domain:
        return self._domains[name]

    def __contains__(self, name):
        return name in self._domains

    def __iter__(self):
        return iter(list(self._domains.values()))

    def __len__(self):
        return len(self._domains)


registry = DomainRegistry()
