# contacts/stores.py
import logging

from core.store import DomainStore

logger = logging.getLogger("studio.contacts")

SEARCH_LIMIT = 5


def _same(a, b):
    return bool(a) and bool(b) and a.lower() == b.lower()


def _name(contact):
    return (contact.get("name") or "").strip().lower()


class ContactStore(DomainStore):
    """
    The global contact registry.

    A contact is identified by its email when both sides have one, and
    otherwise by its name, both case-insensitively.
    """

    def find_existing(self, contact):
        return self.find_by(
            lambda c: _same(c.get("email"), contact.get("email"))
            or _name(c) == _name(contact) != ""
        )

    def add_or_merge(self, contact):
        """Create the contact, or merge it into the one it duplicates."""
        fields = {k: v for k, v in contact.items() if k != "id"}
        existing = self.find_existing(fields)
        if existing is None:
            return self.create(fields), True
        logger.debug(f"Merging contact {fields.get('name')!r} into {existing['id']}")
        return self.update(existing["id"], fields), False

    def update_by_email(self, email, fields):
        """Apply ``fields`` to every contact with this email."""
        updated = []
        for contact in self.filter(lambda c: _same(c.get("email"), email)):
            record = self.update(contact["id"], fields)
            if record is not None:
                updated.append(record)
        return updated

    def find_by_name(self, name):
        name = name.strip().lower()
        return self.find_by(lambda c: _name(c) == name)

    def search_by_name(self, query, limit=SEARCH_LIMIT):
        """Contacts whose name contains ``query``; names starting with it come first."""
        query = query.strip().lower()
        if not query:
            return []
        matches = self.filter(lambda c: query in _name(c))
        matches.sort(key=lambda c: not _name(c).startswith(query))
        return matches[:limit]
