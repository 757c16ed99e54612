# contacts/domains.py
from core.constants import DOMAIN_CONTACTS, LEGACY_TABS
from core.domains import Domain, registry
from projects.domains import CONTACT_FIELDS, CONTACT_OPTIONAL, CONTACT_TYPES

from .stores import ContactStore

CONTACTS = registry.register(Domain(
    name=DOMAIN_CONTACTS,
    storage_key="globalContacts",
    table="global_contacts",
    model="contacts.Contact",
    fields=CONTACT_FIELDS,
    types=CONTACT_TYPES,
    defaults={"category": "studios"},
    optional=CONTACT_OPTIONAL,
    aliases={"language": "languages"},
    value_maps={"allowed_tabs": LEGACY_TABS},
    store_class=ContactStore,
))
