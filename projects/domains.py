# projects/domains.py
# Codecs of the project domain and everything keyed by a project id

from core.constants import (
    DOMAIN_BUDGETS,
    DOMAIN_COLLABORATORS,
    DOMAIN_DIRECTORS,
    DOMAIN_DOCUMENTS,
    DOMAIN_PROJECTS,
    DOMAIN_SCRIPTS,
    DOMAIN_TASKS,
    DOMAIN_VISITORS,
    LEGACY_TABS,
)
from core.domains import SCOPE_PROJECT, Domain, registry
from core.store import ProjectScopedStore

from .stores import (
    BudgetStore,
    DirectorStore,
    DocumentStore,
    ProjectStore,
    ScriptStore,
    TaskStore,
    VisitorStore,
)

# Fields shared by collaborators and the global contact registry
CONTACT_FIELDS = (
    "name",
    "category",
    "role",
    "email",
    "phone",
    "languages",
    "address",
    "website",
    "notes",
    "allergies",
    "has_driving_license",
    "is_visitor",
    "allowed_tabs",
)

CONTACT_OPTIONAL = {
    "role": "",
    "email": "",
    "phone": "",
    "languages": [],
    "address": "",
    "website": "",
    "notes": "",
    "allergies": "",
    "has_driving_license": None,
    "is_visitor": None,
    "allowed_tabs": [],
}

CONTACT_TYPES = {
    "languages": "list",
    "allowed_tabs": "list",
    "has_driving_license": "bool",
    "is_visitor": "bool",
}

PROJECTS = registry.register(Domain(
    name=DOMAIN_PROJECTS,
    storage_key="projects",
    table="projects",
    model="projects.Project",
    fields=(
        "title", "description", "status", "category", "subcategory",
        "region", "country", "created_at", "updated_at",
    ),
    types={"created_at": "datetime", "updated_at": "datetime"},
    defaults={
        "status": "pre-production",
        "category": "originals",
        "subcategory": "feature-film",
    },
    optional={"description": "", "region": "", "country": ""},
    value_maps={
        "status": {
            "pre-produccion": "pre-production",
            "produccion": "production",
            "post-produccion": "post-production",
            "completado": "completed",
        },
    },
    store_class=ProjectStore,
))

COLLABORATORS = registry.register(Domain(
    name=DOMAIN_COLLABORATORS,
    storage_key="collaborators",
    table="collaborators",
    model="projects.Collaborator",
    scope=SCOPE_PROJECT,
    fields=CONTACT_FIELDS,
    types=CONTACT_TYPES,
    defaults={"category": "studios"},
    optional=CONTACT_OPTIONAL,
    aliases={"language": "languages"},
    value_maps={"allowed_tabs": LEGACY_TABS},
    store_class=ProjectScopedStore,
))

BUDGETS = registry.register(Domain(
    name=DOMAIN_BUDGETS,
    storage_key="budgets",
    table="budget_items",
    model="projects.BudgetItem",
    scope=SCOPE_PROJECT,
    fields=("category", "description", "amount", "status"),
    types={"amount": "decimal"},
    defaults={"description": "", "amount": 0, "status": "pending"},
    value_maps={
        "status": {
            "aprobado": "approved",
            "pendiente": "pending",
            "rechazado": "rejected",
        },
    },
    store_class=BudgetStore,
))

SCRIPTS = registry.register(Domain(
    name=DOMAIN_SCRIPTS,
    storage_key="scripts",
    table="scripts",
    model="projects.Script",
    scope=SCOPE_PROJECT,
    fields=("title", "version", "last_modified", "content"),
    types={"last_modified": "datetime"},
    defaults={"version": ""},
    optional={"content": ""},
    store_class=ScriptStore,
))

DOCUMENTS = registry.register(Domain(
    name=DOMAIN_DOCUMENTS,
    storage_key="documents",
    table="documents",
    model="projects.Document",
    scope=SCOPE_PROJECT,
    fields=(
        "name", "type", "category", "uploaded_at", "size",
        "is_drive_file", "drive_folder_id",
    ),
    types={"uploaded_at": "datetime", "size": "int", "is_drive_file": "bool"},
    defaults={"type": "", "size": 0},
    optional={"category": "", "is_drive_file": None, "drive_folder_id": ""},
    store_class=DocumentStore,
))

DIRECTORS = registry.register(Domain(
    name=DOMAIN_DIRECTORS,
    storage_key="directors",
    table="directors",
    model="projects.Director",
    scope=SCOPE_PROJECT,
    single=True,
    fields=("name", "email", "phone", "bio"),
    defaults={"email": ""},
    optional={"phone": "", "bio": ""},
    store_class=DirectorStore,
))

VISITORS = registry.register(Domain(
    name=DOMAIN_VISITORS,
    storage_key="visitors",
    table="visitors",
    model="projects.Visitor",
    scope=SCOPE_PROJECT,
    fields=("email", "name", "invited_at", "allowed_tabs", "status"),
    types={"invited_at": "datetime", "allowed_tabs": "list"},
    defaults={"name": "", "status": "pending"},
    value_maps={"allowed_tabs": LEGACY_TABS},
    store_class=VisitorStore,
))

TASKS = registry.register(Domain(
    name=DOMAIN_TASKS,
    storage_key="tasks",
    table="tasks",
    model="projects.Task",
    scope=SCOPE_PROJECT,
    fields=("description", "assigned_to", "start_date", "end_date", "status"),
    types={"assigned_to": "list", "start_date": "date", "end_date": "date"},
    defaults={"status": "pending"},
    value_maps={
        "status": {
            "pendiente": "pending",
            "en-progreso": "in-progress",
            "completada": "completed",
        },
    },
    store_class=TaskStore,
))
