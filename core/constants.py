# core/constants.py

# --- Domain names (Standard Registry) ---

# Global per user
DOMAIN_PROJECTS = "projects"
DOMAIN_FESTIVALS = "festivals"
DOMAIN_CALENDAR_EVENTS = "calendar_events"
DOMAIN_CONTACTS = "contacts"

# Keyed by project id
DOMAIN_COLLABORATORS = "collaborators"
DOMAIN_BUDGETS = "budgets"
DOMAIN_SCRIPTS = "scripts"
DOMAIN_DOCUMENTS = "documents"
DOMAIN_DIRECTORS = "directors"
DOMAIN_VISITORS = "visitors"
DOMAIN_TASKS = "tasks"

# Tabs a visitor can be granted
TAB_COLLABORATORS = "collaborators"
TAB_BUDGET = "budget"
TAB_DOCUMENTS = "documents"
TAB_TASKS = "tasks"

TAB_CHOICES = [
    (TAB_COLLABORATORS, "Collaborators"),
    (TAB_BUDGET, "Budget"),
    (TAB_DOCUMENTS, "Documents"),
    (TAB_TASKS, "Tasks"),
]

# Older clients stored tab names in Spanish
LEGACY_TABS = {
    "colaboradores": TAB_COLLABORATORS,
    "documentos": TAB_DOCUMENTS,
    "tareas": TAB_TASKS,
}
