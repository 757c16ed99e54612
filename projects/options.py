# projects/options.py
# Per-user option lists for project and collaborator fields, kept on the device

import logging

from core.storage import DeviceSetting
from .domains import PROJECTS
from .models import ContactFields, Project

logger = logging.getLogger("studio.projects")

KIND_CATEGORIES = "categories"
KIND_SUBCATEGORIES = "subcategories"
KIND_STATUSES = "statuses"
KIND_COLLABORATOR_CATEGORIES = "collaborator-categories"

# kind -> (device key, default {value: label})
OPTION_LISTS = {
    KIND_CATEGORIES: ("customCategories", dict(Project.CATEGORY_CHOICES)),
    KIND_SUBCATEGORIES: ("customSubcategories", dict(Project.SUBCATEGORY_CHOICES)),
    KIND_STATUSES: ("customStatuses", dict(Project.STATUS_CHOICES)),
    KIND_COLLABORATOR_CATEGORIES: (
        "customCollaboratorCategories",
        dict(ContactFields.CATEGORY_CHOICES),
    ),
}

# Older clients stored status options under their Spanish values
LEGACY_VALUES = {KIND_STATUSES: PROJECTS.value_maps["status"]}


class OptionList:
    """
    The values a user may pick for one field, with their display labels.

    Until the user edits the list it holds the defaults. Once saved, the
    stored list replaces the defaults entirely, so a default can be removed.
    """

    def __init__(self, kind, user_id, store=None):
        key, self.defaults = OPTION_LISTS[kind]
        self.kind = kind
        self.setting = DeviceSetting(key, user_id, self.defaults, store)

    def labels(self):
        stored = self.setting.get()
        if not isinstance(stored, dict):
            logger.warning(f"Ignoring malformed {self.kind} options under {self.setting.key}")
            return dict(self.defaults)
        legacy = LEGACY_VALUES.get(self.kind, {})
        return {legacy.get(value, value): label for value, label in stored.items()}

    def options(self):
        return [
            {"value": value, "label": label, "is_default": value in self.defaults}
            for value, label in self.labels().items()
        ]

    def __contains__(self, value):
        return value in self.labels()

    def add(self, value, label):
        labels = self.labels()
        labels[value] = label
        self.setting.set(labels)
        return labels

    def remove(self, value):
        """Drop ``value``; returns False when it was not in the list."""
        labels = self.labels()
        if value not in labels:
            return False
        del labels[value]
        self.setting.set(labels)
        return True


def options_for(user_id, kinds=None, store=None):
    return {kind: OptionList(kind, user_id, store) for kind in kinds or OPTION_LISTS}
