# core/session.py
"""
The per-identity workspace.

A ``Workspace`` is the explicit session object of the sync layer: it owns
one store per registered domain, follows an ``IdentityProvider`` and reloads
or clears every store when the identity changes. Nothing here is global;
build one at application start (or per request) and drop it when done.
"""
import logging

from .backends import get_backends
from .cascade import ProjectCascade
from .constants import DOMAIN_PROJECTS
from .domains import registry
from .identity import IdentityProvider
from .migration import MigrationCoordinator
from .signals import identity_changed
from .store import DomainStore, ProjectScopedStore

logger = logging.getLogger("studio.sync")


class Workspace:
    def __init__(self, stores, identity=None):
        self.stores = dict(stores)
        self.user_id = None
        self.identity = identity
        self.cascade = None
        if DOMAIN_PROJECTS in self.stores:
            self.cascade = ProjectCascade(
                self.stores[DOMAIN_PROJECTS],
                [s for s in self.stores.values() if isinstance(s, ProjectScopedStore)],
            )
        if identity is not None:
            # Weak receiver: a dropped workspace is not kept alive by the signal
            identity_changed.connect(self.on_identity_changed, sender=identity)
            if identity.current_user_id:
                self.switch(identity.current_user_id)

    @classmethod
    def build(cls, remote, local, identity=None, domains=None):
        """Create one store per domain over ``remote`` (authoritative) and ``local``."""
        migrator = MigrationCoordinator(remote, local) if remote is not None else None
        backend = remote if remote is not None else local
        stores = {}
        for domain in domains if domains is not None else registry:
            store_class = domain.store_class or DomainStore
            stores[domain.name] = store_class(domain, backend, local=local, migrator=migrator)
        return cls(stores, identity=identity)

    @classmethod
    def from_settings(cls, identity=None, domains=None):
        remote, local = get_backends()
        return cls.build(remote, local, identity=identity, domains=domains)

    def __getitem__(self, name):
        return self.stores[name]

    def __contains__(self, name):
        return name in self.stores

    @property
    def projects(self):
        return self.stores[DOMAIN_PROJECTS]

    # --- lifecycle ------------------------------------------------------

    def on_identity_changed(self, sender, user_id=None, **kwargs):
        self.switch(user_id)

    def switch(self, user_id):
        """Load every store for ``user_id``; ``None`` clears them all."""
        if not user_id:
            self.clear()
            return
        if user_id == self.user_id:
            return
        self.user_id = user_id
        for store in self.stores.values():
            store.load(user_id)
        if self.cascade is not None:
            for project in self.projects.all():
                for store in self.cascade.dependents:
                    store.ensure_partition(project["id"])
        logger.info(f"Workspace loaded for user {user_id}")

    def clear(self):
        previous, self.user_id = self.user_id, None
        for store in self.stores.values():
            store.load(None)
        if previous:
            logger.info(f"Workspace cleared for user {previous}")

    def detach(self):
        if self.identity is not None:
            identity_changed.disconnect(self.on_identity_changed, sender=self.identity)

    def reload(self):
        user_id, self.user_id = self.user_id, None
        if user_id:
            self.switch(user_id)

    # --- project lifecycle ---------------------------------------------

    def create_project(self, record):
        project = self.projects.create(record)
        self.cascade.on_project_created(project["id"])
        return project

    def remove_project(self, project_id):
        return self.cascade.on_project_removed(project_id)


def select_domains(names=None):
    """
    Registered domains named in ``names`` (every domain when ``None``).

    Asking for projects brings in every project-scoped domain with it.
    """
    if names is None:
        return list(registry)
    wanted = set(names)
    if DOMAIN_PROJECTS in wanted:
        wanted.update(d.name for d in registry if d.project_scoped)
    return [d for d in registry if d.name in wanted]


def open_workspace(user_id, domains=None):
    """A workspace loaded for ``user_id`` with the configured backends."""
    identity = IdentityProvider()
    workspace = Workspace.from_settings(identity=identity, domains=select_domains(domains))
    identity.set_user(user_id)
    return workspace
