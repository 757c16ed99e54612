# core/cascade.py
import logging

from .exceptions import SyncError

logger = logging.getLogger("studio.sync")


class ProjectCascade:
    """
    Keeps project-scoped stores in step with the project store.

    Backends are not trusted to cascade deletes (the on-device store cannot),
    so dependent records are purged here, domain by domain.
    """

    def __init__(self, projects, dependents):
        self.projects = projects
        self.dependents = list(dependents)

    def on_project_created(self, project_id):
        for store in self.dependents:
            store.seed(project_id)

    def on_project_removed(self, project_id):
        """
        Delete the project, then every record keyed by it.

        A failing project delete aborts before anything is purged. A failing
        dependent domain is logged and the remaining domains still run.
        Returns the names of the domains that could not be purged.
        """
        self.projects.remove(project_id)

        failed = []
        for store in self.dependents:
            try:
                removed = store.purge(project_id)
            except SyncError as e:
                logger.error(f"Failed to purge {store.domain.name} for project {project_id}: {e}")
                failed.append(store.domain.name)
                continue
            if removed:
                logger.info(f"Purged {removed} {store.domain.name} record(s) of project {project_id}")
        return failed
