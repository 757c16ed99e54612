#  core/models.py
from django.db import models


class OwnedRecord(models.Model):
    """
    Remote row of a synced domain record.

    ``record_id`` is the client-side id of the record and is unique per
    owner only; ``owner_id`` is the opaque identity of the user.
    """
    record_id = models.CharField(max_length=64)
    owner_id = models.CharField(max_length=64, db_index=True)

    class Meta:
        abstract = True
        constraints = [
            models.UniqueConstraint(
                fields=["owner_id", "record_id"],
                name="%(app_label)s_%(class)s_owner_record",
            ),
        ]

    def __str__(self):
        return f"{type(self).__name__} {self.record_id} ({self.owner_id})"


class ProjectRecord(OwnedRecord):
    """Row of a project-scoped domain; ``project_id`` is a plain column."""
    project_id = models.CharField(max_length=64, db_index=True)

    class Meta(OwnedRecord.Meta):
        abstract = True
