# projects/stores.py
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Tuple

from django.utils import timezone

from core.store import DomainStore, ProjectScopedStore
from .models import BudgetItem, Task, Visitor

logger = logging.getLogger("studio.projects")


class ProjectStore(DomainStore):
    """Projects of the active user; every write bumps ``updated_at``."""

    def prepare(self, record):
        now = timezone.now()
        if not record.get("created_at"):
            record["created_at"] = now
        record["updated_at"] = now
        return record

    def prepare_update(self, fields):
        fields["updated_at"] = timezone.now()
        return fields


class TaskStore(ProjectScopedStore):
    def order(self, records):
        """Incomplete tasks first, then soonest due; duplicate ids collapse."""
        seen = set()
        unique = []
        for task in records:
            if task["id"] in seen:
                continue
            seen.add(task["id"])
            unique.append(task)
        return sorted(
            unique,
            key=lambda t: (t.get("status") == Task.STATUS_COMPLETED, t.get("end_date") or date.max),
        )


class ScriptStore(ProjectScopedStore):
    def order(self, records):
        return sorted(records, key=lambda s: s.get("last_modified") or datetime.min, reverse=True)

    def prepare(self, record):
        if not record.get("last_modified"):
            record["last_modified"] = timezone.now()
        return record

    def prepare_update(self, fields):
        fields.setdefault("last_modified", timezone.now())
        return fields


class DocumentStore(ProjectScopedStore):
    def prepare(self, record):
        if not record.get("uploaded_at"):
            record["uploaded_at"] = timezone.now()
        return record


def budget_totals(items):
    """Total and per-status sums of budget items."""
    totals = {
        "total": Decimal("0"),
        BudgetItem.STATUS_APPROVED: Decimal("0"),
        BudgetItem.STATUS_PENDING: Decimal("0"),
        BudgetItem.STATUS_REJECTED: Decimal("0"),
    }
    for item in items:
        amount = item.get("amount") or Decimal("0")
        totals["total"] += amount
        if item.get("status") in totals:
            totals[item["status"]] += amount
    return totals


class BudgetStore(ProjectScopedStore):
    def totals(self, project_id):
        return budget_totals(self.for_project(project_id))


class DirectorStore(ProjectScopedStore):
    """At most one director per project, set in place."""

    def director_for(self, project_id):
        directors = self.for_project(project_id)
        return directors[-1] if directors else None

    def set_director(self, project_id, record):
        current = self.director_for(project_id)
        if current is None:
            return self.create({**record, "project_id": project_id})
        return self.update(current["id"], record)


# Valid state transitions: from_status -> list of allowed to_statuses
VALID_TRANSITIONS = {
    Visitor.STATUS_PENDING: [Visitor.STATUS_ACCEPTED],
    Visitor.STATUS_ACCEPTED: [Visitor.STATUS_ACTIVE],
    Visitor.STATUS_ACTIVE: [],
}


def can_transition(visitor, new_status) -> Tuple[bool, str]:
    """
    Check if a visitor can move to a new status.

    Returns (can_transition: bool, reason: str)
    """
    current_status = visitor.get("status", Visitor.STATUS_PENDING)

    if new_status == current_status:
        return True, "Same status"

    if new_status not in dict(Visitor.STATUS_CHOICES):
        return False, f"Invalid status: {new_status}"

    if new_status not in VALID_TRANSITIONS.get(current_status, []):
        return False, f"Cannot transition from '{current_status}' to '{new_status}'"

    return True, ""


class VisitorStore(ProjectScopedStore):
    """
    Invited guests. The visitor id is the invitation token, so a token
    lookup reads the same collection as every other visitor query.
    """

    def invite(self, project_id, email, name="", allowed_tabs=None):
        return self.create({
            "project_id": project_id,
            "email": email,
            "name": name,
            "allowed_tabs": list(allowed_tabs or []),
            "invited_at": timezone.now(),
            "status": Visitor.STATUS_PENDING,
        })

    def find_by_token(self, token):
        return self.get(token)

    def transition(self, visitor_id, new_status) -> Tuple[bool, str]:
        """
        Attempt to move a visitor to a new status.

        Returns (success: bool, message: str)
        """
        visitor = self.get(visitor_id)
        if visitor is None:
            return False, "Visitor not found"

        can, reason = can_transition(visitor, new_status)
        if not can:
            logger.warning(
                f"Invalid visitor transition attempted: visitor={visitor_id}, "
                f"from={visitor.get('status')}, to={new_status}. Reason: {reason}"
            )
            return False, reason

        old_status = visitor.get("status")
        if old_status != new_status:
            self.update(visitor_id, {"status": new_status})
            logger.info(f"Visitor transition: visitor={visitor_id}, from={old_status}, to={new_status}")
        return True, "Status updated"

    def accept(self, token) -> Tuple[bool, str]:
        return self.transition(token, Visitor.STATUS_ACCEPTED)
