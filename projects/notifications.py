# projects/notifications.py
# Task reminders derived from the loaded workspace; only the read marks are stored

from datetime import timedelta

from django.utils import timezone

from core.constants import DOMAIN_TASKS
from core.storage import DeviceSetting
from .models import Task

TYPE_OVERDUE = "task-overdue"
TYPE_DUE_SOON = "task-due-soon"
TYPE_STARTING_SOON = "task-starting-soon"

PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"

DUE_SOON_DAYS = 3
STARTING_SOON_DAYS = 2


def _days(n):
    return f"{n} day{'s' if n > 1 else ''}"


def task_notification(task, project, today):
    """
    At most one reminder for ``task``, the most urgent that applies:
    overdue, then due soon, then starting soon (pending tasks only).
    """
    end = task.get("end_date")
    start = task.get("start_date")
    completed = task.get("status") == Task.STATUS_COMPLETED
    description = task.get("description", "")

    base = {
        "id": f"task-{task['id']}",
        "project_id": project["id"],
        "project_title": project.get("title", ""),
        "task_id": task["id"],
        "task_description": description,
    }

    if end and not completed and end < today:
        overdue = (today - end).days
        return {
            **base,
            "type": TYPE_OVERDUE,
            "title": "Overdue Task",
            "message": f'The task "{description}" is {_days(overdue)} overdue',
            "date": end,
            "priority": PRIORITY_HIGH,
        }

    if end and not completed and today <= end <= today + timedelta(days=DUE_SOON_DAYS):
        remaining = (end - today).days
        return {
            **base,
            "type": TYPE_DUE_SOON,
            "title": "Task Due Soon",
            "message": f'The task "{description}" is due in {_days(remaining)}',
            "date": end,
            "priority": PRIORITY_HIGH if remaining == 0 else PRIORITY_MEDIUM,
        }

    if (
        start
        and task.get("status") == Task.STATUS_PENDING
        and today <= start <= today + timedelta(days=STARTING_SOON_DAYS)
    ):
        until = (start - today).days
        return {
            **base,
            "type": TYPE_STARTING_SOON,
            "title": "Task Starting Soon",
            "message": f'The task "{description}" starts in {_days(until)}',
            "date": start,
            "priority": PRIORITY_LOW,
        }

    return None


def get_task_notifications(workspace, today=None, read=()):
    """
    Reminders for every task of every project, most recent date first.

    A reminder whose id is in ``read`` is flagged as read.
    """
    today = today or timezone.now().date()
    tasks = workspace[DOMAIN_TASKS]

    notifications = []
    for project in workspace.projects.all():
        for task in tasks.for_project(project["id"]):
            notification = task_notification(task, project, today)
            if notification is not None:
                notification["read"] = notification["id"] in read
                notifications.append(notification)

    notifications.sort(key=lambda n: n["date"], reverse=True)
    return notifications


def unread_count(notifications):
    return sum(1 for n in notifications if not n["read"])


class ReadNotifications:
    """Ids of the reminders a user has read, kept on the device."""

    key = "readNotifications"

    def __init__(self, user_id, store=None):
        self.setting = DeviceSetting(self.key, user_id, [], store)

    def ids(self):
        value = self.setting.get()
        if not isinstance(value, list):
            return set()
        return set(value)

    def mark(self, ids):
        current = self.ids()
        marked = current | set(ids)
        if marked != current:
            self.setting.set(sorted(marked))
        return marked
