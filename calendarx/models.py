from django.db import models

from core.models import OwnedRecord


class CalendarEvent(OwnedRecord):
    TYPE_SHOOT = "shoot"
    TYPE_MEETING = "meeting"
    TYPE_DELIVERY = "delivery"
    TYPE_OTHER = "other"

    TYPE_CHOICES = [
        (TYPE_SHOOT, "Shoot"),
        (TYPE_MEETING, "Meeting"),
        (TYPE_DELIVERY, "Delivery"),
        (TYPE_OTHER, "Other"),
    ]

    title = models.CharField(max_length=255)
    date = models.DateTimeField()
    time = models.CharField(max_length=5, blank=True, default="", help_text="HH:MM, empty for all-day events")
    # Optional link to a project; not removed with the project
    project_id = models.CharField(max_length=64, blank=True, default="")
    type = models.CharField(max_length=16, choices=TYPE_CHOICES, default=TYPE_OTHER)

    def __str__(self):
        return self.title
