from django.apps import AppConfig


class CalendarxConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "calendarx"
    verbose_name = "Calendar"

    def ready(self):
        from . import domains  # noqa: F401
