from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CalendarEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("record_id", models.CharField(max_length=64)),
                ("owner_id", models.CharField(db_index=True, max_length=64)),
                ("title", models.CharField(max_length=255)),
                ("date", models.DateTimeField()),
                ("time", models.CharField(blank=True, default="", help_text="HH:MM, empty for all-day events", max_length=5)),
                ("project_id", models.CharField(blank=True, default="", max_length=64)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("shoot", "Shoot"),
                            ("meeting", "Meeting"),
                            ("delivery", "Delivery"),
                            ("other", "Other"),
                        ],
                        default="other",
                        max_length=16,
                    ),
                ),
            ],
            options={
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(
                        fields=("owner_id", "record_id"),
                        name="calendarx_calendarevent_owner_record",
                    ),
                ],
            },
        ),
    ]
