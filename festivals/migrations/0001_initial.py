from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Festival",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("record_id", models.CharField(max_length=64)),
                ("owner_id", models.CharField(db_index=True, max_length=64)),
                ("name", models.CharField(max_length=255)),
                (
                    "region",
                    models.CharField(
                        choices=[
                            ("europe", "Europe"),
                            ("north-america", "North America"),
                            ("south-america", "South America"),
                            ("asia", "Asia"),
                            ("africa", "Africa"),
                            ("oceania", "Oceania"),
                            ("middle-east", "Middle East"),
                        ],
                        max_length=32,
                    ),
                ),
                ("year", models.PositiveIntegerField()),
                ("film_submission_deadline", models.DateField()),
                ("producers_hub_deadline", models.DateField()),
                ("festival_start_date", models.DateField()),
                ("festival_end_date", models.DateField()),
                ("number_of_days", models.PositiveIntegerField(default=0)),
                ("contacts", models.JSONField(blank=True, default=list)),
                ("website", models.CharField(blank=True, default="", max_length=500)),
                ("location", models.CharField(blank=True, default="", max_length=255)),
            ],
            options={
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(
                        fields=("owner_id", "record_id"),
                        name="festivals_festival_owner_record",
                    ),
                ],
            },
        ),
    ]
