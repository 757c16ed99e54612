from django.db import migrations, models


def owned(extra=()):
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("record_id", models.CharField(max_length=64)),
        ("owner_id", models.CharField(db_index=True, max_length=64)),
        *extra,
    ]


def project_scoped(*fields):
    return owned([("project_id", models.CharField(db_index=True, max_length=64)), *fields])


def owner_record(model_name):
    return [
        models.UniqueConstraint(
            fields=("owner_id", "record_id"),
            name=f"projects_{model_name}_owner_record",
        ),
    ]


CONTACT_CATEGORY_CHOICES = [
    ("coproducers", "Co-producers"),
    ("distributor-companies", "Distributor companies"),
    ("studios", "Studios"),
    ("equipment-companies", "Equipment companies"),
    ("locations", "Locations"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=owned([
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pre-production", "Pre-production"),
                            ("production", "Production"),
                            ("post-production", "Post-production"),
                            ("completed", "Completed"),
                        ],
                        default="pre-production",
                        max_length=32,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("originals", "Originals"),
                            ("co-productions", "Co-productions"),
                            ("commissions", "Commissions"),
                        ],
                        default="originals",
                        max_length=32,
                    ),
                ),
                (
                    "subcategory",
                    models.CharField(
                        choices=[
                            ("feature-film", "Feature film"),
                            ("documentary", "Documentary"),
                            ("audiovisual", "Audiovisual"),
                            ("tv-series", "TV series"),
                            ("short-film", "Short film"),
                            ("commercial", "Commercial"),
                        ],
                        default="feature-film",
                        max_length=32,
                    ),
                ),
                ("region", models.CharField(blank=True, default="", max_length=32)),
                ("country", models.CharField(blank=True, default="", max_length=100)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
            ]),
            options={
                "abstract": False,
                "constraints": owner_record("project"),
            },
        ),
        migrations.CreateModel(
            name="Collaborator",
            fields=project_scoped(
                ("name", models.CharField(max_length=255)),
                ("category", models.CharField(default="studios", max_length=64)),
                ("role", models.CharField(blank=True, default="", max_length=255)),
                ("email", models.CharField(blank=True, default="", max_length=254)),
                ("phone", models.CharField(blank=True, default="", max_length=64)),
                ("languages", models.JSONField(blank=True, default=list)),
                ("address", models.TextField(blank=True, default="")),
                ("website", models.CharField(blank=True, default="", max_length=500)),
                ("notes", models.TextField(blank=True, default="")),
                ("allergies", models.TextField(blank=True, default="")),
                ("has_driving_license", models.BooleanField(blank=True, null=True)),
                ("is_visitor", models.BooleanField(blank=True, null=True)),
                ("allowed_tabs", models.JSONField(blank=True, default=list)),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("collaborator"),
            },
        ),
        migrations.CreateModel(
            name="BudgetItem",
            fields=project_scoped(
                ("category", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=14)),
                (
                    "status",
                    models.CharField(
                        choices=[("approved", "Approved"), ("pending", "Pending"), ("rejected", "Rejected")],
                        default="pending",
                        max_length=16,
                    ),
                ),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("budgetitem"),
            },
        ),
        migrations.CreateModel(
            name="Script",
            fields=project_scoped(
                ("title", models.CharField(max_length=255)),
                ("version", models.CharField(blank=True, default="", max_length=64)),
                ("last_modified", models.DateTimeField()),
                ("content", models.TextField(blank=True, default="")),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("script"),
            },
        ),
        migrations.CreateModel(
            name="Document",
            fields=project_scoped(
                ("name", models.CharField(max_length=255)),
                ("type", models.CharField(blank=True, default="", max_length=100)),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("script", "Script"),
                            ("contract", "Contract"),
                            ("invoice", "Invoice"),
                            ("budget", "Budget"),
                            ("legal", "Legal"),
                            ("production", "Production"),
                            ("marketing", "Marketing"),
                            ("other", "Other"),
                        ],
                        default="",
                        max_length=32,
                    ),
                ),
                ("uploaded_at", models.DateTimeField()),
                ("size", models.BigIntegerField(default=0)),
                ("is_drive_file", models.BooleanField(blank=True, null=True)),
                ("drive_folder_id", models.CharField(blank=True, default="", max_length=255)),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("document"),
            },
        ),
        migrations.CreateModel(
            name="Director",
            fields=project_scoped(
                ("name", models.CharField(max_length=255)),
                ("email", models.CharField(blank=True, default="", max_length=254)),
                ("phone", models.CharField(blank=True, default="", max_length=64)),
                ("bio", models.TextField(blank=True, default="")),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("director"),
            },
        ),
        migrations.CreateModel(
            name="Visitor",
            fields=project_scoped(
                ("email", models.CharField(max_length=254)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("invited_at", models.DateTimeField()),
                ("allowed_tabs", models.JSONField(blank=True, default=list, help_text="Tabs the visitor may open")),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("accepted", "Accepted"), ("active", "Active")],
                        default="pending",
                        max_length=16,
                    ),
                ),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("visitor"),
            },
        ),
        migrations.CreateModel(
            name="Task",
            fields=project_scoped(
                ("description", models.TextField()),
                ("assigned_to", models.JSONField(blank=True, default=list, help_text="Collaborator ids")),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("in-progress", "In progress"), ("completed", "Completed")],
                        default="pending",
                        max_length=16,
                    ),
                ),
            ),
            options={
                "abstract": False,
                "constraints": owner_record("task"),
            },
        ),
    ]
