from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Contact",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("record_id", models.CharField(max_length=64)),
                ("owner_id", models.CharField(db_index=True, max_length=64)),
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
            ],
            options={
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(
                        fields=("owner_id", "record_id"),
                        name="contacts_contact_owner_record",
                    ),
                ],
            },
        ),
    ]
