from django.db import models

from core.models import OwnedRecord, ProjectRecord


class Project(OwnedRecord):
    """
    A film production owned by one user.
    Collaborators, budget items, scripts, documents, the director, visitors
    and tasks are all keyed by its record id.
    """
    STATUS_PRE_PRODUCTION = "pre-production"
    STATUS_PRODUCTION = "production"
    STATUS_POST_PRODUCTION = "post-production"
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = [
        (STATUS_PRE_PRODUCTION, "Pre-production"),
        (STATUS_PRODUCTION, "Production"),
        (STATUS_POST_PRODUCTION, "Post-production"),
        (STATUS_COMPLETED, "Completed"),
    ]

    CATEGORY_CHOICES = [
        ("originals", "Originals"),
        ("co-productions", "Co-productions"),
        ("commissions", "Commissions"),
    ]

    SUBCATEGORY_CHOICES = [
        ("feature-film", "Feature film"),
        ("documentary", "Documentary"),
        ("audiovisual", "Audiovisual"),
        ("tv-series", "TV series"),
        ("short-film", "Short film"),
        ("commercial", "Commercial"),
    ]

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    status = models.CharField(max_length=32, choices=STATUS_CHOICES, default=STATUS_PRE_PRODUCTION)
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, default="originals")
    subcategory = models.CharField(max_length=32, choices=SUBCATEGORY_CHOICES, default="feature-film")
    region = models.CharField(max_length=32, blank=True, default="")
    country = models.CharField(max_length=100, blank=True, default="")

    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    def __str__(self):
        return self.title


class ContactFields(models.Model):
    """Person/company details shared by project collaborators and global contacts."""
    CATEGORY_CHOICES = [
        ("coproducers", "Co-producers"),
        ("distributor-companies", "Distributor companies"),
        ("studios", "Studios"),
        ("equipment-companies", "Equipment companies"),
        ("locations", "Locations"),
    ]

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=64, default="studios")
    role = models.CharField(max_length=255, blank=True, default="")
    email = models.CharField(max_length=254, blank=True, default="")
    phone = models.CharField(max_length=64, blank=True, default="")
    languages = models.JSONField(default=list, blank=True)
    address = models.TextField(blank=True, default="")
    website = models.CharField(max_length=500, blank=True, default="")
    notes = models.TextField(blank=True, default="")
    allergies = models.TextField(blank=True, default="")
    has_driving_license = models.BooleanField(null=True, blank=True)
    is_visitor = models.BooleanField(null=True, blank=True)
    allowed_tabs = models.JSONField(default=list, blank=True)

    class Meta:
        abstract = True

    def __str__(self):
        return self.name


class Collaborator(ProjectRecord, ContactFields):
    class Meta(ProjectRecord.Meta):
        pass


class BudgetItem(ProjectRecord):
    STATUS_APPROVED = "approved"
    STATUS_PENDING = "pending"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_APPROVED, "Approved"),
        (STATUS_PENDING, "Pending"),
        (STATUS_REJECTED, "Rejected"),
    ]

    category = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)


class Script(ProjectRecord):
    title = models.CharField(max_length=255)
    version = models.CharField(max_length=64, blank=True, default="")
    last_modified = models.DateTimeField()
    content = models.TextField(blank=True, default="")


class Document(ProjectRecord):
    CATEGORY_CHOICES = [
        ("script", "Script"),
        ("contract", "Contract"),
        ("invoice", "Invoice"),
        ("budget", "Budget"),
        ("legal", "Legal"),
        ("production", "Production"),
        ("marketing", "Marketing"),
        ("other", "Other"),
    ]

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=100, blank=True, default="")
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, blank=True, default="")
    uploaded_at = models.DateTimeField()
    size = models.BigIntegerField(default=0)
    is_drive_file = models.BooleanField(null=True, blank=True)
    drive_folder_id = models.CharField(max_length=255, blank=True, default="")


class Director(ProjectRecord):
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254, blank=True, default="")
    phone = models.CharField(max_length=64, blank=True, default="")
    bio = models.TextField(blank=True, default="")


class Visitor(ProjectRecord):
    """
    An invited guest. The record id doubles as the invitation token.
    pending -> accepted -> active
    """
    STATUS_PENDING = "pending"
    STATUS_ACCEPTED = "accepted"
    STATUS_ACTIVE = "active"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_ACTIVE, "Active"),
    ]

    email = models.CharField(max_length=254)
    name = models.CharField(max_length=255, blank=True, default="")
    invited_at = models.DateTimeField()
    allowed_tabs = models.JSONField(default=list, blank=True, help_text="Tabs the visitor may open")
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)


class Task(ProjectRecord):
    STATUS_PENDING = "pending"
    STATUS_IN_PROGRESS = "in-progress"
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_IN_PROGRESS, "In progress"),
        (STATUS_COMPLETED, "Completed"),
    ]

    description = models.TextField()
    assigned_to = models.JSONField(default=list, blank=True, help_text="Collaborator ids")
    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)
