from rest_framework import serializers

from core.constants import TAB_CHOICES
from .models import BudgetItem, Document, Task
from .options import (
    KIND_CATEGORIES,
    KIND_COLLABORATOR_CATEGORIES,
    KIND_STATUSES,
    KIND_SUBCATEGORIES,
)


class RecordSerializer(serializers.Serializer):
    """
    Serializer over plain record dicts.

    Optional fields are declared ``required=False`` so a record that lacks
    them is rendered without the key.
    """
    id = serializers.CharField(max_length=64, required=False)


class ProjectScopedSerializer(RecordSerializer):
    project_id = serializers.CharField(read_only=True)


class OptionFieldsMixin:
    """
    Checks fields backed by a user option list.

    The lists come from ``context["options"]`` (kind -> ``OptionList``);
    without them any value is accepted.
    """
    option_fields = {}

    def validate(self, attrs):
        attrs = super().validate(attrs)
        options = self.context.get("options") or {}
        errors = {}
        for field, kind in self.option_fields.items():
            if field in attrs and kind in options and attrs[field] not in options[kind]:
                errors[field] = f'"{attrs[field]}" is not an available option.'
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class ProjectSerializer(OptionFieldsMixin, RecordSerializer):
    option_fields = {
        "status": KIND_STATUSES,
        "category": KIND_CATEGORIES,
        "subcategory": KIND_SUBCATEGORIES,
    }

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(max_length=32, required=False)
    category = serializers.CharField(max_length=32, required=False)
    subcategory = serializers.CharField(max_length=32, required=False)
    region = serializers.CharField(max_length=32, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ContactFieldsSerializer(OptionFieldsMixin, RecordSerializer):
    option_fields = {"category": KIND_COLLABORATOR_CATEGORIES}

    name = serializers.CharField(max_length=255)
    category = serializers.CharField(max_length=64, required=False)
    role = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=64, required=False, allow_blank=True)
    languages = serializers.ListField(child=serializers.CharField(), required=False)
    address = serializers.CharField(required=False, allow_blank=True)
    website = serializers.CharField(max_length=500, required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)
    allergies = serializers.CharField(required=False, allow_blank=True)
    has_driving_license = serializers.BooleanField(required=False, allow_null=True)
    is_visitor = serializers.BooleanField(required=False, allow_null=True)
    allowed_tabs = serializers.ListField(
        child=serializers.ChoiceField(choices=TAB_CHOICES), required=False
    )


class CollaboratorSerializer(ContactFieldsSerializer, ProjectScopedSerializer):
    pass


class BudgetItemSerializer(ProjectScopedSerializer):
    category = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    status = serializers.ChoiceField(choices=BudgetItem.STATUS_CHOICES, required=False)


class ScriptSerializer(ProjectScopedSerializer):
    title = serializers.CharField(max_length=255)
    version = serializers.CharField(max_length=64, required=False, allow_blank=True)
    last_modified = serializers.DateTimeField(required=False)
    content = serializers.CharField(required=False, allow_blank=True)


class DocumentSerializer(ProjectScopedSerializer):
    name = serializers.CharField(max_length=255)
    type = serializers.CharField(max_length=100, required=False, allow_blank=True)
    category = serializers.ChoiceField(choices=Document.CATEGORY_CHOICES, required=False)
    uploaded_at = serializers.DateTimeField(required=False)
    size = serializers.IntegerField(min_value=0, required=False)
    is_drive_file = serializers.BooleanField(required=False, allow_null=True)
    drive_folder_id = serializers.CharField(max_length=255, required=False, allow_blank=True)


class DirectorSerializer(ProjectScopedSerializer):
    name = serializers.CharField(max_length=255)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=64, required=False, allow_blank=True)
    bio = serializers.CharField(required=False, allow_blank=True)


class VisitorSerializer(ProjectScopedSerializer):
    email = serializers.EmailField()
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    allowed_tabs = serializers.ListField(
        child=serializers.ChoiceField(choices=TAB_CHOICES), required=False
    )
    invited_at = serializers.DateTimeField(read_only=True)
    status = serializers.CharField(read_only=True)


class TaskSerializer(ProjectScopedSerializer):
    description = serializers.CharField()
    assigned_to = serializers.ListField(child=serializers.CharField(), required=False)
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    status = serializers.ChoiceField(choices=Task.STATUS_CHOICES, required=False)

    def validate(self, attrs):
        start = attrs.get("start_date")
        end = attrs.get("end_date")
        if start and end and end < start:
            raise serializers.ValidationError({"end_date": "End date cannot be before the start date."})
        return attrs


class BudgetSummarySerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=16, decimal_places=2)
    approved = serializers.DecimalField(max_digits=16, decimal_places=2)
    pending = serializers.DecimalField(max_digits=16, decimal_places=2)
    rejected = serializers.DecimalField(max_digits=16, decimal_places=2)


class TaskNotificationSerializer(serializers.Serializer):
    id = serializers.CharField()
    type = serializers.CharField()
    title = serializers.CharField()
    message = serializers.CharField()
    project_id = serializers.CharField()
    project_title = serializers.CharField()
    task_id = serializers.CharField()
    task_description = serializers.CharField()
    date = serializers.DateField()
    priority = serializers.CharField()
    read = serializers.BooleanField()


class MarkReadSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.CharField(), required=False)
    all = serializers.BooleanField(default=False)

    def validate(self, attrs):
        if not attrs["all"] and not attrs.get("ids"):
            raise serializers.ValidationError("Give the notification ids to mark, or all=true.")
        return attrs


class OptionSerializer(serializers.Serializer):
    value = serializers.SlugField(max_length=32)
    label = serializers.CharField(max_length=100)
    is_default = serializers.BooleanField(read_only=True)
