from rest_framework import serializers

from .models import CalendarEvent


class CalendarEventSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64, required=False)
    title = serializers.CharField(max_length=255)
    date = serializers.DateTimeField()
    time = serializers.RegexField(r"^([01]\d|2[0-3]):[0-5]\d$", required=False, allow_blank=True)
    project_id = serializers.CharField(max_length=64, required=False, allow_blank=True)
    type = serializers.ChoiceField(choices=CalendarEvent.TYPE_CHOICES, required=False)
    provider = serializers.BooleanField(read_only=True, default=False)
