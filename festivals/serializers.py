from rest_framework import serializers

from .models import Festival


class FestivalContactSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(required=False, allow_blank=True)
    role = serializers.CharField(required=False, allow_blank=True)


class FestivalSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    name = serializers.CharField(max_length=255)
    region = serializers.ChoiceField(choices=Festival.REGION_CHOICES)
    year = serializers.IntegerField(min_value=1900)
    film_submission_deadline = serializers.DateField()
    producers_hub_deadline = serializers.DateField()
    festival_start_date = serializers.DateField()
    festival_end_date = serializers.DateField()
    number_of_days = serializers.IntegerField(min_value=0, required=False)
    contacts = FestivalContactSerializer(many=True, required=False)
    website = serializers.CharField(max_length=500, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
