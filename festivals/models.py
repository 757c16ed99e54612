from django.db import models

from core.models import OwnedRecord


class Festival(OwnedRecord):
    """
    One yearly edition of a film festival, generated from a template.
    The record id is ``<template>-<year>`` (e.g. ``cannes-2025``).
    """
    REGION_CHOICES = [
        ("europe", "Europe"),
        ("north-america", "North America"),
        ("south-america", "South America"),
        ("asia", "Asia"),
        ("africa", "Africa"),
        ("oceania", "Oceania"),
        ("middle-east", "Middle East"),
    ]

    name = models.CharField(max_length=255)
    region = models.CharField(max_length=32, choices=REGION_CHOICES)
    year = models.PositiveIntegerField()
    film_submission_deadline = models.DateField()
    producers_hub_deadline = models.DateField()
    festival_start_date = models.DateField()
    festival_end_date = models.DateField()
    number_of_days = models.PositiveIntegerField(default=0)
    contacts = models.JSONField(default=list, blank=True)
    website = models.CharField(max_length=500, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")

    def __str__(self):
        return f"{self.name} {self.year}"
