from django.contrib import admin
from .models import CalendarEvent

@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ('title', 'date', 'time', 'type', 'project_id', 'owner_id')
    list_filter = ('type',)
    search_fields = ('title', 'project_id', 'owner_id')
