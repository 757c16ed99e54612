from django.contrib import admin
from .models import Festival

@admin.register(Festival)
class FestivalAdmin(admin.ModelAdmin):
    list_display = ('name', 'year', 'region', 'festival_start_date', 'festival_end_date', 'owner_id')
    list_filter = ('region', 'year')
    search_fields = ('name', 'record_id', 'owner_id')
