from django.contrib import admin
from .models import Contact

@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'email', 'phone', 'owner_id')
    list_filter = ('category',)
    search_fields = ('name', 'email', 'owner_id')
