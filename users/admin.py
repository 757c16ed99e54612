from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ('username', 'email', 'name', 'role', 'is_staff', 'supabase_id')
    list_filter = ('role', 'is_staff', 'is_superuser', 'is_active')
    search_fields = ('username', 'email', 'name', 'supabase_id')
    fieldsets = UserAdmin.fieldsets + (
        ('Workspace', {'fields': ('name', 'role', 'supabase_id')}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ('Workspace', {'fields': ('name', 'role')}),
    )
