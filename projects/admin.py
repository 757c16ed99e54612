from django.contrib import admin
from .models import BudgetItem, Collaborator, Director, Document, Project, Script, Task, Visitor

@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('title', 'record_id', 'owner_id', 'status', 'category', 'updated_at')
    list_filter = ('status', 'category', 'subcategory')
    search_fields = ('title', 'record_id', 'owner_id')

@admin.register(Collaborator)
class CollaboratorAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'email', 'project_id', 'owner_id')
    list_filter = ('category',)
    search_fields = ('name', 'email', 'project_id')

@admin.register(BudgetItem)
class BudgetItemAdmin(admin.ModelAdmin):
    list_display = ('category', 'amount', 'status', 'project_id', 'owner_id')
    list_filter = ('status',)
    search_fields = ('category', 'description', 'project_id')

@admin.register(Script)
class ScriptAdmin(admin.ModelAdmin):
    list_display = ('title', 'version', 'last_modified', 'project_id')
    search_fields = ('title', 'project_id')

@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'size', 'uploaded_at', 'project_id')
    list_filter = ('category', 'is_drive_file')
    search_fields = ('name', 'project_id')

@admin.register(Director)
class DirectorAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'project_id', 'owner_id')
    search_fields = ('name', 'email', 'project_id')

@admin.register(Visitor)
class VisitorAdmin(admin.ModelAdmin):
    list_display = ('email', 'name', 'status', 'invited_at', 'project_id')
    list_filter = ('status',)
    search_fields = ('email', 'record_id', 'project_id')

@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ('description', 'status', 'start_date', 'end_date', 'project_id')
    list_filter = ('status',)
    search_fields = ('description', 'project_id')
