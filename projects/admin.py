# projects/admin.py
from django.contrib import admin

from .models import Project, ValidatorPermission


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'path', 'parent_project', 'active', 'created_at']
    list_filter = ['active']
    search_fields = ['name', 'slug', 'path', 'description']
    raw_id_fields = ['parent_project']
    readonly_fields = ['path', 'created_at', 'updated_at']

    fieldsets = (
        ('Projet', {
            'fields': ('name', 'slug', 'path', 'parent_project', 'active')
        }),
        ('Description', {
            'fields': ('description', 'source_url_template')
        }),
        ('Dates', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(ValidatorPermission)
class ValidatorPermissionAdmin(admin.ModelAdmin):
    list_display = ['user', 'project', 'locale_slug', 'set_slug', 'action', 'created_at']
    list_filter = ['locale_slug', 'action']
    search_fields = ['user__username', 'project__name', 'set_slug']
    raw_id_fields = ['user', 'project']
