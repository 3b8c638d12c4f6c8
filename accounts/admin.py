# accounts/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import ObjectPermission, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ['username', 'email', 'display_name', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'email', 'display_name']
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profil', {'fields': ('display_name',)}),
    )


@admin.register(ObjectPermission)
class ObjectPermissionAdmin(admin.ModelAdmin):
    list_display = ['user', 'action', 'object_type', 'object_id', 'created_at']
    list_filter = ['action', 'object_type']
    search_fields = ['user__username', 'object_id']
    raw_id_fields = ['user']
