# =============================================================================
# APP: projects - Serializers
# =============================================================================

# projects/serializers.py
from rest_framework import serializers

from api.schemas import ResourceSerializer, registry
from .models import Project, ValidatorPermission


@registry.register('project')
class ProjectSerializer(ResourceSerializer):
    """Serializer pour les projets"""
    parent_project_id = serializers.IntegerField(source='parent_project_pk', read_only=True)

    class Meta:
        model = Project
        fields = (
            'id', 'name', 'slug', 'path', 'description', 'parent_project_id',
            'source_url_template', 'active',
        )
        read_only_fields = ('id', 'path')
        required_on_create = ('name', 'slug')


@registry.register('project_permission')
class ProjectPermissionSerializer(ResourceSerializer):
    """Serializer pour les permissions de validation d'un projet"""
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    user_login = serializers.CharField(source='user.username', read_only=True)
    project_id = serializers.IntegerField(source='project.id', read_only=True)

    class Meta:
        model = ValidatorPermission
        fields = ('id', 'user_id', 'user_login', 'project_id', 'locale_slug', 'set_slug', 'action')
        read_only_fields = ('id', 'user_login', 'action')
        required_on_create = ('user_login', 'locale_slug', 'set_slug')
