# =============================================================================
# APP: translations - Serializers
# =============================================================================

# translations/serializers.py
from rest_framework import serializers

from api.schemas import ResourceSerializer, registry
from languages.locales import by_slug
from .models import Original, Translation, TranslationSet


@registry.register('translation_set')
class TranslationSetSerializer(ResourceSerializer):
    """Serializer pour les jeux de traductions"""
    project_id = serializers.IntegerField(source='project.id', read_only=True)

    class Meta:
        model = TranslationSet
        fields = ('id', 'name', 'slug', 'project_id', 'locale')
        read_only_fields = ('id',)
        required_on_create = ('project_id', 'locale', 'name', 'slug')


@registry.register('original')
class OriginalSerializer(ResourceSerializer):
    """Serializer pour les chaînes originales"""
    project_id = serializers.IntegerField(source='project.id', read_only=True)

    class Meta:
        model = Original
        fields = (
            'id', 'project_id', 'context', 'singular', 'plural', 'comment',
            'references', 'status', 'priority', 'date_added',
        )
        read_only_fields = fields


@registry.register('translation')
class TranslationSerializer(ResourceSerializer):
    """Serializer pour les traductions ; `translations` contient les formes plurielles"""
    original_id = serializers.IntegerField(source='original.id', read_only=True)
    translation_set_id = serializers.IntegerField(source='translation_set.id', read_only=True)
    translations = serializers.SerializerMethodField()
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Translation
        fields = (
            'id', 'original_id', 'translation_set_id', 'translations', 'status',
            'warnings', 'user_id', 'date_added', 'date_modified',
        )
        read_only_fields = ('id', 'status', 'warnings', 'user_id', 'date_added', 'date_modified')
        required_on_create = ('translation_set_id', 'original_id', 'translations')

    def get_translations(self, obj):
        locale = by_slug(obj.translation_set.locale)
        forms = obj.forms
        if locale is not None:
            size = locale.nplurals if obj.original.plural else 1
            forms = forms[:size]
        return forms
