# glossaries/serializers.py
from rest_framework import serializers

from api.schemas import ResourceSerializer, registry
from .models import Glossary, GlossaryEntry


@registry.register('glossary')
class GlossarySerializer(ResourceSerializer):
    translation_set_id = serializers.IntegerField(source='translation_set.id', read_only=True)

    class Meta:
        model = Glossary
        fields = ('id', 'translation_set_id', 'description')
        read_only_fields = ('id',)
        required_on_create = ('translation_set_id',)


@registry.register('glossary_entry')
class GlossaryEntrySerializer(ResourceSerializer):
    glossary_id = serializers.IntegerField(source='glossary.id', read_only=True)
    last_edited_by = serializers.IntegerField(source='last_edited_by_id', read_only=True)

    class Meta:
        model = GlossaryEntry
        fields = (
            'id', 'glossary_id', 'term', 'translation', 'part_of_speech',
            'comment', 'last_edited_by', 'date_modified',
        )
        read_only_fields = ('id', 'glossary_id', 'last_edited_by', 'date_modified')
        required_on_create = ('term', 'translation')
