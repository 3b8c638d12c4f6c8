# glossaries/admin.py
from django.contrib import admin

from .models import Glossary, GlossaryEntry


class GlossaryEntryInline(admin.TabularInline):
    model = GlossaryEntry
    extra = 0
    fields = ['term', 'translation', 'part_of_speech', 'comment', 'last_edited_by']
    raw_id_fields = ['last_edited_by']


@admin.register(Glossary)
class GlossaryAdmin(admin.ModelAdmin):
    list_display = ['id', 'translation_set', 'entries_count', 'created_at']
    search_fields = ['description', 'translation_set__name', 'translation_set__project__name']
    raw_id_fields = ['translation_set']
    inlines = [GlossaryEntryInline]

    def entries_count(self, obj):
        return obj.entries.count()
    entries_count.short_description = "Nombre d'entrées"


@admin.register(GlossaryEntry)
class GlossaryEntryAdmin(admin.ModelAdmin):
    list_display = ['term', 'translation', 'part_of_speech', 'glossary', 'last_edited_by', 'date_modified']
    list_filter = ['part_of_speech']
    search_fields = ['term', 'translation', 'comment']
    raw_id_fields = ['glossary', 'last_edited_by']
