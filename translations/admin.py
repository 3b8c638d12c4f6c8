# translations/admin.py
from django.contrib import admin

from .models import Original, Translation, TranslationSet


@admin.register(TranslationSet)
class TranslationSetAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'project', 'locale', 'created_at']
    list_filter = ['locale']
    search_fields = ['name', 'slug', 'project__name', 'project__slug']
    raw_id_fields = ['project']


@admin.register(Original)
class OriginalAdmin(admin.ModelAdmin):
    list_display = ['short_singular', 'context', 'project', 'status', 'priority', 'date_added']
    list_filter = ['status', 'priority']
    search_fields = ['singular', 'plural', 'context', 'comment']
    raw_id_fields = ['project']
    readonly_fields = ['date_added']

    fieldsets = (
        ('Chaîne', {
            'fields': ('project', 'context', 'singular', 'plural')
        }),
        ('Métadonnées', {
            'fields': ('comment', 'references', 'status', 'priority', 'date_added')
        }),
    )

    def short_singular(self, obj):
        return obj.singular[:60]
    short_singular.short_description = 'Original'


@admin.register(Translation)
class TranslationAdmin(admin.ModelAdmin):
    list_display = ['id', 'original', 'translation_set', 'status', 'user', 'date_modified']
    list_filter = ['status', 'translation_set__locale']
    search_fields = ['translation_0', 'original__singular', 'user__username']
    raw_id_fields = ['original', 'translation_set', 'user', 'user_last_modified']
    readonly_fields = ['warnings', 'date_added', 'date_modified']

    fieldsets = (
        ('Cible', {
            'fields': ('original', 'translation_set', 'status')
        }),
        ('Formes plurielles', {
            'fields': ('translation_0', 'translation_1', 'translation_2',
                       'translation_3', 'translation_4', 'translation_5')
        }),
        ('Suivi', {
            'fields': ('warnings', 'user', 'user_last_modified', 'date_added', 'date_modified'),
            'classes': ('collapse',)
        }),
    )
