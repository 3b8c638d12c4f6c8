# =============================================================================
# APP: glossaries - Views
# =============================================================================

# glossaries/views.py
import logging

from api.controllers import ResourceController
from api.exceptions import ResourceConflict, ValidationFailure
from api.validators import (
    get_or_404, has_param, int_param, require_fields, required_choice, text_param, textarea_param,
)
from translations.models import TranslationSet
from .models import Glossary, GlossaryEntry

logger = logging.getLogger(__name__)

PARTS_OF_SPEECH = [value for value, _ in GlossaryEntry.PART_OF_SPEECH_CHOICES]


class GlossaryViewSet(ResourceController):
    """CRUD des glossaires"""
    resource = 'glossary'

    def _check_free(self, translation_set, exclude=None):
        glossaries = Glossary.objects.filter(translation_set=translation_set)
        if exclude is not None:
            glossaries = glossaries.exclude(pk=exclude.pk)
        if glossaries.exists():
            raise ResourceConflict('glossary')

    def list(self, request):
        glossaries = Glossary.objects.select_related('translation_set')
        set_id = int_param(request, 'translation_set_id')
        if set_id:
            translation_set = get_or_404(TranslationSet, 'translation_set', pk=set_id)
            glossaries = glossaries.filter(translation_set=translation_set)
        return self.collection_response(glossaries)

    def retrieve(self, request, pk=None):
        return self.item_response(get_or_404(Glossary.objects.select_related('translation_set'), 'glossary', pk=pk))

    def create(self, request):
        translation_set = get_or_404(TranslationSet, 'translation_set', pk=int_param(request, 'translation_set_id'))
        description = textarea_param(request, 'description', '')
        self._check_free(translation_set)
        self.authorize('approve', 'translation-set', translation_set.pk)

        with self.store('creation'):
            glossary = Glossary.objects.create(translation_set=translation_set, description=description)

        logger.info(f"Glossaire créé : id={glossary.pk} pour le jeu {translation_set}")
        return self.created_response(glossary)

    def update(self, request, pk=None):
        glossary = get_or_404(Glossary.objects.select_related('translation_set'), 'glossary', pk=pk)
        self.authorize('approve', 'glossary', glossary.pk)

        translation_set = glossary.translation_set
        if has_param(request, 'translation_set_id'):
            translation_set = get_or_404(
                TranslationSet, 'translation_set', pk=int_param(request, 'translation_set_id')
            )
            if translation_set.pk != glossary.translation_set_id:
                self._check_free(translation_set, exclude=glossary)
                self.authorize('approve', 'translation-set', translation_set.pk)
        description = textarea_param(request, 'description', glossary.description)

        with self.store('update'):
            glossary.translation_set = translation_set
            glossary.description = description or ''
            glossary.save()

        logger.info(f"Glossaire mis à jour : id={glossary.pk}")
        return self.item_response(glossary)

    def destroy(self, request, pk=None):
        glossary = get_or_404(Glossary, 'glossary', pk=pk)
        self.authorize('approve', 'glossary', glossary.pk)

        with self.store('deletion'):
            glossary.delete()

        logger.info(f"Glossaire supprimé : id={pk}")
        return self.deleted_response()


class GlossaryEntryViewSet(ResourceController):
    """Entrées d'un glossaire"""
    resource = 'glossary_entry'

    def _read_values(self, request, entry=None):
        def pick(name, reader, current):
            return reader(request, name) if has_param(request, name) else current

        values = {
            'term': pick('term', text_param, entry.term if entry else None),
            'translation': pick('translation', text_param, entry.translation if entry else None),
            'part_of_speech': pick('part_of_speech', text_param, entry.part_of_speech if entry else '') or '',
            'comment': pick('comment', text_param, entry.comment if entry else '') or '',
        }
        require_fields(
            {'term': values['term'], 'translation': values['translation']},
            'glossary_entry', error=ValidationFailure.invalid_data,
        )
        if values['part_of_speech']:
            required_choice(
                values['part_of_speech'], PARTS_OF_SPEECH, 'glossary_entry',
                f"Nature grammaticale inconnue. Valeurs acceptées : {', '.join(PARTS_OF_SPEECH)}.",
            )
        return values

    def _check_unique(self, glossary, values, exclude=None):
        duplicates = GlossaryEntry.objects.filter(glossary=glossary, **values)
        if exclude is not None:
            duplicates = duplicates.exclude(pk=exclude.pk)
        if duplicates.exists():
            raise ResourceConflict('glossary_entry')

    def _get_entry(self, glossary, pk):
        return get_or_404(GlossaryEntry.objects.select_related('glossary'), 'glossary_entry', pk=pk, glossary=glossary)

    def list(self, request, glossary_id=None):
        glossary = get_or_404(Glossary, 'glossary', pk=glossary_id)
        return self.collection_response(glossary.entries.select_related('glossary'))

    def retrieve(self, request, glossary_id=None, pk=None):
        glossary = get_or_404(Glossary, 'glossary', pk=glossary_id)
        return self.item_response(self._get_entry(glossary, pk))

    def create(self, request, glossary_id=None):
        glossary = get_or_404(Glossary, 'glossary', pk=glossary_id)
        values = self._read_values(request)
        self._check_unique(glossary, values)
        self.authorize('approve', 'glossary', glossary.pk)

        with self.store('creation'):
            entry = GlossaryEntry.objects.create(glossary=glossary, last_edited_by=request.user, **values)

        logger.info(f"Entrée de glossaire créée : '{entry.term}' (id={entry.pk}) dans le glossaire {glossary.pk}")
        return self.created_response(entry)

    def update(self, request, glossary_id=None, pk=None):
        glossary = get_or_404(Glossary, 'glossary', pk=glossary_id)
        entry = self._get_entry(glossary, pk)
        self.authorize('approve', 'glossary', glossary.pk)

        values = self._read_values(request, entry)
        self._check_unique(glossary, values, exclude=entry)

        with self.store('update'):
            for field, value in values.items():
                setattr(entry, field, value)
            entry.last_edited_by = request.user
            entry.save()

        logger.info(f"Entrée de glossaire mise à jour : id={entry.pk}")
        return self.item_response(entry)

    def destroy(self, request, glossary_id=None, pk=None):
        glossary = get_or_404(Glossary, 'glossary', pk=glossary_id)
        entry = self._get_entry(glossary, pk)
        self.authorize('approve', 'glossary', glossary.pk)

        with self.store('deletion'):
            entry.delete()

        logger.info(f"Entrée de glossaire supprimée : id={pk}")
        return self.deleted_response()
