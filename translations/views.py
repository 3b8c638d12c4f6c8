# =============================================================================
# APP: translations - Views (jeux de traductions, originaux, traductions, formats)
# =============================================================================

# translations/views.py
import logging
import os
import tempfile

from django.conf import settings
from django.utils.text import slugify
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from api.controllers import ResourceController
from api.exceptions import ResourceConflict, StoreOperationFailure, ValidationFailure
from api.pagination import HeaderPagination
from api.validators import (
    filter_params, get_or_404, has_param, int_param, raw_param, require_fields, require_locale,
    sort_params, text_param,
)
from projects.models import Project
from .filters import OriginalFilter, sort_originals
from .importers import IMPORT_FORMATS, ImportParseError, all_parsers, get_parser
from .models import PLURAL_FORMS_MAX, Original, Translation, TranslationSet, pad_forms
from .services import OriginalsImporter
from .warnings import check_errors, check_warnings

logger = logging.getLogger(__name__)


class TranslationSetViewSet(ResourceController):
    """CRUD des jeux de traductions"""
    resource = 'translation_set'

    def _check_unique(self, project, locale, slug, exclude=None):
        duplicates = TranslationSet.objects.filter(project=project, locale=locale, slug=slug)
        if exclude is not None:
            duplicates = duplicates.exclude(pk=exclude.pk)
        if duplicates.exists():
            raise ResourceConflict('translation_set')

    def list(self, request):
        """Jeux de traductions d'un projet (project_id obligatoire)"""
        project = get_or_404(Project, 'project', pk=int_param(request, 'project_id'))
        translation_sets = TranslationSet.objects.filter(project=project).select_related('project')
        return self.collection_response(translation_sets.order_by('locale', 'slug', 'id'))

    def retrieve(self, request, pk=None):
        return self.item_response(get_or_404(TranslationSet.objects.select_related('project'), 'translation_set', pk=pk))

    def create(self, request):
        project = get_or_404(Project, 'project', pk=int_param(request, 'project_id'))
        locale_slug = text_param(request, 'locale')
        name = text_param(request, 'name')
        slug = slugify(text_param(request, 'slug') or '')
        require_fields({'locale': locale_slug, 'name': name, 'slug': slug}, 'translation_set')
        locale = require_locale(locale_slug)
        self._check_unique(project, locale.slug, slug)
        self.authorize('write', 'project', project.pk)

        with self.store('creation'):
            translation_set = TranslationSet.objects.create(project=project, locale=locale.slug, name=name, slug=slug)

        logger.info(f"Jeu de traductions créé : {translation_set} (id={translation_set.pk})")
        return self.created_response(translation_set)

    def update(self, request, pk=None):
        translation_set = get_or_404(TranslationSet.objects.select_related('project'), 'translation_set', pk=pk)
        self.authorize('write', 'project', translation_set.project_id)

        project = translation_set.project
        if has_param(request, 'project_id'):
            project = get_or_404(Project, 'project', pk=int_param(request, 'project_id'))
            if project.pk != translation_set.project_id:
                self.authorize('write', 'project', project.pk)
        locale = require_locale(text_param(request, 'locale') if has_param(request, 'locale') else translation_set.locale)
        name = text_param(request, 'name') if has_param(request, 'name') else translation_set.name
        slug = slugify(text_param(request, 'slug') or '') if has_param(request, 'slug') else translation_set.slug
        require_fields({'name': name, 'slug': slug}, 'translation_set')
        self._check_unique(project, locale.slug, slug, exclude=translation_set)

        with self.store('update'):
            translation_set.project = project
            translation_set.locale = locale.slug
            translation_set.name = name
            translation_set.slug = slug
            translation_set.save()

        logger.info(f"Jeu de traductions mis à jour : {translation_set} (id={translation_set.pk})")
        return self.item_response(translation_set)

    def destroy(self, request, pk=None):
        translation_set = get_or_404(TranslationSet, 'translation_set', pk=pk)
        self.authorize('delete', 'project', translation_set.project_id)

        with self.store('deletion'):
            translation_set.delete()

        logger.info(f"Jeu de traductions supprimé : id={pk}")
        return self.deleted_response()


class OriginalViewSet(ResourceController):
    """Consultation, suppression et import des chaînes originales"""
    resource = 'original'
    pagination_class = HeaderPagination

    def list(self, request):
        """Originaux d'un projet, filtrés et triés"""
        project = get_or_404(Project, 'project', pk=int_param(request, 'project_id'))
        translation_set = None
        if int_param(request, 'translation_set_id'):
            translation_set = get_or_404(
                TranslationSet, 'translation_set', pk=int_param(request, 'translation_set_id'), project=project
            )

        data = filter_params(request)
        data = {
            'filters_term': data['term'],
            'filters_term_scope': data['term_scope'],
            'filters_case_sensitive': data['case_sensitive'],
            'filters_status': data['status'],
            'filters_options': data['options'],
            'status': text_param(request, 'status', ''),
        }
        originals = Original.objects.filter(project=project).select_related('project')
        filterset = OriginalFilter(data, queryset=originals, translation_set=translation_set)
        originals = sort_originals(filterset.qs, sort_params(request), translation_set)
        return self.collection_response(originals)

    def retrieve(self, request, pk=None):
        return self.item_response(get_or_404(Original.objects.select_related('project'), 'original', pk=pk))

    def destroy(self, request, pk=None):
        original = get_or_404(Original, 'original', pk=pk)
        self.authorize('write', 'project', original.project_id)

        with self.store('deletion'):
            original.delete()

        logger.info(f"Original supprimé : id={pk}")
        return self.deleted_response()

    def _write_upload(self, upload):
        import_dir = settings.GP_REST['IMPORT_DIR']
        suffix = os.path.splitext(upload.name or '')[1]
        try:
            os.makedirs(import_dir, exist_ok=True)
            with tempfile.NamedTemporaryFile(dir=import_dir, suffix=suffix, prefix='import-', delete=False) as f:
                for chunk in upload.chunks():
                    f.write(chunk)
                return f.name
        except OSError as e:
            logger.error(f"Impossible d'écrire le fichier d'import temporaire : {e}")
            raise StoreOperationFailure(
                'import', 'file_write', "Impossible d'enregistrer le fichier importé."
            )

    @action(detail=False, methods=['post'], url_path='import',
            parser_classes=[MultiPartParser, FormParser, JSONParser])
    def import_originals(self, request):
        """Importe les originaux d'un fichier dans un projet"""
        project = get_or_404(Project, 'project', pk=int_param(request, 'project_id'))
        self.authorize('write', 'project', project.pk)

        format_slug = text_param(request, 'format') or 'auto'
        if format_slug not in IMPORT_FORMATS:
            raise ValidationFailure(
                'invalid_import_format',
                f"Format d'import inconnu. Formats acceptés : {', '.join(IMPORT_FORMATS)}.",
            )
        upload = request.FILES.get('file')
        if upload is None:
            raise ValidationFailure.missing_parameters('import', "Aucun fichier n'a été envoyé.")
        parser = get_parser(format_slug, upload.name)
        if parser is None:
            raise ValidationFailure(
                'invalid_import_format', "Impossible de déterminer le format d'après l'extension du fichier."
            )

        file_path = self._write_upload(upload)
        try:
            try:
                entries = parser.read(file_path)
            except ImportParseError as e:
                logger.warning(f"Fichier d'import illisible ({parser.slug}) : {e}")
                raise ValidationFailure('import_file_unparsable', str(e))
            counts = OriginalsImporter(project).import_entries(entries)
        finally:
            try:
                os.remove(file_path)
            except OSError as e:
                logger.warning(f"Fichier temporaire non supprimé ({file_path}) : {e}")

        return self.responses.success(counts)


class TranslationViewSet(ResourceController):
    """Création, consultation, modification et suppression des traductions"""
    resource = 'translation'

    def _read_forms(self, request, default=None):
        """Formes plurielles : liste `translations` ou clés translation_0..5"""
        if has_param(request, 'translations'):
            raw = raw_param(request, 'translations')
            if hasattr(request.data, 'getlist') and 'translations' in request.data:
                raw = request.data.getlist('translations')
            forms = raw if isinstance(raw, (list, tuple)) else [raw]
        elif any(has_param(request, f'translation_{i}') for i in range(PLURAL_FORMS_MAX)):
            forms = [raw_param(request, f'translation_{i}') for i in range(PLURAL_FORMS_MAX)]
        else:
            return list(default or [])

        if len(forms) > PLURAL_FORMS_MAX or any(f is not None and not isinstance(f, str) for f in forms):
            raise ValidationFailure.invalid_data(
                'translation', f"Les traductions doivent être une liste d'au plus {PLURAL_FORMS_MAX} chaînes."
            )
        forms = [f if f else None for f in forms]
        while forms and forms[-1] is None:
            forms.pop()
        return forms

    def _resolve_targets(self, request, translation=None):
        set_id = int_param(request, 'translation_set_id') or (translation.translation_set_id if translation else 0)
        translation_set = get_or_404(TranslationSet.objects.select_related('project'), 'translation_set', pk=set_id)
        locale = require_locale(translation_set.locale)
        original_id = int_param(request, 'original_id') or (translation.original_id if translation else 0)
        original = get_or_404(Original, 'original', pk=original_id, project_id=translation_set.project_id)
        return translation_set, locale, original

    def _validate_forms(self, original, forms, locale):
        require_fields({'translations': forms}, 'translation', error=ValidationFailure.invalid_data)
        errors = check_errors(original, forms, locale)
        if errors:
            raise ValidationFailure('translation_errors', extra={'errors': errors})
        return check_warnings(original, forms, locale)

    def _check_duplicate(self, original, translation_set, forms, exclude=None):
        padded = pad_forms(forms)
        candidates = Translation.objects.filter(
            original=original, translation_set=translation_set, status__in=('current', 'waiting')
        )
        if exclude is not None:
            candidates = candidates.exclude(pk=exclude.pk)
        if any(candidate.padded_forms() == padded for candidate in candidates):
            raise ResourceConflict('translation')

    def _can_approve(self, translation_set):
        return (
            self.can('approve', 'translation-set', translation_set.pk)
            or self.can('write', 'project', translation_set.project_id)
        )

    def _retire_current(self, translation):
        """Une seule traduction actuelle par original et par jeu"""
        Translation.objects.filter(
            original_id=translation.original_id, translation_set_id=translation.translation_set_id, status='current'
        ).exclude(pk=translation.pk).update(status='old')

    def retrieve(self, request, pk=None):
        translation = get_or_404(
            Translation.objects.select_related('original', 'translation_set'), 'translation', pk=pk
        )
        return self.item_response(translation)

    def create(self, request):
        translation_set, locale, original = self._resolve_targets(request)
        forms = self._read_forms(request)
        warnings = self._validate_forms(original, forms, locale)
        self._check_duplicate(original, translation_set, forms)

        status = 'current' if self._can_approve(translation_set) else 'waiting'
        with self.store('creation'):
            translation = Translation(
                original=original, translation_set=translation_set, status=status, warnings=warnings,
                user=request.user, user_last_modified=request.user,
            )
            translation.set_forms(forms)
            translation.save()
            if status == 'current':
                self._retire_current(translation)

        logger.info(f"Traduction créée : id={translation.pk} ({status}) pour l'original {original.pk}")
        return self.created_response(translation)

    def update(self, request, pk=None):
        translation = get_or_404(
            Translation.objects.select_related('original', 'translation_set'), 'translation', pk=pk
        )
        self.authorize('edit', 'translation', translation.pk)

        translation_set, locale, original = self._resolve_targets(request, translation)
        if translation_set.pk != translation.translation_set_id:
            self.authorize('approve', 'translation-set', translation_set.pk)
        forms = self._read_forms(request, default=translation.forms)
        warnings = self._validate_forms(original, forms, locale)
        self._check_duplicate(original, translation_set, forms, exclude=translation)

        status = translation.status
        if has_param(request, 'status'):
            status = text_param(request, 'status')
            if status not in dict(Translation.STATUS_CHOICES):
                raise ValidationFailure.invalid_data('translation', 'Statut de traduction inconnu.')
            if status != translation.status:
                self.authorize('approve', 'translation-set', translation_set.pk)
        elif (
            (pad_forms(forms) != translation.padded_forms() or original.pk != translation.original_id)
            and not self._can_approve(translation_set)
        ):
            # Un texte modifié sans droit de validation repasse en attente
            status = 'waiting'

        with self.store('update'):
            translation.translation_set = translation_set
            translation.original = original
            translation.set_forms(forms)
            translation.warnings = warnings
            translation.status = status
            translation.user_last_modified = request.user
            translation.save()
            if status == 'current':
                self._retire_current(translation)

        logger.info(f"Traduction mise à jour : id={translation.pk}")
        return self.item_response(translation)

    def destroy(self, request, pk=None):
        translation = get_or_404(Translation, 'translation', pk=pk)
        self.authorize('approve', 'translation-set', translation.translation_set_id)

        with self.store('deletion'):
            translation.delete()

        logger.info(f"Traduction supprimée : id={pk}")
        return self.deleted_response()


class FormatViewSet(ResourceController):
    """Formats acceptés par l'import des originaux"""
    resource = 'format'

    def list(self, request):
        formats = [parser.describe() for parser in all_parsers()]
        return self.responses.success(formats, headers={'X-Total-Count': str(len(formats))})
