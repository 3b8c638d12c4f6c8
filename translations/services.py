# =============================================================================
# APP: translations - Services (import des originaux)
# =============================================================================

# translations/services.py
import logging
from difflib import SequenceMatcher

from django.db import DatabaseError, transaction

from .importers import read_originals
from .models import Original, Translation

logger = logging.getLogger(__name__)


class OriginalsImporter:
    """Synchronise les originaux d'un projet avec le contenu d'un fichier.

    - entrée identique à un original existant : conservée (mise à jour des métadonnées)
    - entrée proche d'un original disparu du fichier : l'original est modifié
      et ses traductions actuelles passent en "fuzzy"
    - entrée nouvelle : ajoutée
    - original absent du fichier : rendu obsolète
    """
    similarity_threshold = 0.8

    def __init__(self, project):
        self.project = project

    def _entry_key(self, entry):
        return (entry.singular, entry.plural or None, entry.context or None)

    def _apply_metadata(self, original, entry):
        original.comment = entry.comment
        original.references = list(entry.references)
        original.status = '+active'
        if entry.priority is not None:
            original.priority = entry.priority

    def _closest(self, entry, candidates):
        best, best_ratio = None, self.similarity_threshold
        for original in candidates:
            if (original.context or None) != (entry.context or None):
                continue
            if bool(original.plural) != bool(entry.plural):
                continue
            ratio = SequenceMatcher(None, original.singular, entry.singular).ratio()
            if ratio >= best_ratio:
                best, best_ratio = original, ratio
        return best

    def import_entries(self, entries):
        counts = {'added': 0, 'existing': 0, 'fuzzied': 0, 'obsoleted': 0, 'error': 0}

        existing = {}
        for original in Original.objects.filter(project=self.project).order_by('status', 'id'):
            # Un original actif est prioritaire sur un doublon obsolète
            existing.setdefault(original.key(), original)

        # Premier passage : entrées identiques à un original existant
        seen, pending = set(), []
        for entry in entries:
            if not entry.singular:
                counts['error'] += 1
                continue
            key = self._entry_key(entry)
            if key in seen:
                continue
            seen.add(key)
            original = existing.get(key)
            if original is None:
                pending.append(entry)
                continue
            try:
                with transaction.atomic():
                    self._apply_metadata(original, entry)
                    original.save()
                counts['existing'] += 1
            except DatabaseError as e:
                logger.error(f"Erreur lors de la mise à jour de l'original {original.pk} : {e}")
                counts['error'] += 1

        vanished = [o for key, o in existing.items() if key not in seen and o.is_active]

        # Second passage : entrées nouvelles ou modifiées
        for entry in pending:
            try:
                with transaction.atomic():
                    close = self._closest(entry, vanished)
                    if close is not None:
                        vanished.remove(close)
                        close.singular, close.plural, close.context = entry.singular, entry.plural, entry.context
                        self._apply_metadata(close, entry)
                        close.save()
                        Translation.objects.filter(original=close, status='current').update(status='fuzzy')
                        counts['fuzzied'] += 1
                    else:
                        Original.objects.create(
                            project=self.project,
                            singular=entry.singular,
                            plural=entry.plural,
                            context=entry.context,
                            comment=entry.comment,
                            references=list(entry.references),
                            priority=entry.priority or 0,
                        )
                        counts['added'] += 1
            except DatabaseError as e:
                logger.error(f"Erreur lors de l'import de l'original '{entry.singular[:50]}' : {e}")
                counts['error'] += 1

        for original in vanished:
            try:
                Original.objects.filter(pk=original.pk).update(status='-obsolete')
                counts['obsoleted'] += 1
            except DatabaseError as e:
                logger.error(f"Erreur lors de l'obsolescence de l'original {original.pk} : {e}")
                counts['error'] += 1

        logger.info(
            f"Import des originaux du projet {self.project.path} : "
            f"{counts['added']} ajoutés, {counts['existing']} existants, {counts['fuzzied']} approximatifs, "
            f"{counts['obsoleted']} obsolètes, {counts['error']} erreurs"
        )
        return counts


def import_originals_file(project, file_path, format_slug, filename=None):
    """Lit le fichier puis synchronise les originaux du projet"""
    entries = read_originals(file_path, format_slug, filename)
    return OriginalsImporter(project).import_entries(entries)
