# =============================================================================
# APP: translations - Tasks (maintenance des fichiers d'import)
# =============================================================================

# translations/tasks.py
import logging
import os
import time

from celery import shared_task
from django.conf import settings

logger = logging.getLogger(__name__)


@shared_task(bind=True)
def cleanup_import_files(self, max_age_hours=None):
    """Supprime les fichiers d'import temporaires restés sur le disque"""
    import_dir = settings.GP_REST['IMPORT_DIR']
    if max_age_hours is None:
        max_age_hours = settings.GP_REST['IMPORT_MAX_AGE_HOURS']
    cutoff = time.time() - max_age_hours * 3600

    if not os.path.isdir(import_dir):
        return {'status': 'success', 'deleted_count': 0}

    deleted_count = 0
    for entry in os.scandir(import_dir):
        if not entry.is_file() or not entry.name.startswith('import-'):
            continue
        try:
            if entry.stat().st_mtime < cutoff:
                os.remove(entry.path)
                deleted_count += 1
        except OSError as e:
            logger.error(f"Erreur lors de la suppression du fichier {entry.path}: {e}")
            continue

    logger.info(f"Nettoyage terminé: {deleted_count} fichiers d'import supprimés")
    return {'status': 'success', 'deleted_count': deleted_count}
