# =============================================================================
# APP: api - Accès à la base de données
# =============================================================================

# api/store.py
import logging
from contextlib import contextmanager

from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import ResourceConflict, StoreOperationFailure

logger = logging.getLogger(__name__)


def get_or_none(model_or_queryset, **lookup):
    if isinstance(model_or_queryset, type):
        queryset = model_or_queryset._default_manager.all()
    else:
        queryset = model_or_queryset
    try:
        return queryset.filter(**lookup).first()
    except (ValueError, TypeError):
        return None


@contextmanager
def store_operation(resource, operation):
    """Exécute une écriture dans une transaction.

    Une violation d'unicité détectée par la base pendant une création ou
    une mise à jour devient un 409 ; toute autre erreur de base un 500
    `<resource>_<operation>_failed`.
    """
    try:
        with transaction.atomic():
            yield
    except IntegrityError as e:
        if operation == 'deletion':
            logger.error(f"Erreur lors de la suppression ({resource}) : {e}")
            raise StoreOperationFailure(resource, operation)
        logger.warning(f"Conflit d'unicité détecté par la base ({resource}) : {e}")
        raise ResourceConflict(resource)
    except DatabaseError as e:
        logger.error(f"Erreur base de données lors de l'opération {operation} ({resource}) : {e}")
        raise StoreOperationFailure(resource, operation)
