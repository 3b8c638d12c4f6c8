# =============================================================================
# APP: api - Contrôle des permissions par objet
# =============================================================================

# api/gate.py
import logging

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError

from accounts.authorization import user_can

logger = logging.getLogger(__name__)


class PermissionGate:
    """Répond oui/non à "l'utilisateur peut-il faire `action` sur cet objet ?".

    Ne lève jamais d'exception : objet absent, identifiant invalide ou
    erreur de base donnent False.
    """

    def __init__(self, user, authorize=user_can):
        self.user = user
        self._authorize = authorize

    def can(self, action, object_type, object_id=None, extra=None):
        try:
            return bool(self._authorize(self.user, action, object_type, object_id, extra))
        except (ObjectDoesNotExist, DatabaseError, ValueError, TypeError) as e:
            logger.warning(
                f"Vérification de permission impossible ({action} sur {object_type}#{object_id}) : {e}"
            )
            return False
