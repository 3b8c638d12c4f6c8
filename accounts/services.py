# =============================================================================
# APP: accounts - Services (agrégation du profil)
# =============================================================================

# accounts/services.py
import logging

from django.conf import settings
from django.db import DatabaseError
from django.db.models import Count, Max

from api.schemas import registry
from languages.locales import by_slug

logger = logging.getLogger(__name__)


class ProfileAggregator:
    """Construit le profil d'un utilisateur.

    Chaque sous-liste (projets récents, langues, permissions) est calculée
    indépendamment : si l'une échoue, elle vaut [] et les autres restent.
    """

    def __init__(self, limit=None):
        self.limit = limit or settings.GP_REST.get('PROFILE_RECENT_LIMIT', 5)

    def recent_projects(self, user):
        from translations.models import Translation

        rows = (
            Translation.objects.filter(user=user)
            .values(
                'translation_set_id', 'translation_set__name', 'translation_set__slug',
                'translation_set__locale', 'translation_set__project_id',
                'translation_set__project__name', 'translation_set__project__path',
            )
            .annotate(last_updated=Max('date_modified'), count=Count('id'))
            .order_by('-last_updated')[:self.limit]
        )
        return [
            {
                'project_id': row['translation_set__project_id'],
                'project_name': row['translation_set__project__name'],
                'project_path': row['translation_set__project__path'],
                'translation_set_id': row['translation_set_id'],
                'set_name': row['translation_set__name'],
                'set_slug': row['translation_set__slug'],
                'locale': row['translation_set__locale'],
                'translations_count': row['count'],
                'last_updated': row['last_updated'],
            }
            for row in rows
        ]

    def locales(self, user):
        from translations.models import Translation

        rows = (
            Translation.objects.filter(user=user)
            .values('translation_set__locale')
            .annotate(count=Count('id'))
            .order_by('-count', 'translation_set__locale')
        )
        locales = []
        for row in rows:
            locale = by_slug(row['translation_set__locale'])
            if locale is None:
                continue
            locales.append({
                'slug': locale.slug,
                'english_name': locale.english_name,
                'native_name': locale.native_name,
                'translations_count': row['count'],
            })
        return locales

    def permissions(self, user):
        from projects.models import ValidatorPermission

        permissions = ValidatorPermission.objects.filter(user=user).select_related('project').order_by('id')
        return [
            {
                'id': permission.pk,
                'project_id': permission.project_id,
                'project_name': permission.project.name,
                'locale_slug': permission.locale_slug,
                'set_slug': permission.set_slug,
                'action': permission.action,
            }
            for permission in permissions
        ]

    def _safe(self, name, lookup, user):
        try:
            return lookup(user)
        except (DatabaseError, LookupError, ValueError) as e:
            logger.warning(f"Profil de {user} : sous-liste '{name}' indisponible ({e})")
            return []

    def build(self, user):
        profile = dict(registry.project('user', user))
        profile['recent_projects'] = self._safe('recent_projects', self.recent_projects, user)
        profile['locales'] = self._safe('locales', self.locales, user)
        profile['permissions'] = self._safe('permissions', self.permissions, user)
        return profile
