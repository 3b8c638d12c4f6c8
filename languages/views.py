# =============================================================================
# APP: languages - Views
# =============================================================================

# languages/views.py
import logging

from api.controllers import ResourceController
from translations.models import TranslationSet
from .locales import by_slug

logger = logging.getLogger(__name__)


def describe(locale):
    return {
        'code': locale.slug,
        'slug': locale.slug,
        'english_name': locale.english_name,
        'native_name': locale.native_name,
        'nplurals': locale.nplurals,
        'plural_expression': locale.plural_expression,
        'text_direction': locale.text_direction,
    }


class LanguageViewSet(ResourceController):
    """Langues ayant au moins un jeu de traductions"""
    resource = 'language'

    def list(self, request):
        codes = TranslationSet.objects.order_by().values_list('locale', flat=True).distinct()
        languages = []
        for code in codes:
            locale = by_slug(code)
            if locale is None:
                logger.warning(f"Code de langue inconnu ignoré : {code}")
                continue
            languages.append(locale)
        languages.sort(key=lambda locale: locale.english_name)
        data = [describe(locale) for locale in languages]
        return self.responses.success(data, headers={'X-Total-Count': str(len(data))})
