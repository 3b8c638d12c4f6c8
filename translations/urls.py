# =============================================================================
# APP: translations - URLs
# =============================================================================

# translations/urls.py
from api.routers import OptionalSlashRouter

from .views import FormatViewSet, OriginalViewSet, TranslationSetViewSet, TranslationViewSet

router = OptionalSlashRouter()
router.register(r'translation-sets', TranslationSetViewSet, basename='translation-set')
router.register(r'originals', OriginalViewSet, basename='original')
router.register(r'translations', TranslationViewSet, basename='translation')
router.register(r'formats', FormatViewSet, basename='format')

urlpatterns = router.urls
