# languages/urls.py
from api.routers import OptionalSlashRouter

from .views import LanguageViewSet

router = OptionalSlashRouter()
router.register(r'languages', LanguageViewSet, basename='language')

urlpatterns = router.urls
