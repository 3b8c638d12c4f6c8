# =============================================================================
# APP: accounts - Views (profil et authentification JWT)
# =============================================================================

# accounts/views.py
import logging

from rest_framework import exceptions
from rest_framework.permissions import AllowAny
from rest_framework_simplejwt.views import TokenObtainPairView

from api.controllers import ResourceController
from api.validators import get_or_404
from .models import User
from .serializers import CustomTokenObtainPairSerializer
from .services import ProfileAggregator

logger = logging.getLogger(__name__)


class CustomTokenObtainPairView(TokenObtainPairView):
    """Obtention des tokens JWT avec les informations utilisateur"""
    serializer_class = CustomTokenObtainPairSerializer


class ProfileViewSet(ResourceController):
    """Profil d'un utilisateur : identité, projets récents, langues, permissions"""
    resource = 'user'
    permission_classes = [AllowAny]
    aggregator = ProfileAggregator()

    def me(self, request):
        if not request.user or not request.user.is_authenticated:
            raise exceptions.NotAuthenticated()
        return self.responses.success(self.aggregator.build(request.user))

    def retrieve(self, request, pk=None):
        user = get_or_404(User.objects.filter(is_active=True), 'user', pk=pk)
        return self.responses.success(self.aggregator.build(user))
