# =============================================================================
# accounts/urls.py - Authentification JWT et profils
# =============================================================================

from django.urls import path, re_path
from rest_framework_simplejwt.views import TokenRefreshView

from . import views

profile_me = views.ProfileViewSet.as_view({'get': 'me'})
profile_detail = views.ProfileViewSet.as_view({'get': 'retrieve'})

urlpatterns = [
    # Obtention des tokens JWT (connexion)
    path('auth/token/', views.CustomTokenObtainPairView.as_view(), name='token_obtain_pair'),

    # Rafraîchissement des tokens JWT
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # Profil de l'utilisateur connecté
    re_path(r'^profile/me/?$', profile_me, name='profile-me'),

    # Profil d'un utilisateur
    re_path(r'^profile/(?P<pk>\d+)/?$', profile_detail, name='profile-detail'),
]
