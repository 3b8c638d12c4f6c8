# =============================================================================
# URLs PRINCIPAL DU PROJET
# =============================================================================

# GpRest/urls.py
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Administration
    path('admin/', admin.site.urls),

    # API URLs
    path('api/v1/', include([
        path('', include('accounts.urls')),
        path('', include('projects.urls')),
        path('', include('translations.urls')),
        path('', include('glossaries.urls')),
        path('', include('languages.urls')),
    ])),

    #  dfr auth
    path('api-auth/', include('rest_framework.urls', namespace='rest_framework')),
]
