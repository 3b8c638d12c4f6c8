# =============================================================================
# projects/urls.py
# =============================================================================

from django.urls import re_path
from api.routers import OptionalSlashRouter

from . import views

router = OptionalSlashRouter()
router.register('projects', views.ProjectViewSet, basename='project')

permission_list = views.ProjectPermissionViewSet.as_view({'get': 'list', 'post': 'create'})
permission_detail = views.ProjectPermissionViewSet.as_view({'get': 'retrieve', 'delete': 'destroy'})

urlpatterns = [
    re_path(r'^projects/(?P<project_id>\d+)/permissions/?$', permission_list, name='project-permission-list'),
    re_path(
        r'^projects/(?P<project_id>\d+)/permissions/(?P<pk>\d+)/?$', permission_detail,
        name='project-permission-detail',
    ),
] + router.urls
