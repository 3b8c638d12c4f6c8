# glossaries/urls.py
from django.urls import re_path
from api.routers import OptionalSlashRouter

from . import views

router = OptionalSlashRouter()
router.register(r'glossaries', views.GlossaryViewSet, basename='glossary')

entry_list = views.GlossaryEntryViewSet.as_view({'get': 'list', 'post': 'create'})
entry_detail = views.GlossaryEntryViewSet.as_view({'get': 'retrieve', 'put': 'update', 'delete': 'destroy'})

urlpatterns = [
    re_path(r'^glossaries/(?P<glossary_id>\d+)/entries/?$', entry_list, name='glossary-entry-list'),
    re_path(r'^glossaries/(?P<glossary_id>\d+)/entries/(?P<pk>\d+)/?$', entry_detail, name='glossary-entry-detail'),
] + router.urls
