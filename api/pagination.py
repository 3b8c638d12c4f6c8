# =============================================================================
# api/pagination.py
# =============================================================================

from django.conf import settings
from rest_framework.exceptions import NotFound
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from .exceptions import ValidationFailure


def _setting(name, default):
    return getattr(settings, 'GP_REST', {}).get(name, default)


class HeaderPagination(PageNumberPagination):
    """Pagination dont les métadonnées passent par les en-têtes.

    Le corps reste une simple liste ; le total est dans X-Total-Count et
    le nombre de pages dans X-Total-Pages.
    """
    page_query_param = 'page'
    page_size_query_param = 'per_page'

    @property
    def page_size(self):
        return _setting('PER_PAGE', 20)

    @property
    def max_page_size(self):
        return _setting('MAX_PER_PAGE', 500)

    def paginate_queryset(self, queryset, request, view=None):
        try:
            return super().paginate_queryset(queryset, request, view)
        except NotFound:
            raise ValidationFailure(
                'rest_invalid_page_number',
                "Le numéro de page demandé dépasse le nombre de pages disponibles.",
            )

    def get_paginated_response(self, data):
        headers = {
            'X-Total-Count': str(self.page.paginator.count),
            'X-Total-Pages': str(self.page.paginator.num_pages),
        }
        links = []
        next_link = self.get_next_link()
        previous_link = self.get_previous_link()
        if previous_link:
            links.append(f'<{previous_link}>; rel="prev"')
        if next_link:
            links.append(f'<{next_link}>; rel="next"')
        if links:
            headers['Link'] = ', '.join(links)
        return Response(data, headers=headers)
