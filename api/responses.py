# =============================================================================
# APP: api - Fabrique de réponses
# =============================================================================

# api/responses.py
from rest_framework import status
from rest_framework.response import Response

from . import messages
from .exceptions import ApiError


class ResponseFactory:
    """Construit les réponses de succès et d'erreur de l'API.

    Toutes les erreurs ont la forme {"code": ..., "message": ...} avec
    éventuellement des clés supplémentaires (ex. "errors").
    """

    def success(self, payload, status_code=status.HTTP_200_OK, headers=None):
        return Response(payload, status=status_code, headers=headers)

    def no_content(self):
        return Response(status=status.HTTP_204_NO_CONTENT)

    def error(self, code, message, status_code, extra=None):
        body = {'code': code, 'message': message}
        if extra:
            body.update(extra)
        return Response(body, status=status_code)

    def from_error(self, exc: ApiError):
        return self.error(exc.code, exc.message, exc.status_code, exc.extra)

    # Raccourcis canoniques
    def not_found(self, resource):
        return self.error(f'{resource}_not_found', messages.not_found_message(resource), status.HTTP_404_NOT_FOUND)

    def already_exists(self, resource):
        return self.error(f'{resource}_already_exists', messages.already_exists_message(resource), status.HTTP_409_CONFLICT)

    def operation_failed(self, resource, operation):
        return self.error(
            f'{resource}_{operation}_failed',
            messages.operation_failed_message(resource, operation),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    def missing_parameters(self, resource, message=None):
        return self.error(
            f'{resource}_missing_parameters',
            message or messages.missing_parameters_message(resource),
            status.HTTP_400_BAD_REQUEST,
        )

    def forbidden(self, code='rest_forbidden'):
        return self.error(code, messages.GENERIC_MESSAGES[code], status.HTTP_403_FORBIDDEN)
