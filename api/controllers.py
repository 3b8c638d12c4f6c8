# =============================================================================
# APP: api - Contrôleur de base des ressources
# =============================================================================

# api/controllers.py
import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status, viewsets

from .exceptions import ApiError, PermissionRefused, StoreOperationFailure, ValidationFailure
from .gate import PermissionGate
from .messages import GENERIC_MESSAGES
from .responses import ResponseFactory
from .schemas import registry, requested_fields
from .store import store_operation

logger = logging.getLogger(__name__)

ACTION_OPERATIONS = {
    'create': 'creation',
    'update': 'update',
    'partial_update': 'update',
    'destroy': 'deletion',
}


class ResourceController(viewsets.ViewSet):
    """Base des contrôleurs REST.

    Les collaborateurs (fabrique de réponses, contrôle des permissions,
    registre des schémas) sont injectés comme attributs et non hérités.
    """
    resource = None
    responses = ResponseFactory()
    gate_class = PermissionGate
    schemas = registry
    pagination_class = None
    lookup_value_regex = r'\d+'

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.gate = self.gate_class(request.user)

    # =========================================================================
    # PERMISSIONS ET ÉCRITURES
    # =========================================================================

    def authorize(self, action, object_type, object_id=None, extra=None):
        """Lève un 403 si l'utilisateur n'a pas le droit demandé"""
        if not self.gate.can(action, object_type, object_id, extra):
            logger.info(
                f"Accès refusé : {self.request.user} ne peut pas {action} {object_type}#{object_id}"
            )
            raise PermissionRefused()

    def can(self, action, object_type, object_id=None, extra=None):
        return self.gate.can(action, object_type, object_id, extra)

    def store(self, operation, resource=None):
        return store_operation(resource or self.resource, operation)

    # =========================================================================
    # RÉPONSES
    # =========================================================================

    def serialize(self, entity, resource=None):
        return self.schemas.project(
            resource or self.resource, entity, requested_fields(self.request), context={'request': self.request}
        )

    def serialize_many(self, entities, resource=None):
        return self.schemas.project_many(
            resource or self.resource, entities, requested_fields(self.request), context={'request': self.request}
        )

    def item_response(self, entity, status_code=status.HTTP_200_OK, resource=None):
        return self.responses.success(self.serialize(entity, resource), status_code)

    def created_response(self, entity, resource=None):
        return self.item_response(entity, status.HTTP_201_CREATED, resource)

    def deleted_response(self):
        return self.responses.no_content()

    def collection_response(self, entities, resource=None):
        if self.pagination_class is not None:
            paginator = self.pagination_class()
            page = paginator.paginate_queryset(entities, self.request, view=self)
            return paginator.get_paginated_response(self.serialize_many(page, resource))
        entities = list(entities)
        return self.responses.success(
            self.serialize_many(entities, resource),
            headers={'X-Total-Count': str(len(entities))},
        )

    # =========================================================================
    # GESTION DES ERREURS
    # =========================================================================

    def handle_exception(self, exc):
        """Convertit toute erreur en réponse {code, message}"""
        if isinstance(exc, ApiError):
            return self.responses.from_error(exc)

        if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
            response = self.responses.error(
                'rest_not_logged_in', GENERIC_MESSAGES['rest_not_logged_in'], status.HTTP_401_UNAUTHORIZED
            )
            auth_header = self.get_authenticate_header(self.request)
            if auth_header:
                response['WWW-Authenticate'] = auth_header
            else:
                response.status_code = status.HTTP_403_FORBIDDEN
            return response

        if isinstance(exc, exceptions.PermissionDenied):
            return self.responses.forbidden()

        if isinstance(exc, exceptions.ParseError):
            return self.responses.error(
                'rest_invalid_json', GENERIC_MESSAGES['rest_invalid_json'], status.HTTP_400_BAD_REQUEST
            )

        if isinstance(exc, exceptions.UnsupportedMediaType):
            return self.responses.error(
                'rest_unsupported_media_type', GENERIC_MESSAGES['rest_unsupported_media_type'],
                status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            )

        if isinstance(exc, (exceptions.MethodNotAllowed, exceptions.NotFound, Http404)):
            status_code = (
                status.HTTP_405_METHOD_NOT_ALLOWED
                if isinstance(exc, exceptions.MethodNotAllowed) else status.HTTP_404_NOT_FOUND
            )
            return self.responses.error('rest_no_route', GENERIC_MESSAGES['rest_no_route'], status_code)

        if isinstance(exc, exceptions.Throttled):
            return self.responses.error(
                'rest_throttled', GENERIC_MESSAGES['rest_throttled'], status.HTTP_429_TOO_MANY_REQUESTS
            )

        if isinstance(exc, exceptions.ValidationError):
            return self.responses.from_error(
                ValidationFailure.invalid_data(self.resource or 'request', extra={'errors': exc.detail})
            )

        if isinstance(exc, DatabaseError):
            operation = ACTION_OPERATIONS.get(getattr(self, 'action', None), 'read')
            logger.error(f"Erreur base de données ({self.resource}, {operation}) : {exc}")
            return self.responses.from_error(StoreOperationFailure(self.resource or 'request', operation))

        if isinstance(exc, exceptions.APIException):
            return self.responses.error(
                exc.get_codes() if isinstance(exc.get_codes(), str) else 'rest_error',
                str(exc.detail), exc.status_code,
            )

        logger.error(f"Erreur inattendue dans {self.__class__.__name__} : {exc}", exc_info=True)
        return self.responses.error('rest_error', GENERIC_MESSAGES['rest_error'], status.HTTP_500_INTERNAL_SERVER_ERROR)
