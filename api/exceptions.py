# =============================================================================
# APP: api - Taxonomie des erreurs métier
# =============================================================================

# api/exceptions.py
from . import messages


class ApiError(Exception):
    """Erreur métier convertie en réponse {code, message} par le contrôleur"""
    status_code = 500
    default_code = 'rest_error'

    def __init__(self, code=None, message=None, extra=None):
        self.code = code or self.default_code
        self.message = message or messages.GENERIC_MESSAGES.get(self.code, messages.GENERIC_MESSAGES['rest_error'])
        self.extra = extra or {}
        super().__init__(self.message)

    def __repr__(self):
        return f"{self.__class__.__name__}(code={self.code!r}, status={self.status_code})"


class ResourceNotFound(ApiError):
    status_code = 404

    def __init__(self, resource, message=None):
        self.resource = resource
        super().__init__(f'{resource}_not_found', message or messages.not_found_message(resource))


class ResourceConflict(ApiError):
    status_code = 409

    def __init__(self, resource, message=None):
        self.resource = resource
        super().__init__(f'{resource}_already_exists', message or messages.already_exists_message(resource))


class ValidationFailure(ApiError):
    status_code = 400
    default_code = 'rest_invalid_param'

    @classmethod
    def missing_parameters(cls, resource, message=None):
        return cls(f'{resource}_missing_parameters', message or messages.missing_parameters_message(resource))

    @classmethod
    def invalid_data(cls, resource, message=None, extra=None):
        return cls(f'invalid_{resource}_data', message or messages.invalid_data_message(resource), extra)


class PermissionRefused(ApiError):
    status_code = 403
    default_code = 'rest_forbidden'


class StoreOperationFailure(ApiError):
    """Échec d'écriture dans la base (création, mise à jour, suppression)"""
    status_code = 500

    def __init__(self, resource, operation, message=None):
        self.resource = resource
        self.operation = operation
        super().__init__(
            f'{resource}_{operation}_failed',
            message or messages.operation_failed_message(resource, operation),
        )
