# =============================================================================
# APP: api - Validation et nettoyage des paramètres de requête
# =============================================================================

# api/validators.py
import re

from django.core.exceptions import ObjectDoesNotExist
from django.utils.html import strip_tags

from . import options
from .exceptions import ResourceNotFound, ValidationFailure

_WHITESPACE = re.compile(r'\s+')
_INLINE_WHITESPACE = re.compile(r'[ \t\r\f\v]+')


# =============================================================================
# LECTURE DES PARAMÈTRES
# =============================================================================

def has_param(request, name):
    data = request.data
    return (hasattr(data, 'get') and name in data) or name in request.query_params


def raw_param(request, name, default=None):
    """Lit un paramètre dans le corps puis dans la query string"""
    data = request.data
    if hasattr(data, 'get') and name in data:
        return data.get(name)
    if name in request.query_params:
        return request.query_params.get(name)
    return default


def list_param(request, name):
    """Lit un paramètre multi-valué (`name`, `name[]` ou liste JSON)"""
    for source in (request.data, request.query_params):
        if not hasattr(source, 'get'):
            continue
        for key in (name, f'{name}[]'):
            if key not in source:
                continue
            if hasattr(source, 'getlist'):
                values = source.getlist(key)
                if len(values) == 1 and isinstance(values[0], list):
                    values = values[0]
            else:
                values = source.get(key)
            if isinstance(values, str):
                values = values.split(',')
            if not isinstance(values, (list, tuple)):
                values = [values]
            return [str(v).strip() for v in values if str(v).strip()]
    return []


def absint(value):
    """Entier positif ; toute valeur illisible donne 0"""
    if isinstance(value, bool):
        return int(value)
    try:
        return abs(int(str(value).strip()))
    except (TypeError, ValueError):
        match = re.match(r'^\s*-?(\d+)', str(value)) if value is not None else None
        return int(match.group(1)) if match else 0


def int_param(request, name, default=0):
    value = raw_param(request, name)
    if value in (None, ''):
        return default
    return absint(value)


def sanitize_text(value):
    """Supprime les balises HTML, normalise les espaces et tronque les bords"""
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return None
    return _WHITESPACE.sub(' ', strip_tags(value)).strip()


def sanitize_textarea(value):
    """Comme sanitize_text mais conserve les retours à la ligne"""
    if value is None:
        return None
    if not isinstance(value, str):
        return sanitize_text(value)
    lines = strip_tags(value).replace('\r\n', '\n').split('\n')
    return '\n'.join(_INLINE_WHITESPACE.sub(' ', line).strip() for line in lines).strip()


def text_param(request, name, default=None):
    value = raw_param(request, name)
    if value is None:
        return default
    return sanitize_text(value)


def textarea_param(request, name, default=None):
    value = raw_param(request, name)
    if value is None:
        return default
    return sanitize_textarea(value)


def bool_param(request, name, default=False):
    value = raw_param(request, name)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def choice_param(request, name, allowed, default):
    """Valeur hors liste : repli silencieux sur la valeur par défaut"""
    value = text_param(request, name)
    return value if value in allowed else default


def required_choice(value, allowed, resource, message=None):
    """Valeur hors liste : erreur 400"""
    if value not in allowed:
        raise ValidationFailure.invalid_data(resource, message)
    return value


# =============================================================================
# CHAMPS OBLIGATOIRES ET EXISTENCE
# =============================================================================

def missing_fields(values):
    return [name for name, value in values.items() if value is None or value == '' or value == []]


def require_fields(values, resource, error=None):
    """Lève une erreur 400 si un des champs est vide.

    `error` construit l'exception à partir du message ; par défaut
    `<resource>_missing_parameters`.
    """
    missing = missing_fields(values)
    if missing:
        message = f"Paramètres obligatoires manquants : {', '.join(missing)}."
        factory = error or ValidationFailure.missing_parameters
        raise factory(resource, message)


def get_or_404(model_or_queryset, resource, **lookup):
    """Retourne l'objet ou lève `<resource>_not_found`"""
    if isinstance(model_or_queryset, type):
        queryset = model_or_queryset._default_manager.all()
    else:
        queryset = model_or_queryset
    if any(value in (None, '', 0) for value in lookup.values()):
        raise ResourceNotFound(resource)
    try:
        return queryset.get(**lookup)
    except (ObjectDoesNotExist, ValueError, TypeError):
        raise ResourceNotFound(resource)


def require_locale(slug):
    from languages.locales import by_slug

    locale = by_slug(slug) if slug else None
    if locale is None:
        raise ResourceNotFound('locale')
    return locale


# =============================================================================
# TRI ET FILTRES
# =============================================================================

def sort_params(request):
    return {
        'by': choice_param(request, 'sort_by', options.values(options.SORT_BY_CHOICES), options.DEFAULT_SORT_BY),
        'how': choice_param(request, 'sort_order', options.values(options.SORT_ORDER_CHOICES), options.DEFAULT_SORT_ORDER),
    }


def filter_params(request):
    """Filtres de liste ; les valeurs inconnues sont ignorées"""
    allowed_status = options.values(options.FILTER_STATUS_CHOICES)
    allowed_options = options.values(options.FILTER_OPTION_CHOICES)
    return {
        'term': text_param(request, 'filters_term', ''),
        'term_scope': choice_param(
            request, 'filters_term_scope',
            options.values(options.TERM_SCOPE_CHOICES), options.DEFAULT_TERM_SCOPE,
        ),
        'case_sensitive': bool_param(request, 'filters_case_sensitive'),
        'status': [s for s in list_param(request, 'filters_status') if s in allowed_status],
        'options': [o for o in list_param(request, 'filters_options') if o in allowed_options],
        'user_login': text_param(request, 'filters_user_login', ''),
    }
