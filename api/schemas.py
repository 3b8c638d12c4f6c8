# =============================================================================
# APP: api - Registre des schémas de ressources
# =============================================================================

# api/schemas.py
from types import MappingProxyType

from rest_framework import serializers


class FieldSelectionMixin:
    """Limite les champs sérialisés à ceux demandés (paramètre `fields`)"""

    def __init__(self, *args, **kwargs):
        requested = kwargs.pop('fields', None)
        super().__init__(*args, **kwargs)
        if requested is not None:
            for name in set(self.fields) - set(requested):
                self.fields.pop(name)


class ResourceSerializer(FieldSelectionMixin, serializers.ModelSerializer):
    """Serializer de base : l'ordre de Meta.fields est l'ordre de sortie.

    `Meta.required_on_create` liste les champs obligatoires à la création.
    """


class SchemaRegistry:
    """Associe un nom de ressource à son serializer.

    Le registre est figé quand l'app `api` est prête : plus aucun
    enregistrement n'est accepté ensuite.
    """

    def __init__(self):
        self._schemas = {}
        self._frozen = False

    def register(self, resource):
        def decorator(serializer_class):
            if self._frozen:
                raise RuntimeError(f"Registre figé : impossible d'enregistrer '{resource}'")
            if resource in self._schemas:
                raise ValueError(f"Ressource déjà enregistrée : '{resource}'")
            self._schemas[resource] = serializer_class
            return serializer_class
        return decorator

    def freeze(self):
        self._schemas = MappingProxyType(dict(self._schemas))
        self._frozen = True

    @property
    def frozen(self):
        return self._frozen

    def resources(self):
        return list(self._schemas)

    def serializer_for(self, resource):
        try:
            return self._schemas[resource]
        except KeyError:
            raise LookupError(f"Aucun schéma pour la ressource '{resource}'")

    def default_fields(self, resource):
        return list(self.serializer_for(resource).Meta.fields)

    def writable_fields(self, resource):
        meta = self.serializer_for(resource).Meta
        read_only = set(getattr(meta, 'read_only_fields', ()))
        return [name for name in meta.fields if name not in read_only]

    def required_on_create(self, resource):
        return list(getattr(self.serializer_for(resource).Meta, 'required_on_create', ()))

    def _selection(self, resource, requested_fields):
        if not requested_fields:
            return None
        known = self.default_fields(resource)
        selection = [name for name in known if name in requested_fields]
        # Aucun champ reconnu : on renvoie tout
        return selection or None

    def project(self, resource, entity, requested_fields=None, context=None):
        serializer_class = self.serializer_for(resource)
        selection = self._selection(resource, requested_fields)
        return serializer_class(entity, fields=selection, context=context or {}).data

    def project_many(self, resource, entities, requested_fields=None, context=None):
        serializer_class = self.serializer_for(resource)
        selection = self._selection(resource, requested_fields)
        return serializer_class(entities, many=True, fields=selection, context=context or {}).data


registry = SchemaRegistry()


def requested_fields(request):
    """Lit le paramètre `fields` (liste séparée par des virgules)"""
    raw = request.query_params.get('fields', '')
    names = {name.strip() for name in raw.split(',') if name.strip()}
    return names or None
