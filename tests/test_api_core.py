import pytest
from django.db import DatabaseError, IntegrityError
from rest_framework import serializers

from accounts.authorization import user_can
from api.exceptions import (
    PermissionRefused, ResourceConflict, ResourceNotFound, StoreOperationFailure, ValidationFailure,
)
from api.gate import PermissionGate
from api.responses import ResponseFactory
from api.schemas import ResourceSerializer, SchemaRegistry, registry
from api.store import store_operation
from api.validators import absint, get_or_404, missing_fields, require_fields, sanitize_text, sanitize_textarea
from projects.models import Project
from .factories import ObjectPermissionFactory, ProjectFactory, UserFactory


# =============================================================================
# ERREURS ET RÉPONSES
# =============================================================================

def test_error_codes_follow_resource_names():
    assert ResourceNotFound('project').code == 'project_not_found'
    assert ResourceNotFound('project').status_code == 404
    assert ResourceConflict('glossary_entry').code == 'glossary_entry_already_exists'
    assert ResourceConflict('glossary_entry').status_code == 409
    assert ValidationFailure.missing_parameters('translation_set').code == 'translation_set_missing_parameters'
    assert ValidationFailure.invalid_data('translation').code == 'invalid_translation_data'
    assert StoreOperationFailure('project', 'deletion').code == 'project_deletion_failed'
    assert PermissionRefused().code == 'rest_forbidden'
    assert PermissionRefused().status_code == 403


def test_response_factory_error_body():
    responses = ResponseFactory()

    response = responses.not_found('glossary')
    assert response.status_code == 404
    assert response.data == {'code': 'glossary_not_found', 'message': 'Glossaire introuvable.'}

    response = responses.from_error(ValidationFailure('translation_errors', extra={'errors': ['x']}))
    assert response.status_code == 400
    assert response.data['code'] == 'translation_errors'
    assert response.data['errors'] == ['x']

    assert responses.already_exists('project').status_code == 409
    assert responses.operation_failed('project', 'update').data['code'] == 'project_update_failed'
    assert responses.no_content().status_code == 204


# =============================================================================
# REGISTRE DES SCHÉMAS
# =============================================================================

class DummySerializer(ResourceSerializer):
    label = serializers.CharField(source='name', read_only=True)

    class Meta:
        model = Project
        fields = ('id', 'label', 'slug')
        read_only_fields = ('id',)
        required_on_create = ('label', 'slug')


def test_schema_registry_lookup_and_freeze():
    schemas = SchemaRegistry()
    schemas.register('dummy')(DummySerializer)

    assert schemas.default_fields('dummy') == ['id', 'label', 'slug']
    assert schemas.writable_fields('dummy') == ['label', 'slug']
    assert schemas.required_on_create('dummy') == ['label', 'slug']

    with pytest.raises(ValueError):
        schemas.register('dummy')(DummySerializer)
    with pytest.raises(LookupError):
        schemas.serializer_for('inconnu')

    schemas.freeze()
    assert schemas.frozen
    with pytest.raises(RuntimeError):
        schemas.register('autre')(DummySerializer)


def test_schema_projection_keeps_requested_fields():
    schemas = SchemaRegistry()
    schemas.register('dummy')(DummySerializer)
    project = Project(id=3, name='Mon projet', slug='mon-projet')

    assert schemas.project('dummy', project) == {'id': 3, 'label': 'Mon projet', 'slug': 'mon-projet'}
    assert schemas.project('dummy', project, {'slug'}) == {'slug': 'mon-projet'}
    # Aucun champ reconnu : projection complète
    assert set(schemas.project('dummy', project, {'inconnu'})) == {'id', 'label', 'slug'}


def test_application_registry_is_frozen_with_all_resources():
    assert registry.frozen
    for resource in ('project', 'translation_set', 'original', 'translation',
                     'glossary', 'glossary_entry', 'project_permission', 'user'):
        assert resource in registry.resources()


# =============================================================================
# VALIDATION DES PARAMÈTRES
# =============================================================================

@pytest.mark.parametrize('value, expected', [
    ('12', 12), (-4, 4), ('7abc', 7), ('abc', 0), (None, 0), ('', 0),
])
def test_absint(value, expected):
    assert absint(value) == expected


def test_sanitizers_strip_tags_and_whitespace():
    assert sanitize_text('  <b>Mon</b>   projet \n ') == 'Mon projet'
    assert sanitize_text(42) == '42'
    assert sanitize_text(['liste']) is None
    assert sanitize_textarea('Ligne  1\n  <i>Ligne</i> 2 ') == 'Ligne 1\nLigne 2'


def test_require_fields_reports_missing_names():
    assert missing_fields({'name': 'x', 'slug': '', 'forms': []}) == ['slug', 'forms']

    with pytest.raises(ValidationFailure) as exc:
        require_fields({'name': None, 'slug': 'ok'}, 'project')
    assert exc.value.code == 'project_missing_parameters'
    assert 'name' in exc.value.message

    with pytest.raises(ValidationFailure) as exc:
        require_fields({'term': ''}, 'glossary_entry', error=ValidationFailure.invalid_data)
    assert exc.value.code == 'invalid_glossary_entry_data'


@pytest.mark.django_db
def test_get_or_404_treats_zero_as_missing():
    project = ProjectFactory()
    assert get_or_404(Project, 'project', pk=project.pk) == project
    with pytest.raises(ResourceNotFound):
        get_or_404(Project, 'project', pk=0)
    with pytest.raises(ResourceNotFound) as exc:
        get_or_404(Project.objects.all(), 'project', pk=project.pk + 100)
    assert exc.value.code == 'project_not_found'


# =============================================================================
# PERMISSIONS ET ÉCRITURES
# =============================================================================

def test_gate_never_raises():
    def broken(*args):
        raise DatabaseError('base indisponible')

    assert PermissionGate(object(), authorize=broken).can('write', 'project', 1) is False


@pytest.mark.django_db
def test_gate_with_unknown_object_refuses():
    user = UserFactory()
    assert PermissionGate(user).can('write', 'project', 99999) is False


@pytest.mark.django_db
def test_project_grant_applies_to_sub_projects():
    user = UserFactory()
    parent = ProjectFactory()
    child = ProjectFactory(parent_project=parent)
    other = ProjectFactory()
    ObjectPermissionFactory(user=user, action='write', object_type='project', object_id=str(parent.pk))

    assert user_can(user, 'write', 'project', child.pk)
    assert not user_can(user, 'write', 'project', other.pk)
    assert not user_can(user, 'delete', 'project', parent.pk)
    # Création d'un projet racine : droit global requis
    assert not user_can(user, 'write', 'project', None)


@pytest.mark.django_db
def test_inactive_and_admin_users():
    project = ProjectFactory()
    admin = UserFactory()
    ObjectPermissionFactory(user=admin, action='admin', object_type=None, object_id=None)
    inactive = UserFactory(is_superuser=True, is_active=False)

    assert user_can(admin, 'delete', 'project', project.pk)
    assert not user_can(inactive, 'write', 'project', project.pk)


@pytest.mark.django_db
def test_store_operation_maps_database_errors():
    with pytest.raises(ResourceConflict) as exc:
        with store_operation('project', 'creation'):
            raise IntegrityError('UNIQUE constraint failed')
    assert exc.value.code == 'project_already_exists'

    with pytest.raises(StoreOperationFailure) as exc:
        with store_operation('project', 'deletion'):
            raise IntegrityError('FOREIGN KEY constraint failed')
    assert exc.value.code == 'project_deletion_failed'

    with pytest.raises(StoreOperationFailure) as exc:
        with store_operation('glossary', 'update'):
            raise DatabaseError('disque plein')
    assert exc.value.code == 'glossary_update_failed'
