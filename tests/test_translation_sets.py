import pytest

from translations.models import TranslationSet
from .conftest import API
from .factories import ObjectPermissionFactory, ProjectFactory, TranslationSetFactory

pytestmark = pytest.mark.django_db

SETS = f'{API}/translation-sets/'


def payload(project, **overrides):
    data = {'project_id': project.pk, 'locale': 'fr', 'name': 'Français', 'slug': 'default'}
    data.update(overrides)
    return data


def test_create_then_duplicate(superuser_client):
    project = ProjectFactory()

    created = superuser_client.post(SETS, payload(project))
    duplicate = superuser_client.post(SETS, payload(project))

    assert created.status_code == 201
    assert created.data['project_id'] == project.pk
    assert created.data['locale'] == 'fr'
    assert duplicate.status_code == 409
    assert duplicate.data['code'] == 'translation_set_already_exists'


def test_same_slug_for_another_locale(superuser_client):
    project = ProjectFactory()
    TranslationSetFactory(project=project, locale='fr', slug='default')

    response = superuser_client.post(SETS, payload(project, locale='de', name='Deutsch'))

    assert response.status_code == 201


def test_create_with_unknown_project(superuser_client):
    response = superuser_client.post(SETS, {'project_id': 404, 'locale': 'fr', 'name': 'x', 'slug': 'x'})

    assert response.status_code == 404
    assert response.data['code'] == 'project_not_found'


def test_create_with_missing_parameters(superuser_client):
    project = ProjectFactory()

    response = superuser_client.post(SETS, {'project_id': project.pk, 'locale': 'fr'})

    assert response.status_code == 400
    assert response.data['code'] == 'translation_set_missing_parameters'
    assert not TranslationSet.objects.exists()


def test_create_with_unknown_locale(superuser_client):
    project = ProjectFactory()

    response = superuser_client.post(SETS, payload(project, locale='klingon'))

    assert response.status_code == 404
    assert response.data['code'] == 'locale_not_found'


def test_create_requires_write_on_project(user, user_client):
    project = ProjectFactory()

    assert user_client.post(SETS, payload(project)).status_code == 403

    ObjectPermissionFactory(user=user, action='write', object_type='project', object_id=str(project.pk))
    assert user_client.post(SETS, payload(project)).status_code == 201


def test_list_requires_existing_project(api_client):
    project = ProjectFactory()
    TranslationSetFactory(project=project, locale='fr')
    TranslationSetFactory(project=project, locale='de')
    TranslationSetFactory()

    missing = api_client.get(SETS)
    listed = api_client.get(SETS, {'project_id': project.pk})

    assert missing.status_code == 404
    assert missing.data['code'] == 'project_not_found'
    assert listed.status_code == 200
    assert [s['locale'] for s in listed.data] == ['de', 'fr']


def test_update_and_delete(superuser_client):
    translation_set = TranslationSetFactory(name='Ancien nom')

    updated = superuser_client.put(f'{SETS}{translation_set.pk}/', {'name': 'Nouveau nom', 'slug': 'formel'})
    deleted = superuser_client.delete(f'{SETS}{translation_set.pk}/')
    missing = superuser_client.get(f'{SETS}{translation_set.pk}/')

    assert updated.status_code == 200
    assert updated.data['name'] == 'Nouveau nom'
    assert updated.data['slug'] == 'formel'
    assert deleted.status_code == 204
    assert not TranslationSet.objects.filter(pk=translation_set.pk).exists()
    assert missing.status_code == 404
    assert missing.data['code'] == 'translation_set_not_found'


def test_delete_unknown(superuser_client):
    response = superuser_client.delete(f'{SETS}4242/')

    assert response.status_code == 404
    assert response.data['code'] == 'translation_set_not_found'


def test_update_conflict(superuser_client):
    project = ProjectFactory()
    TranslationSetFactory(project=project, slug='default')
    other = TranslationSetFactory(project=project, slug='formel')

    response = superuser_client.put(f'{SETS}{other.pk}/', {'slug': 'default'})

    assert response.status_code == 409
