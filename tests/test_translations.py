import pytest

from translations.models import Translation
from .conftest import API
from .factories import (
    OriginalFactory, ProjectFactory, TranslationFactory, TranslationSetFactory, UserFactory,
    ValidatorPermissionFactory,
)

pytestmark = pytest.mark.django_db

TRANSLATIONS = f'{API}/translations/'


@pytest.fixture
def translation_set():
    return TranslationSetFactory(project=ProjectFactory(slug='site'), locale='fr', slug='default')


@pytest.fixture
def original(translation_set):
    return OriginalFactory(project=translation_set.project, singular='Save changes')


def payload(translation_set, original, forms):
    return {'translation_set_id': translation_set.pk, 'original_id': original.pk, 'translations': forms}


class TestTranslationCreate:

    def test_contributor_translation_is_waiting(self, user, user_client, translation_set, original):
        response = user_client.post(TRANSLATIONS, payload(translation_set, original, ['Enregistrer']))

        assert response.status_code == 201
        assert response.data['status'] == 'waiting'
        assert response.data['translations'] == ['Enregistrer']
        assert response.data['user_id'] == user.pk

    def test_validator_translation_is_current(self, client_for, translation_set, original):
        validator = UserFactory()
        ValidatorPermissionFactory(user=validator, project=translation_set.project, locale_slug='fr', set_slug='default')
        previous = TranslationFactory(original=original, translation_set=translation_set, status='current')

        response = client_for(validator).post(TRANSLATIONS, payload(translation_set, original, ['Enregistrer']))

        assert response.status_code == 201
        assert response.data['status'] == 'current'
        previous.refresh_from_db()
        assert previous.status == 'old'

    def test_validator_of_parent_project(self, client_for, original, translation_set):
        parent = ProjectFactory()
        project = translation_set.project
        project.parent_project = parent
        project.save()
        validator = UserFactory()
        ValidatorPermissionFactory(user=validator, project=parent, locale_slug='fr', set_slug='default')

        response = client_for(validator).post(TRANSLATIONS, payload(translation_set, original, ['Enregistrer']))

        assert response.data['status'] == 'current'

    def test_plural_forms(self, superuser_client, translation_set):
        original = OriginalFactory(project=translation_set.project, singular='%d file', plural='%d files')

        response = superuser_client.post(
            TRANSLATIONS, payload(translation_set, original, ['%d fichier', '%d fichiers'])
        )

        assert response.status_code == 201
        assert response.data['translations'] == ['%d fichier', '%d fichiers']
        assert Translation.objects.get(pk=response.data['id']).translation_1 == '%d fichiers'

    def test_indexed_form_keys(self, superuser_client, translation_set):
        original = OriginalFactory(project=translation_set.project, singular='%d file', plural='%d files')

        response = superuser_client.post(TRANSLATIONS, {
            'translation_set_id': translation_set.pk, 'original_id': original.pk,
            'translation_0': '%d fichier', 'translation_1': '%d fichiers',
        })

        assert response.status_code == 201
        assert response.data['translations'] == ['%d fichier', '%d fichiers']

    def test_warnings_are_recorded(self, superuser_client, translation_set):
        original = OriginalFactory(project=translation_set.project, singular='Hello %s')

        response = superuser_client.post(TRANSLATIONS, payload(translation_set, original, ['Bonjour']))

        assert response.status_code == 201
        assert response.data['warnings']
        assert response.data['warnings'][0].startswith('Forme 0')

    def test_too_many_forms_is_an_error(self, superuser_client, translation_set, original):
        response = superuser_client.post(TRANSLATIONS, payload(translation_set, original, ['Un', 'Deux']))

        assert response.status_code == 400
        assert response.data['code'] == 'translation_errors'
        assert response.data['errors']

    def test_empty_forms(self, superuser_client, translation_set, original):
        response = superuser_client.post(TRANSLATIONS, payload(translation_set, original, []))

        assert response.status_code == 400
        assert response.data['code'] == 'invalid_translation_data'

    def test_duplicate(self, superuser_client, translation_set, original):
        first = superuser_client.post(TRANSLATIONS, payload(translation_set, original, ['Enregistrer']))
        second = superuser_client.post(TRANSLATIONS, payload(translation_set, original, ['Enregistrer']))

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.data['code'] == 'translation_already_exists'

    def test_unknown_translation_set(self, superuser_client, original):
        response = superuser_client.post(
            TRANSLATIONS, {'translation_set_id': 8080, 'original_id': original.pk, 'translations': ['x']}
        )

        assert response.status_code == 404
        assert response.data['code'] == 'translation_set_not_found'
        assert not Translation.objects.exists()

    def test_original_of_another_project(self, superuser_client, translation_set):
        foreign = OriginalFactory()

        response = superuser_client.post(TRANSLATIONS, payload(translation_set, foreign, ['x']))

        assert response.status_code == 404
        assert response.data['code'] == 'original_not_found'

    def test_anonymous(self, api_client, translation_set, original):
        response = api_client.post(TRANSLATIONS, payload(translation_set, original, ['Enregistrer']))

        assert response.status_code == 401


class TestTranslationUpdateDelete:

    def test_author_can_edit_own_translation(self, user, user_client, translation_set, original):
        translation = TranslationFactory(
            original=original, translation_set=translation_set, user=user, status='waiting', translation_0='Sauver'
        )

        response = user_client.put(f'{TRANSLATIONS}{translation.pk}/', {'translations': ['Enregistrer']})

        assert response.status_code == 200
        assert response.data['translations'] == ['Enregistrer']
        assert response.data['status'] == 'waiting'

    def test_author_rewrite_of_current_translation_waits_for_review(self, user, user_client, translation_set,
                                                                     original):
        translation = TranslationFactory(
            original=original, translation_set=translation_set, user=user, status='current', translation_0='Sauver'
        )

        response = user_client.put(f'{TRANSLATIONS}{translation.pk}/', {'translations': ['Texte arbitraire']})

        assert response.status_code == 200
        assert response.data['translations'] == ['Texte arbitraire']
        assert response.data['status'] == 'waiting'

    def test_validator_rewrite_stays_current(self, client_for, translation_set, original):
        validator = UserFactory()
        ValidatorPermissionFactory(user=validator, project=translation_set.project)
        translation = TranslationFactory(original=original, translation_set=translation_set, status='current')

        response = client_for(validator).put(f'{TRANSLATIONS}{translation.pk}/', {'translations': ['Enregistrer']})

        assert response.status_code == 200
        assert response.data['status'] == 'current'

    def test_move_to_set_without_approval_rights(self, client_for, translation_set, original):
        validator = UserFactory()
        ValidatorPermissionFactory(user=validator, project=translation_set.project)
        translation = TranslationFactory(
            original=original, translation_set=translation_set, user=validator, status='current'
        )
        foreign_set = TranslationSetFactory(project=ProjectFactory(slug='autre'), locale='fr', slug='default')
        foreign_original = OriginalFactory(project=foreign_set.project)
        foreign_current = TranslationFactory(
            original=foreign_original, translation_set=foreign_set, status='current'
        )

        response = client_for(validator).put(f'{TRANSLATIONS}{translation.pk}/', {
            'translation_set_id': foreign_set.pk, 'original_id': foreign_original.pk,
        })

        assert response.status_code == 403
        translation.refresh_from_db()
        foreign_current.refresh_from_db()
        assert translation.translation_set_id == translation_set.pk
        assert foreign_current.status == 'current'

    def test_move_to_set_with_approval_rights(self, superuser_client, translation_set, original):
        translation = TranslationFactory(original=original, translation_set=translation_set, status='current')
        other_set = TranslationSetFactory(project=translation_set.project, locale='fr', slug='formal')

        response = superuser_client.put(f'{TRANSLATIONS}{translation.pk}/', {'translation_set_id': other_set.pk})

        assert response.status_code == 200
        assert response.data['translation_set_id'] == other_set.pk
        assert response.data['status'] == 'current'

    def test_author_cannot_approve(self, user, user_client, translation_set, original):
        translation = TranslationFactory(original=original, translation_set=translation_set, user=user, status='waiting')

        response = user_client.put(f'{TRANSLATIONS}{translation.pk}/', {'status': 'current'})

        assert response.status_code == 403

    def test_other_user_cannot_edit(self, user_client, translation_set, original):
        translation = TranslationFactory(original=original, translation_set=translation_set)

        response = user_client.put(f'{TRANSLATIONS}{translation.pk}/', {'translations': ['Autre']})

        assert response.status_code == 403

    def test_validator_approves(self, client_for, translation_set, original):
        validator = UserFactory()
        ValidatorPermissionFactory(user=validator, project=translation_set.project)
        current = TranslationFactory(original=original, translation_set=translation_set, status='current')
        waiting = TranslationFactory(original=original, translation_set=translation_set, status='waiting')

        response = client_for(validator).put(f'{TRANSLATIONS}{waiting.pk}/', {'status': 'current'})

        assert response.status_code == 200
        assert response.data['status'] == 'current'
        current.refresh_from_db()
        assert current.status == 'old'

    def test_unknown_status(self, superuser_client, translation_set, original):
        translation = TranslationFactory(original=original, translation_set=translation_set)

        response = superuser_client.put(f'{TRANSLATIONS}{translation.pk}/', {'status': 'perdue'})

        assert response.status_code == 400
        assert response.data['code'] == 'invalid_translation_data'

    def test_retrieve_and_delete(self, superuser_client, translation_set, original):
        translation = TranslationFactory(original=original, translation_set=translation_set)

        retrieved = superuser_client.get(f'{TRANSLATIONS}{translation.pk}/')
        deleted = superuser_client.delete(f'{TRANSLATIONS}{translation.pk}/')
        missing = superuser_client.get(f'{TRANSLATIONS}{translation.pk}/')

        assert retrieved.status_code == 200
        assert retrieved.data['original_id'] == original.pk
        assert deleted.status_code == 204
        assert missing.status_code == 404
        assert missing.data['code'] == 'translation_not_found'


def test_formats_are_listed(api_client):
    response = api_client.get(f'{API}/formats/')

    slugs = [f['slug'] for f in response.data]
    assert response.status_code == 200
    assert {'po', 'mo', 'json', 'android', 'strings', 'properties'} <= set(slugs)
    assert response['X-Total-Count'] == str(len(slugs))
