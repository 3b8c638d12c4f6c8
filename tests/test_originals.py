import os

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from translations.models import Original, Translation
from .conftest import API
from .factories import (
    ObjectPermissionFactory, OriginalFactory, ProjectFactory, TranslationFactory, TranslationSetFactory,
)

pytestmark = pytest.mark.django_db

ORIGINALS = f'{API}/originals/'
IMPORT = f'{ORIGINALS}import/'

PO_CONTENT = b'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

#: src/app.py:10
msgid "Hello"
msgstr ""

msgctxt "menu"
msgid "File"
msgstr ""

msgid "One file"
msgid_plural "%d files"
msgstr[0] ""
msgstr[1] ""
'''


def upload(name, content):
    return SimpleUploadedFile(name, content, content_type='application/octet-stream')


# =============================================================================
# LISTE, FILTRES, TRI
# =============================================================================

class TestOriginalList:

    def test_list_requires_project(self, api_client):
        response = api_client.get(ORIGINALS)

        assert response.status_code == 404
        assert response.data['code'] == 'project_not_found'

    def test_list_is_paginated_with_headers(self, api_client):
        project = ProjectFactory()
        OriginalFactory.create_batch(3, project=project)

        response = api_client.get(ORIGINALS, {'project_id': project.pk, 'per_page': 2})

        assert response.status_code == 200
        assert len(response.data) == 2
        assert response['X-Total-Count'] == '3'
        assert response['X-Total-Pages'] == '2'
        assert 'rel="next"' in response['Link']

    def test_page_out_of_range(self, api_client):
        project = ProjectFactory()
        OriginalFactory(project=project)

        response = api_client.get(ORIGINALS, {'project_id': project.pk, 'page': 5})

        assert response.status_code == 400
        assert response.data['code'] == 'rest_invalid_page_number'

    def test_filter_by_term(self, api_client):
        project = ProjectFactory()
        OriginalFactory(project=project, singular='Hello world')
        OriginalFactory(project=project, singular='Goodbye')

        response = api_client.get(ORIGINALS, {'project_id': project.pk, 'filters_term': 'hello'})

        assert [o['singular'] for o in response.data] == ['Hello world']

    def test_filter_term_in_translations(self, api_client):
        project = ProjectFactory()
        translation_set = TranslationSetFactory(project=project)
        matching = OriginalFactory(project=project, singular='Save')
        OriginalFactory(project=project, singular='Cancel')
        TranslationFactory(original=matching, translation_set=translation_set, translation_0='Enregistrer')

        response = api_client.get(ORIGINALS, {
            'project_id': project.pk, 'translation_set_id': translation_set.pk,
            'filters_term': 'enregistrer', 'filters_term_scope': 'scope_translations',
        })

        assert [o['id'] for o in response.data] == [matching.pk]

    def test_filter_untranslated(self, api_client):
        project = ProjectFactory()
        translation_set = TranslationSetFactory(project=project)
        translated = OriginalFactory(project=project)
        untranslated = OriginalFactory(project=project)
        TranslationFactory(original=translated, translation_set=translation_set)

        response = api_client.get(ORIGINALS, {
            'project_id': project.pk, 'translation_set_id': translation_set.pk,
            'filters_status': 'untranslated',
        })

        assert [o['id'] for o in response.data] == [untranslated.pk]

    def test_filter_options(self, api_client):
        project = ProjectFactory()
        with_context = OriginalFactory(project=project, context='menu')
        OriginalFactory(project=project)

        response = api_client.get(ORIGINALS, {'project_id': project.pk, 'filters_options': 'with_context'})

        assert [o['id'] for o in response.data] == [with_context.pk]

    def test_unknown_filter_values_are_ignored(self, api_client):
        project = ProjectFactory()
        OriginalFactory.create_batch(2, project=project)

        response = api_client.get(ORIGINALS, {
            'project_id': project.pk, 'filters_status': 'inconnu', 'sort_by': 'nimporte', 'sort_order': 'sideways',
        })

        assert response.status_code == 200
        assert len(response.data) == 2

    def test_sort_by_original(self, api_client):
        project = ProjectFactory()
        for singular in ('Banana', 'Cherry', 'Apple'):
            OriginalFactory(project=project, singular=singular)

        response = api_client.get(ORIGINALS, {'project_id': project.pk, 'sort_by': 'original', 'sort_order': 'asc'})

        assert [o['singular'] for o in response.data] == ['Apple', 'Banana', 'Cherry']

    def test_default_sort_is_priority_desc(self, api_client):
        project = ProjectFactory()
        low = OriginalFactory(project=project, priority=-1)
        high = OriginalFactory(project=project, priority=1)

        response = api_client.get(ORIGINALS, {'project_id': project.pk})

        assert [o['id'] for o in response.data] == [high.pk, low.pk]

    def test_translation_set_of_other_project(self, api_client):
        project = ProjectFactory()
        foreign_set = TranslationSetFactory()

        response = api_client.get(ORIGINALS, {'project_id': project.pk, 'translation_set_id': foreign_set.pk})

        assert response.status_code == 404
        assert response.data['code'] == 'translation_set_not_found'


def test_delete_original(superuser_client, user_client):
    original = OriginalFactory()

    assert user_client.delete(f'{ORIGINALS}{original.pk}/').status_code == 403
    assert superuser_client.delete(f'{ORIGINALS}{original.pk}/').status_code == 204
    assert not Original.objects.filter(pk=original.pk).exists()
    missing = superuser_client.get(f'{ORIGINALS}{original.pk}/')
    assert missing.status_code == 404
    assert missing.data['code'] == 'original_not_found'


def test_delete_unknown_original(superuser_client):
    response = superuser_client.delete(f'{ORIGINALS}4242/')

    assert response.status_code == 404
    assert response.data['code'] == 'original_not_found'


# =============================================================================
# IMPORT
# =============================================================================

class TestOriginalImport:

    def test_import_po_file(self, superuser_client, import_dir):
        project = ProjectFactory()

        response = superuser_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('messages.po', PO_CONTENT)}, format='multipart'
        )

        assert response.status_code == 200
        assert response.data == {'added': 3, 'existing': 0, 'fuzzied': 0, 'obsoleted': 0, 'error': 0}
        hello = Original.objects.get(project=project, singular='Hello')
        assert hello.references == ['src/app.py:10']
        assert Original.objects.get(project=project, singular='File').context == 'menu'
        assert Original.objects.get(project=project, singular='One file').plural == '%d files'
        # Le fichier temporaire est supprimé après l'import
        assert os.listdir(import_dir) == []

    def test_reimport_counts_existing_fuzzied_and_obsoleted(self, superuser_client):
        project = ProjectFactory()
        translation_set = TranslationSetFactory(project=project)
        hello = OriginalFactory(project=project, singular='Hello')
        OriginalFactory(project=project, singular='Obsolete entry', context='old')
        OriginalFactory(project=project, singular='Keep me')
        translation = TranslationFactory(original=hello, translation_set=translation_set, status='current')
        content = b'{"Hello!": "", "Keep me": "", "Brand new": ""}'

        response = superuser_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('strings.json', content)}, format='multipart'
        )

        assert response.data == {'added': 1, 'existing': 1, 'fuzzied': 1, 'obsoleted': 1, 'error': 0}
        translation.refresh_from_db()
        assert translation.status == 'fuzzy'
        assert Original.objects.get(singular='Obsolete entry').status == '-obsolete'

    def test_explicit_format(self, superuser_client):
        project = ProjectFactory()
        content = b'{"app": {"title": "My application"}}'

        response = superuser_client.post(
            IMPORT, {'project_id': project.pk, 'format': 'ngx', 'file': upload('fr.json', content)},
            format='multipart',
        )

        assert response.data['added'] == 1
        assert Original.objects.get(project=project).context == 'app.title'

    def test_unknown_format(self, superuser_client):
        project = ProjectFactory()

        response = superuser_client.post(
            IMPORT, {'project_id': project.pk, 'format': 'docx', 'file': upload('a.po', PO_CONTENT)},
            format='multipart',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'invalid_import_format'

    def test_extension_not_recognised(self, superuser_client):
        project = ProjectFactory()

        response = superuser_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('notes.txt', b'hello')}, format='multipart'
        )

        assert response.status_code == 400
        assert response.data['code'] == 'invalid_import_format'

    def test_missing_file(self, superuser_client):
        project = ProjectFactory()

        response = superuser_client.post(IMPORT, {'project_id': project.pk}, format='multipart')

        assert response.status_code == 400
        assert response.data['code'] == 'import_missing_parameters'

    def test_unparsable_file(self, superuser_client, import_dir):
        project = ProjectFactory()

        response = superuser_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('broken.json', b'{not json')}, format='multipart'
        )

        assert response.status_code == 400
        assert response.data['code'] == 'import_file_unparsable'
        assert os.listdir(import_dir) == []

    def test_import_requires_write(self, user, user_client):
        project = ProjectFactory()

        response = user_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('messages.po', PO_CONTENT)}, format='multipart'
        )
        assert response.status_code == 403

        ObjectPermissionFactory(user=user, action='write', object_type='project', object_id=str(project.pk))
        response = user_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('messages.po', PO_CONTENT)}, format='multipart'
        )
        assert response.status_code == 200

    def test_unknown_project(self, superuser_client):
        response = superuser_client.post(
            IMPORT, {'project_id': 999, 'file': upload('messages.po', PO_CONTENT)}, format='multipart'
        )

        assert response.status_code == 404

    def test_translations_are_kept_on_exact_match(self, superuser_client):
        project = ProjectFactory()
        original = OriginalFactory(project=project, singular='Hello')
        translation = TranslationFactory(original=original, status='current')

        superuser_client.post(
            IMPORT, {'project_id': project.pk, 'file': upload('a.json', b'{"Hello": ""}')}, format='multipart'
        )

        assert Translation.objects.get(pk=translation.pk).status == 'current'
