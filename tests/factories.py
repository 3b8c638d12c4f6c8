# =============================================================================
# Fabriques de données de test
# =============================================================================

import factory
from django.utils.text import slugify
from factory.django import DjangoModelFactory, Password

from accounts.models import ObjectPermission, User
from glossaries.models import Glossary, GlossaryEntry
from projects.models import Project, ValidatorPermission
from translations.models import Original, Translation, TranslationSet


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f'traducteur{n}')
    email = factory.LazyAttribute(lambda o: f'{o.username}@example.com')
    display_name = factory.LazyAttribute(lambda o: o.username.capitalize())
    password = Password('motdepasse-solide')
    is_active = True


class ObjectPermissionFactory(DjangoModelFactory):
    class Meta:
        model = ObjectPermission

    user = factory.SubFactory(UserFactory)
    action = 'write'
    object_type = 'project'
    object_id = None


class ProjectFactory(DjangoModelFactory):
    class Meta:
        model = Project

    name = factory.Sequence(lambda n: f'Projet {n}')
    slug = factory.LazyAttribute(lambda o: slugify(o.name))
    description = ''
    parent_project = None


class TranslationSetFactory(DjangoModelFactory):
    class Meta:
        model = TranslationSet

    project = factory.SubFactory(ProjectFactory)
    locale = 'fr'
    name = 'Français'
    slug = 'default'


class ValidatorPermissionFactory(DjangoModelFactory):
    class Meta:
        model = ValidatorPermission

    user = factory.SubFactory(UserFactory)
    project = factory.SubFactory(ProjectFactory)
    locale_slug = 'fr'
    set_slug = 'default'
    action = 'approve'


class OriginalFactory(DjangoModelFactory):
    class Meta:
        model = Original

    project = factory.SubFactory(ProjectFactory)
    singular = factory.Sequence(lambda n: f'Original string {n}')
    plural = None
    context = None
    comment = None
    references = factory.LazyFunction(list)


class TranslationFactory(DjangoModelFactory):
    class Meta:
        model = Translation

    original = factory.SubFactory(OriginalFactory)
    translation_set = factory.SubFactory(TranslationSetFactory, project=factory.SelfAttribute('..original.project'))
    translation_0 = factory.Sequence(lambda n: f'Chaîne traduite {n}')
    status = 'current'
    user = factory.SubFactory(UserFactory)


class GlossaryFactory(DjangoModelFactory):
    class Meta:
        model = Glossary

    translation_set = factory.SubFactory(TranslationSetFactory)
    description = ''


class GlossaryEntryFactory(DjangoModelFactory):
    class Meta:
        model = GlossaryEntry

    glossary = factory.SubFactory(GlossaryFactory)
    term = factory.Sequence(lambda n: f'term{n}')
    translation = factory.Sequence(lambda n: f'terme{n}')
    part_of_speech = 'noun'
