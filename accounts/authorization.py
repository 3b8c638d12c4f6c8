# =============================================================================
# APP: accounts - Règles d'autorisation
# =============================================================================

# accounts/authorization.py
from django.db.models import Q

from .models import ObjectPermission


def has_grant(user, action, object_type=None, object_id=None):
    """Droit explicite ; un object_id vide en base couvre tous les objets du type"""
    grants = ObjectPermission.objects.filter(user=user, action__in=(action, 'admin'), object_type=object_type)
    if object_id is None:
        return grants.filter(object_id__isnull=True).exists()
    return grants.filter(Q(object_id__isnull=True) | Q(object_id=str(object_id))).exists()


def can_project(user, action, project_id, extra=None):
    from projects.models import Project

    if not project_id:
        # Création d'un projet racine : droit global sur les projets
        return has_grant(user, action, 'project')
    project = Project.objects.get(pk=project_id)
    return any(has_grant(user, action, 'project', ancestor.pk) for ancestor in project.path_to_root())


def is_validator(user, translation_set):
    from projects.models import ValidatorPermission

    project_ids = [p.pk for p in translation_set.project.path_to_root()]
    return ValidatorPermission.objects.filter(
        user=user,
        project_id__in=project_ids,
        locale_slug=translation_set.locale,
        set_slug=translation_set.slug,
    ).exists()


def can_translation_set(user, action, set_id, extra=None):
    from translations.models import TranslationSet

    translation_set = TranslationSet.objects.select_related('project').get(pk=set_id)
    if has_grant(user, action, 'translation-set', translation_set.pk):
        return True
    if action == 'approve':
        return (
            is_validator(user, translation_set)
            or can_project(user, 'approve', translation_set.project_id)
            or can_project(user, 'write', translation_set.project_id)
        )
    if action in ('write', 'delete'):
        return can_project(user, action, translation_set.project_id)
    return False


def can_translation(user, action, translation_id, extra=None):
    from translations.models import Translation

    translation = Translation.objects.get(pk=translation_id)
    if action == 'edit' and translation.user_id == user.pk:
        return True
    if has_grant(user, action, 'translation', translation.pk):
        return True
    return can_translation_set(user, 'approve', translation.translation_set_id)


def can_glossary(user, action, glossary_id, extra=None):
    from glossaries.models import Glossary

    glossary = Glossary.objects.get(pk=glossary_id)
    if has_grant(user, action, 'glossary', glossary.pk):
        return True
    return can_translation_set(user, 'approve', glossary.translation_set_id)


OBJECT_RULES = {
    'project': can_project,
    'translation-set': can_translation_set,
    'translation': can_translation,
    'glossary': can_glossary,
}


def user_can(user, action, object_type=None, object_id=None, extra=None):
    """L'utilisateur peut-il effectuer `action` sur l'objet ?

    Les erreurs (objet absent, base indisponible) remontent à l'appelant.
    """
    if user is None or not user.is_authenticated or not user.is_active:
        return False
    if user.is_superuser or has_grant(user, 'admin'):
        return True
    rule = OBJECT_RULES.get(object_type)
    if rule is not None:
        return rule(user, action, object_id, extra)
    return has_grant(user, action, object_type, object_id)
