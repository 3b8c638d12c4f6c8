# =============================================================================
# APP: projects - Views
# =============================================================================

# projects/views.py
import logging

from django.contrib.auth import get_user_model
from django.utils.text import slugify

from api.controllers import ResourceController
from api.exceptions import ResourceConflict, ValidationFailure
from api.validators import (
    bool_param, get_or_404, has_param, int_param, require_fields, require_locale,
    sanitize_text, text_param, textarea_param,
)
from translations.models import TranslationSet
from .models import Project, ValidatorPermission

logger = logging.getLogger(__name__)

User = get_user_model()


class ProjectViewSet(ResourceController):
    """CRUD des projets"""
    resource = 'project'

    def _read_values(self, request, project=None):
        """Valeurs soumises, complétées par celles du projet existant"""
        def pick(name, reader, current):
            return reader(request, name) if has_param(request, name) else current

        slug = pick('slug', text_param, project.slug if project else None)
        return {
            'name': pick('name', text_param, project.name if project else None),
            'slug': slugify(slug) if slug else slug,
            'description': pick('description', textarea_param, project.description if project else '') or '',
            'source_url_template': pick(
                'source_url_template', text_param, project.source_url_template if project else ''
            ) or '',
            'active': bool_param(request, 'active', project.active if project else True),
        }

    def _resolve_parent(self, request, project=None):
        if not has_param(request, 'parent_project_id'):
            return project.parent_project if project else None
        parent_id = int_param(request, 'parent_project_id')
        if not parent_id:
            return None
        return get_or_404(Project, 'project', pk=parent_id)

    def _check_unique(self, parent, slug, exclude=None):
        siblings = Project.objects.filter(parent_project=parent, slug=slug)
        if exclude is not None:
            siblings = siblings.exclude(pk=exclude.pk)
        if siblings.exists():
            raise ResourceConflict('project')

    def list(self, request):
        """Liste les projets, éventuellement filtrés par projet parent"""
        projects = Project.objects.select_related('parent_project')
        parent_id = int_param(request, 'parent_project_id')
        if parent_id:
            parent = get_or_404(Project, 'project', pk=parent_id)
            projects = projects.filter(parent_project=parent)
        return self.collection_response(projects.order_by('name', 'id'))

    def retrieve(self, request, pk=None):
        project = get_or_404(Project.objects.select_related('parent_project'), 'project', pk=pk)
        return self.item_response(project)

    def create(self, request):
        parent = self._resolve_parent(request)
        values = self._read_values(request)
        require_fields({'name': values['name'], 'slug': values['slug']}, 'project')
        self._check_unique(parent, values['slug'])
        self.authorize('write', 'project', parent.pk if parent else None)

        with self.store('creation'):
            project = Project.objects.create(parent_project=parent, **values)

        logger.info(f"Projet créé : {project.path} (id={project.pk}) par {request.user}")
        return self.created_response(project)

    def update(self, request, pk=None):
        project = get_or_404(Project.objects.select_related('parent_project'), 'project', pk=pk)
        self.authorize('write', 'project', project.pk)

        parent = self._resolve_parent(request, project)
        if parent is not None and (parent.pk == project.pk or parent.is_descendant_of(project)):
            raise ValidationFailure.invalid_data(
                'project', "Un projet ne peut pas être rattaché à lui-même ou à un de ses sous-projets."
            )
        values = self._read_values(request, project)
        require_fields({'name': values['name'], 'slug': values['slug']}, 'project')
        self._check_unique(parent, values['slug'], exclude=project)

        with self.store('update'):
            for field, value in values.items():
                setattr(project, field, value)
            project.parent_project = parent
            project.save()

        logger.info(f"Projet mis à jour : {project.path} (id={project.pk})")
        return self.item_response(project)

    def destroy(self, request, pk=None):
        project = get_or_404(Project, 'project', pk=pk)
        self.authorize('delete', 'project', project.pk)

        with self.store('deletion'):
            project.delete()

        logger.info(f"Projet supprimé : id={pk} par {request.user}")
        return self.deleted_response()


class ProjectPermissionViewSet(ResourceController):
    """Permissions de validation rattachées à un projet"""
    resource = 'project_permission'

    def _get_permission(self, project, pk):
        return get_or_404(
            ValidatorPermission.objects.select_related('user', 'project'),
            'project_permission', pk=pk, project=project,
        )

    def list(self, request, project_id=None):
        project = get_or_404(Project, 'project', pk=project_id)
        permissions = ValidatorPermission.objects.filter(project=project).select_related('user', 'project')
        return self.collection_response(permissions)

    def retrieve(self, request, project_id=None, pk=None):
        project = get_or_404(Project, 'project', pk=project_id)
        return self.item_response(self._get_permission(project, pk))

    def create(self, request, project_id=None):
        # Le projet vient toujours de l'URL, jamais du corps
        project = get_or_404(Project, 'project', pk=project_id)
        self.authorize('write', 'project', project.pk)

        user_login = text_param(request, 'user_login')
        user_id = int_param(request, 'user_id')
        locale_slug = text_param(request, 'locale_slug')
        set_slug = text_param(request, 'set_slug')
        require_fields(
            {'user_login': user_login or (str(user_id) if user_id else None),
             'locale_slug': locale_slug, 'set_slug': set_slug},
            'project_permission',
        )

        if user_login:
            user = get_or_404(User, 'user', username=user_login)
        else:
            user = get_or_404(User, 'user', pk=user_id)
        locale = require_locale(locale_slug)
        get_or_404(TranslationSet, 'translation_set', project=project, slug=set_slug, locale=locale.slug)

        if ValidatorPermission.objects.filter(
            user=user, project=project, locale_slug=locale.slug, set_slug=set_slug, action='approve'
        ).exists():
            raise ResourceConflict('project_permission')

        with self.store('creation'):
            permission = ValidatorPermission.objects.create(
                user=user, project=project, locale_slug=locale.slug,
                set_slug=sanitize_text(set_slug), action='approve',
            )

        logger.info(f"Permission de validation accordée à {user} sur {project.path}/{locale.slug}/{set_slug}")
        return self.created_response(permission)

    def destroy(self, request, project_id=None, pk=None):
        project = get_or_404(Project, 'project', pk=project_id)
        permission = self._get_permission(project, pk)
        self.authorize('write', 'project', project.pk)

        with self.store('deletion'):
            permission.delete()

        logger.info(f"Permission de validation {pk} retirée du projet {project.path}")
        return self.deleted_response()
