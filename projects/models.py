# =============================================================================
# APP: projects (Projets et permissions de validation)
# =============================================================================

# projects/models.py
from django.conf import settings
from django.db import models
from django.db.models import Q


class Project(models.Model):
    """Projet de traduction, éventuellement rattaché à un projet parent"""
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255)
    path = models.CharField(max_length=1024, editable=False, db_index=True)
    description = models.TextField(blank=True, default='')
    parent_project = models.ForeignKey(
        'self', on_delete=models.CASCADE, related_name='sub_projects', blank=True, null=True
    )
    source_url_template = models.CharField(max_length=500, blank=True, default='')
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(fields=['parent_project', 'slug'], name='unique_project_slug_per_parent'),
            models.UniqueConstraint(
                fields=['slug'], condition=Q(parent_project__isnull=True), name='unique_root_project_slug'
            ),
        ]

    def __str__(self):
        return self.name

    def build_path(self):
        if self.parent_project_id:
            return f"{self.parent_project.path}/{self.slug}"
        return self.slug

    def save(self, *args, **kwargs):
        old_path = self.path
        self.path = self.build_path()
        super().save(*args, **kwargs)
        # Propager le nouveau chemin aux sous-projets
        if old_path and old_path != self.path:
            for child in self.sub_projects.all():
                child.save()

    def path_to_root(self):
        """Le projet puis ses ancêtres, du plus proche au plus lointain"""
        chain, seen = [], set()
        project = self
        while project is not None and project.pk not in seen:
            chain.append(project)
            seen.add(project.pk)
            project = project.parent_project
        return chain

    def is_descendant_of(self, other):
        return any(ancestor.pk == other.pk for ancestor in self.path_to_root()[1:])

    @property
    def parent_project_pk(self):
        return self.parent_project_id or 0


class ValidatorPermission(models.Model):
    """Droit de valider les traductions d'un jeu (projet, langue, slug du jeu)"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='validator_permissions')
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='validator_permissions')
    locale_slug = models.CharField(max_length=10)
    set_slug = models.CharField(max_length=255)
    action = models.CharField(max_length=20, default='approve')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']
        unique_together = ('user', 'project', 'locale_slug', 'set_slug', 'action')

    def __str__(self):
        return f"{self.user} - {self.action} - {self.project.slug}/{self.locale_slug}/{self.set_slug}"
