# =============================================================================
# APP: translations - Models (jeux de traductions, originaux, traductions)
# =============================================================================

# translations/models.py
from django.conf import settings
from django.db import models

from projects.models import Project

# Nombre maximal de formes plurielles stockées par traduction
PLURAL_FORMS_MAX = 6


class TranslationSet(models.Model):
    """Ensemble des traductions d'un projet vers une langue"""
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255)
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='translation_sets')
    locale = models.CharField(max_length=10, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['project_id', 'locale', 'slug']
        unique_together = ('project', 'locale', 'slug')

    def __str__(self):
        return f"{self.project.slug}/{self.locale}/{self.slug}"


class Original(models.Model):
    """Chaîne source à traduire"""
    STATUS_CHOICES = [
        ('+active', 'Active'),
        ('-obsolete', 'Obsolète'),
    ]

    PRIORITY_CHOICES = [
        (-2, 'Masquée'),
        (-1, 'Basse'),
        (0, 'Normale'),
        (1, 'Haute'),
    ]

    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='originals')
    context = models.CharField(max_length=255, blank=True, null=True)
    singular = models.TextField()
    plural = models.TextField(blank=True, null=True)
    comment = models.TextField(blank=True, null=True)
    references = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='+active', db_index=True)
    priority = models.SmallIntegerField(choices=PRIORITY_CHOICES, default=0)
    date_added = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-priority', 'id']
        indexes = [
            models.Index(fields=['project', 'status'], name='translation_project_5b8e21_idx'),
        ]

    def __str__(self):
        return self.singular[:50]

    @property
    def is_active(self):
        return self.status == '+active'

    def key(self):
        """Identité d'un original : (singulier, pluriel, contexte)"""
        return (self.singular, self.plural or None, self.context or None)


class Translation(models.Model):
    """Traduction d'un original dans un jeu de traductions"""
    STATUS_CHOICES = [
        ('current', 'Actuelle'),
        ('waiting', 'En attente'),
        ('fuzzy', 'Approximative'),
        ('old', 'Ancienne'),
    ]

    original = models.ForeignKey(Original, on_delete=models.CASCADE, related_name='translations')
    translation_set = models.ForeignKey(TranslationSet, on_delete=models.CASCADE, related_name='translations')
    translation_0 = models.TextField()
    translation_1 = models.TextField(blank=True, null=True)
    translation_2 = models.TextField(blank=True, null=True)
    translation_3 = models.TextField(blank=True, null=True)
    translation_4 = models.TextField(blank=True, null=True)
    translation_5 = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='waiting', db_index=True)
    warnings = models.JSONField(default=list, blank=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True, related_name='translations'
    )
    user_last_modified = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True, related_name='+'
    )
    date_added = models.DateTimeField(auto_now_add=True)
    date_modified = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date_modified', '-id']
        indexes = [
            models.Index(fields=['original', 'translation_set', 'status'], name='translation_origina_3d0c4e_idx'),
            models.Index(fields=['user', 'date_modified'], name='translation_user_id_9a7f12_idx'),
        ]

    def __str__(self):
        return f"{self.translation_set} #{self.original_id} ({self.status})"

    @property
    def forms(self):
        """Formes plurielles non vides, dans l'ordre"""
        values = [getattr(self, f'translation_{i}') for i in range(PLURAL_FORMS_MAX)]
        while values and values[-1] in (None, ''):
            values.pop()
        return values

    def set_forms(self, forms):
        for i in range(PLURAL_FORMS_MAX):
            setattr(self, f'translation_{i}', forms[i] if i < len(forms) else None)

    def padded_forms(self, size=PLURAL_FORMS_MAX):
        return pad_forms(self.forms, size)


def pad_forms(forms, size=PLURAL_FORMS_MAX):
    """Complète la liste avec None jusqu'à `size` éléments"""
    forms = [form if form != '' else None for form in list(forms)[:size]]
    return forms + [None] * (size - len(forms))
