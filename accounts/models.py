# =============================================================================
# APP: accounts (Utilisateurs et permissions par objet)
# =============================================================================

# accounts/models.py
from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Modèle utilisateur étendu"""
    email = models.EmailField(blank=True)
    display_name = models.CharField(max_length=250, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def get_display_name(self):
        return self.display_name or self.get_full_name() or self.username

    def __str__(self):
        return self.username


class ObjectPermission(models.Model):
    """Droit accordé à un utilisateur sur un objet (ou sur tous les objets d'un type).

    object_type et object_id vides : droit global (ex. action "admin").
    """
    ACTION_CHOICES = [
        ('admin', 'Administration'),
        ('write', 'Écriture'),
        ('delete', 'Suppression'),
        ('approve', 'Validation'),
        ('edit', 'Modification'),
    ]

    OBJECT_TYPE_CHOICES = [
        ('project', 'Projet'),
        ('translation-set', 'Jeu de traductions'),
        ('translation', 'Traduction'),
        ('glossary', 'Glossaire'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='object_permissions')
    action = models.CharField(max_length=20, choices=ACTION_CHOICES)
    object_type = models.CharField(max_length=32, choices=OBJECT_TYPE_CHOICES, blank=True, null=True)
    object_id = models.CharField(max_length=64, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('user', 'action', 'object_type', 'object_id')
        indexes = [
            models.Index(fields=['user', 'action', 'object_type'], name='accounts_ob_user_id_7c1f3a_idx'),
        ]

    def __str__(self):
        target = f"{self.object_type}#{self.object_id or '*'}" if self.object_type else 'global'
        return f"{self.user} - {self.action} - {target}"
