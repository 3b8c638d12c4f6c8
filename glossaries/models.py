# =============================================================================
# APP: glossaries (Glossaires des jeux de traductions)
# =============================================================================

# glossaries/models.py
from django.conf import settings
from django.db import models

from translations.models import TranslationSet


class Glossary(models.Model):
    """Glossaire d'un jeu de traductions (un seul par jeu)"""
    translation_set = models.OneToOneField(TranslationSet, on_delete=models.CASCADE, related_name='glossary')
    description = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['id']
        verbose_name_plural = 'glossaries'

    def __str__(self):
        return f"Glossaire {self.translation_set}"


class GlossaryEntry(models.Model):
    """Terme du glossaire et sa traduction"""
    PART_OF_SPEECH_CHOICES = [
        ('noun', 'Nom'),
        ('verb', 'Verbe'),
        ('adjective', 'Adjectif'),
        ('adverb', 'Adverbe'),
        ('interjection', 'Interjection'),
        ('conjunction', 'Conjonction'),
        ('preposition', 'Préposition'),
        ('pronoun', 'Pronom'),
        ('expression', 'Expression'),
        ('abbreviation', 'Abréviation'),
    ]

    glossary = models.ForeignKey(Glossary, on_delete=models.CASCADE, related_name='entries')
    term = models.CharField(max_length=255)
    translation = models.CharField(max_length=255)
    part_of_speech = models.CharField(max_length=20, choices=PART_OF_SPEECH_CHOICES, blank=True, default='')
    comment = models.TextField(blank=True, default='')
    last_edited_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True, related_name='+'
    )
    date_modified = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['term', 'id']
        verbose_name_plural = 'glossary entries'

    def __str__(self):
        return f"{self.term} → {self.translation}"
