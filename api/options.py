# =============================================================================
# APP: api - Valeurs autorisées pour le tri et les filtres
# =============================================================================

# api/options.py

SORT_BY_CHOICES = (
    ('original_date_added', "Date d'ajout de l'original"),
    ('translation_date_added', "Date d'ajout de la traduction"),
    ('translation_date_modified', 'Date de modification de la traduction'),
    ('original', 'Chaîne originale'),
    ('translation', 'Traduction'),
    ('priority', 'Priorité'),
    ('references', 'Références'),
    ('length', 'Longueur de la chaîne originale'),
    ('random', 'Aléatoire'),
)
DEFAULT_SORT_BY = 'priority'

SORT_ORDER_CHOICES = (
    ('asc', 'Croissant'),
    ('desc', 'Décroissant'),
)
DEFAULT_SORT_ORDER = 'desc'

TERM_SCOPE_CHOICES = (
    ('scope_originals', 'Originaux uniquement'),
    ('scope_translations', 'Traductions uniquement'),
    ('scope_context', 'Contexte uniquement'),
    ('scope_references', 'Références uniquement'),
    ('scope_both', 'Originaux et traductions'),
    ('scope_any', "N'importe où"),
)
DEFAULT_TERM_SCOPE = 'scope_any'

FILTER_STATUS_CHOICES = (
    ('current', 'Actuelle'),
    ('waiting', 'En attente'),
    ('fuzzy', 'Approximative'),
    ('untranslated', 'Non traduite'),
    ('rejected', 'Rejetée'),
    ('old', 'Ancienne'),
)

FILTER_OPTION_CHOICES = (
    ('with_comment', 'Avec commentaire'),
    ('with_context', 'Avec contexte'),
    ('warnings', 'Avec avertissements'),
    ('with_plural', 'Avec pluriel'),
)


def values(choices):
    return [value for value, _ in choices]
