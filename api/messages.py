# =============================================================================
# APP: api - Messages d'erreur canoniques
# =============================================================================

# api/messages.py

# Libellés par type de ressource : (nom, complément "de ...")
RESOURCE_LABELS = {
    'project': ('Projet', 'du projet'),
    'translation_set': ('Jeu de traductions', 'du jeu de traductions'),
    'original': ('Chaîne originale', 'de la chaîne originale'),
    'translation': ('Traduction', 'de la traduction'),
    'glossary': ('Glossaire', 'du glossaire'),
    'glossary_entry': ('Entrée de glossaire', "de l'entrée de glossaire"),
    'project_permission': ('Permission de projet', 'de la permission de projet'),
    'locale': ('Langue', 'de la langue'),
    'user': ('Utilisateur', "de l'utilisateur"),
    'profile': ('Profil', 'du profil'),
    'import': ('Import', "de l'import"),
}

ALREADY_EXISTS = {
    'project': 'Un projet avec ce slug existe déjà sous ce parent.',
    'translation_set': 'Un jeu de traductions avec ce slug existe déjà pour ce projet et cette langue.',
    'original': 'Cette chaîne originale existe déjà.',
    'translation': 'Une traduction identique existe déjà.',
    'glossary': 'Un glossaire existe déjà pour ce jeu de traductions.',
    'glossary_entry': 'Une entrée identique existe déjà dans ce glossaire.',
    'project_permission': 'Cet utilisateur possède déjà cette permission.',
}

OPERATION_LABELS = {
    'creation': 'de la création',
    'update': 'de la mise à jour',
    'deletion': 'de la suppression',
}

# Statuts HTTP associés aux suffixes de code
KIND_STATUS = {
    'not_found': 404,
    'already_exists': 409,
    'creation_failed': 500,
    'update_failed': 500,
    'deletion_failed': 500,
    'missing_parameters': 400,
}

GENERIC_MESSAGES = {
    'rest_forbidden': "Vous n'avez pas la permission d'effectuer cette action.",
    'rest_not_logged_in': "Vous devez être connecté pour effectuer cette action.",
    'rest_invalid_json': 'Le corps de la requête est invalide.',
    'rest_no_route': 'Aucune route ne correspond à cette URL et à cette méthode.',
    'rest_unsupported_media_type': 'Type de contenu non supporté.',
    'rest_throttled': 'Trop de requêtes.',
    'rest_error': 'Une erreur inattendue est survenue.',
    'translation_errors': 'La traduction contient des erreurs.',
}


def label(resource):
    return RESOURCE_LABELS.get(resource, (resource.replace('_', ' ').capitalize(), f'de {resource}'))


def not_found_message(resource):
    return f"{label(resource)[0]} introuvable."


def already_exists_message(resource):
    return ALREADY_EXISTS.get(resource, f"{label(resource)[0]} existe déjà.")


def operation_failed_message(resource, operation):
    return f"Erreur lors {OPERATION_LABELS.get(operation, operation)} {label(resource)[1]}."


def missing_parameters_message(resource):
    return f"Paramètres obligatoires manquants pour la ressource {label(resource)[0].lower()}."


def invalid_data_message(resource):
    return f"Données invalides {label(resource)[1]}."
