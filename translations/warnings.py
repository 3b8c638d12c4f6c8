# =============================================================================
# APP: translations - Vérifications automatiques des traductions
# =============================================================================

# translations/warnings.py
import re

# Bornes du rapport de longueur traduction / original
LENGTH_LOWER_BOUND = 0.2
LENGTH_UPPER_BOUND = 5.0

_NAMED_FORMATS = re.compile(r'%\([a-zA-Z0-9_]+\)[sdfluxXeEfFgG]')
_POSITIONAL_FORMATS = re.compile(r'%\d+\$[sdfluxXeEfFgG]')
_OLD_FORMATS = re.compile(r'%[sdfluxXeEfFgG]')
_SIMPLE_VARS = re.compile(r'{\s*[a-zA-Z0-9_\.]+\s*}')
_HTML_TAGS = re.compile(r'</?([a-zA-Z][a-zA-Z0-9]*)(?:\s[^>]*)?/?>')


def extract_placeholders(text):
    """Variables %(var)s, %1$s, %s et {var} présentes dans le texte"""
    text = text or ''
    named = _NAMED_FORMATS.findall(text)
    positional = _POSITIONAL_FORMATS.findall(text)
    # On masque les formats déjà reconnus avant de chercher les anciens formats
    masked = _POSITIONAL_FORMATS.sub('', _NAMED_FORMATS.sub('', text))
    old = _OLD_FORMATS.findall(masked.replace('%%', ''))
    simple = [re.sub(r'\s+', '', var) for var in _SIMPLE_VARS.findall(text)]
    return sorted(named + positional + old + simple)


def extract_html_tags(text):
    return [match.group(0).lower().split()[0].rstrip('>/') for match in _HTML_TAGS.finditer(text or '')]


def _source_for(original, index):
    if index == 0 or not original.plural:
        return original.singular
    return original.plural


def check_placeholders(source, translation):
    expected, found = extract_placeholders(source), extract_placeholders(translation)
    if expected != found:
        return f"Variables modifiées : {expected} → {found}"
    return None


def check_tags(source, translation):
    expected, found = extract_html_tags(source), extract_html_tags(translation)
    if sorted(expected) != sorted(found):
        return f"Balises HTML modifiées : {expected} → {found}"
    return None


def check_length(source, translation):
    len_src, len_trans = len(source or ''), len(translation or '')
    if not len_src or not len_trans:
        return None
    if not (LENGTH_LOWER_BOUND * len_src < len_trans < LENGTH_UPPER_BOUND * len_src):
        return "Longueur de la traduction très différente de celle de l'original."
    return None


def check_whitespace(source, translation):
    source, translation = source or '', translation or ''
    if source[:1].isspace() != translation[:1].isspace():
        return "Espaces en début de chaîne différents de l'original."
    if source[-1:].isspace() != translation[-1:].isspace():
        return "Espaces en fin de chaîne différents de l'original."
    return None


CHECKS = (check_placeholders, check_tags, check_length, check_whitespace)


def check_warnings(original, forms, locale=None):
    """Liste des avertissements pour chaque forme plurielle non vide"""
    warnings = []
    for index, translation in enumerate(forms):
        if not translation:
            continue
        source = _source_for(original, index)
        for check in CHECKS:
            message = check(source, translation)
            if message:
                warnings.append(f"Forme {index} : {message}")
    return warnings


def check_errors(original, forms, locale):
    """Erreurs bloquantes : la traduction est refusée si la liste n'est pas vide"""
    errors = []
    if not forms or not forms[0]:
        errors.append("La première forme de la traduction est obligatoire.")
    expected = locale.nplurals if original.plural else 1
    filled = [i for i, form in enumerate(forms) if form]
    if filled and filled[-1] >= expected:
        if original.plural:
            errors.append(f"La langue {locale.slug} n'accepte que {expected} forme(s) plurielle(s).")
        else:
            errors.append("L'original n'a pas de pluriel : une seule forme est attendue.")
    return errors
