# =============================================================================
# APP: translations - Lecture des fichiers d'originaux (par format)
# =============================================================================

# translations/importers.py
import codecs
import json
import logging
import os
import re
import xml.etree.ElementTree as ET
from collections import namedtuple

import chardet
import polib

logger = logging.getLogger(__name__)

ImportedEntry = namedtuple('ImportedEntry', ['singular', 'plural', 'context', 'comment', 'references', 'priority'])

# Séparateur contexte / original dans les formats JSON de gettext
CONTEXT_SEPARATOR = '\u0004'


def make_entry(singular, plural=None, context=None, comment=None, references=None, priority=0):
    return ImportedEntry(
        singular=singular,
        plural=plural or None,
        context=context or None,
        comment=comment or None,
        references=list(references or []),
        priority=priority,
    )


class ImportParseError(Exception):
    """Le fichier ne peut pas être lu dans le format demandé"""


def detect_encoding(file_path, default='utf-8'):
    """Détecte l'encodage sur les premiers 10KB du fichier"""
    try:
        with open(file_path, 'rb') as f:
            raw_data = f.read(10000)
    except OSError as e:
        logger.warning(f"Erreur lors de la détection d'encodage, utilisation d'UTF-8 : {e}")
        return default

    if raw_data.startswith(codecs.BOM_UTF8):
        return 'utf-8-sig'
    result = chardet.detect(raw_data)
    encoding = result.get('encoding') or default
    confidence = result.get('confidence', 0) or 0
    # Si la confiance est trop faible, utiliser utf-8 par défaut
    if confidence < 0.7:
        return default
    return encoding


def flatten_json(data, parent_key='', separator='.'):
    """Aplatit une structure JSON imbriquée"""
    items = []
    if isinstance(data, dict):
        for key, value in data.items():
            new_key = f"{parent_key}{separator}{key}" if parent_key else key
            if isinstance(value, dict):
                items.extend(flatten_json(value, new_key, separator).items())
            else:
                items.append((new_key, value))
    return dict(items)


def split_context(key):
    if CONTEXT_SEPARATOR in key:
        context, singular = key.split(CONTEXT_SEPARATOR, 1)
        return context, singular
    return None, key


# =============================================================================
# PARSEURS
# =============================================================================

class Parser:
    """Lit un fichier et retourne la liste des originaux qu'il contient"""
    slug = None
    name = None
    extension = None
    alt_extensions = ()
    binary = False

    def read(self, file_path):
        encoding = None if self.binary else detect_encoding(file_path)
        try:
            return self.parse(file_path, encoding)
        except ImportParseError:
            raise
        except (ValueError, OSError, UnicodeDecodeError, ET.ParseError) as e:
            raise ImportParseError(f"Fichier {self.name} invalide : {e}")

    def parse(self, file_path, encoding):
        raise NotImplementedError

    def read_text(self, file_path, encoding):
        with open(file_path, 'r', encoding=encoding or 'utf-8') as f:
            return f.read()

    def describe(self):
        return {
            'slug': self.slug,
            'name': self.name,
            'extension': self.extension,
            'alt_extensions': list(self.alt_extensions),
        }


class PoParser(Parser):
    slug = 'po'
    name = 'Portable Object Message Catalog'
    extension = 'po'
    alt_extensions = ('pot',)

    def load(self, file_path, encoding):
        return polib.pofile(file_path, encoding=encoding or 'utf-8')

    def parse(self, file_path, encoding):
        catalog = self.load(file_path, encoding)
        entries = []
        for entry in catalog:
            if entry.obsolete or not entry.msgid:
                continue
            references = [f"{path}:{line}" if line else path for path, line in entry.occurrences]
            entries.append(make_entry(
                entry.msgid, entry.msgid_plural, entry.msgctxt, entry.comment, references,
            ))
        return entries


class MoParser(PoParser):
    slug = 'mo'
    name = 'Machine Object Message Catalog'
    extension = 'mo'
    alt_extensions = ()
    binary = True

    def load(self, file_path, encoding):
        return polib.mofile(file_path)


class JsonParser(Parser):
    """Objet JSON {"original": "traduction"} ; le contexte est préfixé par \\u0004"""
    slug = 'json'
    name = 'JSON (.json)'
    extension = 'json'

    def load(self, file_path, encoding):
        data = json.loads(self.read_text(file_path, encoding))
        if not isinstance(data, dict):
            raise ImportParseError('Le fichier JSON doit contenir un objet.')
        return data

    def parse(self, file_path, encoding):
        entries = []
        for key, value in self.load(file_path, encoding).items():
            if not key:
                continue
            context, singular = split_context(key)
            entries.append(make_entry(singular, context=context))
        return entries


class Jed1xParser(JsonParser):
    """Format Jed 1.x : {"locale_data": {"messages": {"": {...}, "original": [...]}}}"""
    slug = 'jed1x'
    name = 'Jed 1.x (.json)'
    alt_extensions = ()

    def parse(self, file_path, encoding):
        data = self.load(file_path, encoding)
        try:
            domain = data.get('domain', 'messages')
            messages = data['locale_data'][domain]
        except (KeyError, TypeError):
            raise ImportParseError("Structure Jed 1.x invalide : 'locale_data' introuvable.")
        entries = []
        for key in messages:
            if not key:
                continue
            context, singular = split_context(key)
            entries.append(make_entry(singular, context=context))
        return entries


class NgxParser(JsonParser):
    """Fichiers ngx-translate : les clés imbriquées deviennent le contexte"""
    slug = 'ngx'
    name = 'NGX-Translate (.json)'
    alt_extensions = ()

    def parse(self, file_path, encoding):
        entries = []
        for key, value in flatten_json(self.load(file_path, encoding)).items():
            if not isinstance(value, str) or not value:
                continue
            entries.append(make_entry(value, context=key))
        return entries


class AndroidParser(Parser):
    slug = 'android'
    name = 'Android XML (.xml)'
    extension = 'xml'

    def _text(self, element):
        text = ''.join(element.itertext())
        return text.replace("\\'", "'").replace('\\"', '"').replace('\\n', '\n')

    def parse(self, file_path, encoding):
        root = ET.fromstring(self.read_text(file_path, encoding).encode('utf-8'))
        if root.tag != 'resources':
            raise ImportParseError("Élément racine <resources> introuvable.")
        entries = []
        for element in root:
            if element.get('translatable') == 'false':
                continue
            name = element.get('name')
            if element.tag == 'string':
                entries.append(make_entry(self._text(element), context=name))
            elif element.tag == 'plurals':
                items = {item.get('quantity'): self._text(item) for item in element.findall('item')}
                singular = items.get('one') or items.get('other')
                if singular:
                    entries.append(make_entry(singular, items.get('other'), context=name))
            elif element.tag == 'string-array':
                for index, item in enumerate(element.findall('item')):
                    entries.append(make_entry(self._text(item), context=f"{name}[{index}]"))
        return entries


class ResxParser(Parser):
    slug = 'resx'
    name = '.NET Resource (.resx)'
    extension = 'resx'
    alt_extensions = ('resx.xml',)

    def parse(self, file_path, encoding):
        root = ET.fromstring(self.read_text(file_path, encoding).encode('utf-8'))
        entries = []
        for data in root.findall('data'):
            value = data.find('value')
            if value is None or not value.text or data.get('type'):
                continue
            comment = data.find('comment')
            entries.append(make_entry(
                value.text, context=data.get('name'), comment=comment.text if comment is not None else None,
            ))
        return entries


class StringsParser(Parser):
    """Fichiers .strings d'Apple : /* commentaire */ "clé" = "valeur";"""
    slug = 'strings'
    name = 'Mac OS X / iOS Strings File (.strings)'
    extension = 'strings'

    _PATTERN = re.compile(
        r'(?:/\*(?P<comment>.*?)\*/\s*)?"(?P<key>(?:[^"\\]|\\.)*)"\s*=\s*"(?P<value>(?:[^"\\]|\\.)*)"\s*;',
        re.DOTALL,
    )

    def _unescape(self, text):
        return text.replace('\\"', '"').replace('\\n', '\n').replace('\\\\', '\\')

    def parse(self, file_path, encoding):
        content = self.read_text(file_path, encoding)
        entries = []
        for match in self._PATTERN.finditer(content):
            comment = (match.group('comment') or '').strip()
            if comment == 'No comment provided by engineer.':
                comment = None
            entries.append(make_entry(
                self._unescape(match.group('value')), context=self._unescape(match.group('key')), comment=comment,
            ))
        if not entries and content.strip():
            raise ImportParseError("Aucune entrée \"clé\" = \"valeur\"; trouvée.")
        return entries


class PropertiesParser(Parser):
    """Fichiers .properties Java (clé = valeur, commentaires # ou !)"""
    slug = 'properties'
    name = 'Java Properties File (.properties)'
    extension = 'properties'

    def _logical_lines(self, content):
        buffer = ''
        for line in content.splitlines():
            stripped = line.lstrip()
            if stripped.endswith('\\') and not stripped.endswith('\\\\'):
                buffer += stripped[:-1]
                continue
            yield buffer + stripped
            buffer = ''
        if buffer:
            yield buffer

    def _unescape(self, text):
        text = re.sub(r'\\u([0-9a-fA-F]{4})', lambda m: chr(int(m.group(1), 16)), text)
        return re.sub(r'\\(.)', lambda m: {'n': '\n', 't': '\t'}.get(m.group(1), m.group(1)), text)

    def parse(self, file_path, encoding):
        entries, comments = [], []
        for line in self._logical_lines(self.read_text(file_path, encoding)):
            if not line:
                comments = []
                continue
            if line[0] in '#!':
                comments.append(line[1:].strip())
                continue
            match = re.match(r'((?:[^\\=:\s]|\\.)+)\s*[=:\s]\s*(.*)$', line)
            if not match:
                continue
            key, value = self._unescape(match.group(1)), self._unescape(match.group(2))
            if value:
                entries.append(make_entry(value, context=key, comment='\n'.join(comments)))
            comments = []
        return entries


PARSERS = {parser.slug: parser for parser in (
    AndroidParser(), PoParser(), MoParser(), ResxParser(), StringsParser(),
    PropertiesParser(), JsonParser(), Jed1xParser(), NgxParser(),
)}

# Formats acceptés par l'import ("auto" choisit d'après l'extension)
IMPORT_FORMATS = ('auto',) + tuple(PARSERS)


def all_parsers():
    return list(PARSERS.values())


def parser_for_filename(filename):
    name = (filename or '').lower()
    candidates = [
        (extension, parser)
        for parser in PARSERS.values()
        for extension in (parser.extension,) + tuple(parser.alt_extensions)
    ]
    # Extension la plus longue d'abord (.resx.xml avant .xml)
    for extension, parser in sorted(candidates, key=lambda item: -len(item[0])):
        if name.endswith(f'.{extension}'):
            return parser
    return None


def get_parser(format_slug, filename=None):
    """Parseur pour le format demandé, ou None si inconnu"""
    if format_slug == 'auto':
        return parser_for_filename(filename)
    return PARSERS.get(format_slug)


def read_originals(file_path, format_slug, filename=None):
    parser = get_parser(format_slug, filename or os.path.basename(file_path))
    if parser is None:
        raise ImportParseError(f"Aucun parseur pour le format '{format_slug}'.")
    entries = parser.read(file_path)
    logger.info(f"{len(entries)} entrées lues au format {parser.slug} depuis {filename or file_path}")
    return entries
