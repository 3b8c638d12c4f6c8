# =============================================================================
# APP: languages - Table statique des langues
# =============================================================================

# languages/locales.py
from collections import namedtuple

Locale = namedtuple(
    'Locale',
    ['slug', 'english_name', 'native_name', 'nplurals', 'plural_expression', 'text_direction'],
)


def _locale(slug, english_name, native_name, nplurals=2, plural_expression='n != 1', text_direction='ltr'):
    return Locale(slug, english_name, native_name, nplurals, plural_expression, text_direction)


_SLAVIC = '(n % 10 == 1 && n % 100 != 11) ? 0 : ((n % 10 >= 2 && n % 10 <= 4 && (n % 100 < 12 || n % 100 > 14)) ? 1 : 2)'

LOCALES = (
    _locale('af', 'Afrikaans', 'Afrikaans'),
    _locale('am', 'Amharic', 'አማርኛ', 2, 'n > 1'),
    _locale('ar', 'Arabic', 'العربية', 6,
            'n == 0 ? 0 : n == 1 ? 1 : n == 2 ? 2 : n % 100 >= 3 && n % 100 <= 10 ? 3 : n % 100 >= 11 ? 4 : 5',
            'rtl'),
    _locale('az', 'Azerbaijani', 'Azərbaycan dili'),
    _locale('be', 'Belarusian', 'Беларуская мова', 3, _SLAVIC),
    _locale('bg', 'Bulgarian', 'Български'),
    _locale('bn', 'Bengali', 'বাংলা'),
    _locale('bs', 'Bosnian', 'Bosanski', 3, _SLAVIC),
    _locale('ca', 'Catalan', 'Català'),
    _locale('cs', 'Czech', 'Čeština', 3, '(n == 1) ? 0 : ((n >= 2 && n <= 4) ? 1 : 2)'),
    _locale('cy', 'Welsh', 'Cymraeg', 4, '(n == 1) ? 0 : ((n == 2) ? 1 : ((n != 8 && n != 11) ? 2 : 3))'),
    _locale('da', 'Danish', 'Dansk'),
    _locale('de', 'German', 'Deutsch'),
    _locale('el', 'Greek', 'Ελληνικά'),
    _locale('en', 'English', 'English'),
    _locale('en-gb', 'English (UK)', 'English (UK)'),
    _locale('eo', 'Esperanto', 'Esperanto'),
    _locale('es', 'Spanish (Spain)', 'Español'),
    _locale('es-mx', 'Spanish (Mexico)', 'Español de México'),
    _locale('et', 'Estonian', 'Eesti'),
    _locale('eu', 'Basque', 'Euskara'),
    _locale('fa', 'Persian', 'فارسی', 1, '0', 'rtl'),
    _locale('fi', 'Finnish', 'Suomi'),
    _locale('fr', 'French (France)', 'Français', 2, 'n > 1'),
    _locale('fr-ca', 'French (Canada)', 'Français du Canada', 2, 'n > 1'),
    _locale('ga', 'Irish', 'Gaelige', 5, 'n == 1 ? 0 : n == 2 ? 1 : n < 7 ? 2 : n < 11 ? 3 : 4'),
    _locale('gl', 'Galician', 'Galego'),
    _locale('he', 'Hebrew', 'עִבְרִית', 2, 'n != 1', 'rtl'),
    _locale('hi', 'Hindi', 'हिन्दी'),
    _locale('hr', 'Croatian', 'Hrvatski', 3, _SLAVIC),
    _locale('hu', 'Hungarian', 'Magyar'),
    _locale('hy', 'Armenian', 'Հայերեն'),
    _locale('id', 'Indonesian', 'Bahasa Indonesia', 1, '0'),
    _locale('is', 'Icelandic', 'Íslenska', 2, '(n % 100 != 1 && n % 100 != 21 && n % 100 != 31 && n % 100 != 41 && n % 100 != 51 && n % 100 != 61 && n % 100 != 71 && n % 100 != 81 && n % 100 != 91)'),
    _locale('it', 'Italian', 'Italiano'),
    _locale('ja', 'Japanese', '日本語', 1, '0'),
    _locale('ka', 'Georgian', 'ქართული', 1, '0'),
    _locale('kk', 'Kazakh', 'Қазақ тілі'),
    _locale('km', 'Khmer', 'ភាសាខ្មែរ', 1, '0'),
    _locale('ko', 'Korean', '한국어', 1, '0'),
    _locale('lt', 'Lithuanian', 'Lietuvių kalba', 3,
            '(n % 10 == 1 && n % 100 != 11) ? 0 : ((n % 10 >= 2 && (n % 100 < 10 || n % 100 >= 20)) ? 1 : 2)'),
    _locale('lv', 'Latvian', 'Latviešu valoda', 3, '(n % 10 == 1 && n % 100 != 11) ? 0 : (n != 0 ? 1 : 2)'),
    _locale('mk', 'Macedonian', 'Македонски јазик', 2, 'n == 1 || n % 10 == 1 ? 0 : 1'),
    _locale('mn', 'Mongolian', 'Монгол'),
    _locale('ms', 'Malay', 'Bahasa Melayu', 1, '0'),
    _locale('nb', 'Norwegian (Bokmål)', 'Norsk bokmål'),
    _locale('nl', 'Dutch', 'Nederlands'),
    _locale('nn', 'Norwegian (Nynorsk)', 'Norsk nynorsk'),
    _locale('pl', 'Polish', 'Polski', 3,
            '(n == 1) ? 0 : ((n % 10 >= 2 && n % 10 <= 4 && (n % 100 < 12 || n % 100 > 14)) ? 1 : 2)'),
    _locale('pt', 'Portuguese (Portugal)', 'Português'),
    _locale('pt-br', 'Portuguese (Brazil)', 'Português do Brasil', 2, 'n > 1'),
    _locale('ro', 'Romanian', 'Română', 3, '(n == 1) ? 0 : ((n == 0 || n % 100 >= 2 && n % 100 <= 19) ? 1 : 2)'),
    _locale('ru', 'Russian', 'Русский', 3, _SLAVIC),
    _locale('sk', 'Slovak', 'Slovenčina', 3, '(n == 1) ? 0 : ((n >= 2 && n <= 4) ? 1 : 2)'),
    _locale('sl', 'Slovenian', 'Slovenščina', 4,
            '(n % 100 == 1) ? 0 : ((n % 100 == 2) ? 1 : ((n % 100 == 3 || n % 100 == 4) ? 2 : 3))'),
    _locale('sq', 'Albanian', 'Shqip'),
    _locale('sr', 'Serbian', 'Српски језик', 3, _SLAVIC),
    _locale('sv', 'Swedish', 'Svenska'),
    _locale('sw', 'Swahili', 'Kiswahili'),
    _locale('ta', 'Tamil', 'தமிழ்'),
    _locale('th', 'Thai', 'ไทย', 1, '0'),
    _locale('tr', 'Turkish', 'Türkçe', 2, 'n > 1'),
    _locale('uk', 'Ukrainian', 'Українська', 3, _SLAVIC),
    _locale('ur', 'Urdu', 'اردو', 2, 'n != 1', 'rtl'),
    _locale('uz', 'Uzbek', 'O‘zbekcha', 1, '0'),
    _locale('vi', 'Vietnamese', 'Tiếng Việt', 1, '0'),
    _locale('wo', 'Wolof', 'Wolof', 1, '0'),
    _locale('yo', 'Yorùbá', 'èdè Yorùbá', 1, '0'),
    _locale('zh-cn', 'Chinese (China)', '简体中文', 1, '0'),
    _locale('zh-tw', 'Chinese (Taiwan)', '繁體中文', 1, '0'),
)

_BY_SLUG = {locale.slug: locale for locale in LOCALES}


def by_slug(slug):
    """Retourne la langue correspondant au code, ou None"""
    if not slug:
        return None
    return _BY_SLUG.get(str(slug).strip().lower())


def all_locales():
    return list(LOCALES)


def slug_choices():
    return [(locale.slug, locale.english_name) for locale in LOCALES]
