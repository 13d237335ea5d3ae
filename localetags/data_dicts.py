"""
Static data about languages and scripts. Everything here is built once, at
import time, and is read-only afterward.
"""
from types import MappingProxyType


# The four-letter script subtags we recognize when a tag has only two parts.
# Only these can make 'zh_Hans' mean a script instead of a region; a new
# script has to be added here explicitly.
SCRIPT_CODES = frozenset({
    'Hans',  # Simplified Han
    'Hant',  # Traditional Han
    'Latn',  # Latin
    'Cyrl',  # Cyrillic
    'Arab',  # Arabic
    'Deva',  # Devanagari
    'Beng',  # Bengali
    'Jpan',  # Japanese
    'Kore',  # Korean
    'Grek',  # Greek
    'Hebr',  # Hebrew
    'Thai',  # Thai
    'Ethi',  # Ethiopic
    'Armn',  # Armenian
    'Geor',  # Georgian
})

# Languages written right-to-left, by language code alone.
RTL_LANGUAGES = frozenset({
    'ar',  # Arabic
    'fa',  # Persian
    'he',  # Hebrew
    'ur',  # Urdu
    'ps',  # Pashto
    'sd',  # Sindhi
    'yi',  # Yiddish
    'ku',  # Kurdish (Sorani)
    'ug',  # Uyghur
    'dv',  # Divehi
})

LANGUAGE_NAMES = MappingProxyType({
    # Major languages
    'en': 'English',
    'zh': 'Chinese',
    'es': 'Spanish',
    'hi': 'Hindi',
    'ar': 'Arabic',
    'bn': 'Bengali',
    'pt': 'Portuguese',
    'ru': 'Russian',
    'ja': 'Japanese',
    'pa': 'Punjabi',

    # European languages
    'de': 'German',
    'fr': 'French',
    'it': 'Italian',
    'pl': 'Polish',
    'uk': 'Ukrainian',
    'ro': 'Romanian',
    'nl': 'Dutch',
    'el': 'Greek',
    'cs': 'Czech',
    'sv': 'Swedish',
    'hu': 'Hungarian',
    'be': 'Belarusian',
    'fi': 'Finnish',
    'bg': 'Bulgarian',
    'hr': 'Croatian',
    'sr': 'Serbian',
    'sk': 'Slovak',
    'da': 'Danish',
    'no': 'Norwegian',
    'nb': 'Norwegian Bokmål',
    'nn': 'Norwegian Nynorsk',
    'lt': 'Lithuanian',
    'sl': 'Slovenian',
    'et': 'Estonian',
    'lv': 'Latvian',
    'bs': 'Bosnian',
    'sq': 'Albanian',
    'mk': 'Macedonian',
    'is': 'Icelandic',
    'ga': 'Irish',
    'cy': 'Welsh',
    'eu': 'Basque',
    'ca': 'Catalan',
    'gl': 'Galician',
    'mt': 'Maltese',
    'lb': 'Luxembourgish',

    # Middle Eastern and Central Asian languages
    'tr': 'Turkish',
    'fa': 'Persian',
    'he': 'Hebrew',
    'ur': 'Urdu',
    'ps': 'Pashto',
    'ku': 'Kurdish',
    'hy': 'Armenian',
    'ka': 'Georgian',
    'az': 'Azerbaijani',
    'kk': 'Kazakh',
    'uz': 'Uzbek',
    'ky': 'Kyrgyz',
    'tk': 'Turkmen',
    'tg': 'Tajik',
    'yi': 'Yiddish',
    'dv': 'Divehi',

    # South Asian languages
    'ta': 'Tamil',
    'te': 'Telugu',
    'mr': 'Marathi',
    'gu': 'Gujarati',
    'kn': 'Kannada',
    'ml': 'Malayalam',
    'si': 'Sinhala',
    'ne': 'Nepali',
    'sd': 'Sindhi',
    'or': 'Odia',

    # Southeast Asian languages
    'th': 'Thai',
    'vi': 'Vietnamese',
    'id': 'Indonesian',
    'ms': 'Malay',
    'my': 'Burmese',
    'km': 'Khmer',
    'lo': 'Lao',
    'fil': 'Filipino',
    'tl': 'Tagalog',
    'jv': 'Javanese',

    # East Asian languages
    'ko': 'Korean',
    'mn': 'Mongolian',
    'ug': 'Uyghur',

    # African languages
    'sw': 'Swahili',
    'am': 'Amharic',
    'ha': 'Hausa',
    'yo': 'Yoruba',
    'ig': 'Igbo',
    'zu': 'Zulu',
    'af': 'Afrikaans',
    'so': 'Somali',
    'mg': 'Malagasy',
})

# Each language's name for itself (its autonym).
NATIVE_NAMES = MappingProxyType({
    # Major languages
    'en': 'English',
    'zh': '中文',
    'es': 'Español',
    'hi': 'हिन्दी',
    'ar': 'العربية',
    'bn': 'বাংলা',
    'pt': 'Português',
    'ru': 'Русский',
    'ja': '日本語',
    'pa': 'ਪੰਜਾਬੀ',

    # European languages
    'de': 'Deutsch',
    'fr': 'Français',
    'it': 'Italiano',
    'pl': 'Polski',
    'uk': 'Українська',
    'ro': 'Română',
    'nl': 'Nederlands',
    'el': 'Ελληνικά',
    'cs': 'Čeština',
    'sv': 'Svenska',
    'hu': 'Magyar',
    'be': 'Беларуская',
    'fi': 'Suomi',
    'bg': 'Български',
    'hr': 'Hrvatski',
    'sr': 'Српски',
    'sk': 'Slovenčina',
    'da': 'Dansk',
    'no': 'Norsk',
    'nb': 'Norsk Bokmål',
    'nn': 'Norsk Nynorsk',
    'lt': 'Lietuvių',
    'sl': 'Slovenščina',
    'et': 'Eesti',
    'lv': 'Latviešu',
    'bs': 'Bosanski',
    'sq': 'Shqip',
    'mk': 'Македонски',
    'is': 'Íslenska',
    'ga': 'Gaeilge',
    'cy': 'Cymraeg',
    'eu': 'Euskara',
    'ca': 'Català',
    'gl': 'Galego',
    'mt': 'Malti',
    'lb': 'Lëtzebuergesch',

    # Middle Eastern and Central Asian languages
    'tr': 'Türkçe',
    'fa': 'فارسی',
    'he': 'עברית',
    'ur': 'اردو',
    'ps': 'پښتو',
    'ku': 'Kurdî',
    'hy': 'Հայերեն',
    'ka': 'ქართული',
    'az': 'Azərbaycan',
    'kk': 'Қазақ',
    'uz': 'Oʻzbek',
    'ky': 'Кыргызча',
    'tk': 'Türkmen',
    'tg': 'Тоҷикӣ',
    'yi': 'ייִדיש',
    'dv': 'ދިވެހި',

    # South Asian languages
    'ta': 'தமிழ்',
    'te': 'తెలుగు',
    'mr': 'मराठी',
    'gu': 'ગુજરાતી',
    'kn': 'ಕನ್ನಡ',
    'ml': 'മലയാളം',
    'si': 'සිංහල',
    'ne': 'नेपाली',
    'sd': 'سنڌي',
    'or': 'ଓଡ଼ିଆ',

    # Southeast Asian languages
    'th': 'ไทย',
    'vi': 'Tiếng Việt',
    'id': 'Bahasa Indonesia',
    'ms': 'Bahasa Melayu',
    'my': 'မြန်မာဘာသာ',
    'km': 'ភាសាខ្មែរ',
    'lo': 'ລາວ',
    'fil': 'Filipino',
    'tl': 'Tagalog',
    'jv': 'Basa Jawa',

    # East Asian languages
    'ko': '한국어',
    'mn': 'Монгол',
    'ug': 'ئۇيغۇرچە',

    # African languages
    'sw': 'Kiswahili',
    'am': 'አማርኛ',
    'ha': 'Hausa',
    'yo': 'Yorùbá',
    'ig': 'Igbo',
    'zu': 'isiZulu',
    'af': 'Afrikaans',
    'so': 'Soomaali',
    'mg': 'Malagasy',
})
