"""
localetags knows how to read locale tags such as 'en_US', 'zh-Hans' and
'sr_Latn_RS', how to choose the best of the locales an application supports
for the locale a user asked for, which languages are written right-to-left,
and what languages are called, both in English and in their own script.

Everything here is a plain function of its arguments. There is no "current
locale" stored anywhere; an application that wants one keeps a LocaleConfig
of its own and passes it where it's needed.
"""
import enum
import logging

from .data_dicts import RTL_LANGUAGES
from .names import display_name, native_name, name_to_code
from .tag_parser import is_script_code, parse_tag

logger = logging.getLogger(__name__)


class TextDirection(enum.Enum):
    """
    The direction that text in a language is written in.
    """
    LTR = 'ltr'
    RTL = 'rtl'


class Locale:
    """
    The Locale class holds the parts of a locale tag:

    - *language*: the code for the language itself. This is always present,
      although it may be an entire tag that couldn't be split up.
    - *script*: the 4-letter code for the writing system being used, or None.
    - *region*: the code for the country or similar region whose usage of
      the language this is, or None.

    Locale objects are immutable values. Two of them are equal when all
    three parts are equal.

    The `Locale.get` method converts a string to a Locale instance. It's also
    available at the top level of this module as `parse_locale`.

    >>> Locale('zh', script='Hans', region='CN')
    Locale(language='zh', script='Hans', region='CN')
    >>> Locale.get('en_US') == Locale('en', region='US')
    True
    >>> Locale.get('en_US') == Locale('en')
    False
    """

    ATTRIBUTES = ['language', 'script', 'region']

    __slots__ = ('_language', '_script', '_region')

    def __init__(self, language: str, script: str = None, region: str = None):
        object.__setattr__(self, '_language', language)
        object.__setattr__(self, '_script', script)
        object.__setattr__(self, '_region', region)

    def __setattr__(self, name, value):
        raise AttributeError("Locale objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Locale objects are immutable")

    def __reduce__(self):
        return (Locale, (self.language, self.script, self.region))

    @property
    def language(self) -> str:
        return self._language

    @property
    def script(self):
        return self._script

    @property
    def region(self):
        return self._region

    @staticmethod
    def get(tag: str) -> 'Locale':
        """
        Create a Locale object from a locale tag string. Underscores and
        hyphens both work as separators.

        >>> Locale.get('en')
        Locale(language='en')

        >>> Locale.get('en-US')
        Locale(language='en', region='US')

        >>> Locale.get('zh_Hans')
        Locale(language='zh', script='Hans')

        >>> Locale.get('zh_Hans_CN')
        Locale(language='zh', script='Hans', region='CN')

        Case is kept the way it was written:

        >>> Locale.get('pt-br')
        Locale(language='pt', region='br')

        A three-part tag always has a script in the middle, even when the
        middle part doesn't look like one:

        >>> Locale.get('en-US_extra')
        Locale(language='en', script='US', region='extra')
        """
        return Locale(**dict(parse_tag(tag)))

    def to_tag(self, separator: str = '-') -> str:
        """
        Convert a Locale back to a tag, as a string. This is also the str()
        representation of a Locale object. Use separator='_' to get the form
        that gettext and ICU locale names use.

        >>> Locale('en', region='GB').to_tag()
        'en-GB'

        >>> str(Locale('zh', script='Hant', region='TW'))
        'zh-Hant-TW'

        >>> Locale('zh', script='Hant', region='TW').to_tag('_')
        'zh_Hant_TW'
        """
        subtags = [self.language]
        if self.script:
            subtags.append(self.script)
        if self.region:
            subtags.append(self.region)
        return separator.join(subtags)

    def to_dict(self):
        """
        Get a dictionary of the parts of this Locale that are present, which
        can be used to construct a similar object.
        """
        result = {}
        for key in self.ATTRIBUTES:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result

    def update_dict(self, newdata: dict) -> 'Locale':
        """
        Make a copy of this Locale with some of its parts replaced.

        >>> Locale('sr', script='Cyrl', region='RS').update_dict({'script': 'Latn'})
        Locale(language='sr', script='Latn', region='RS')
        """
        return Locale(
            language=newdata.get('language', self.language),
            script=newdata.get('script', self.script),
            region=newdata.get('region', self.region)
        )

    def is_rtl(self) -> bool:
        """
        Is this locale's language written right-to-left? Only the language
        counts; the script and region are ignored.

        >>> Locale('ar', region='EG').is_rtl()
        True
        >>> Locale('en').is_rtl()
        False
        """
        return self.language in RTL_LANGUAGES

    def text_direction(self) -> TextDirection:
        """
        >>> Locale('he').text_direction()
        <TextDirection.RTL: 'rtl'>
        """
        if self.is_rtl():
            return TextDirection.RTL
        else:
            return TextDirection.LTR

    def display_name(self) -> str:
        """
        Give the English name of this locale's language.

        >>> Locale('zh', script='Hans').display_name()
        'Chinese'
        """
        return display_name(self.language)

    def native_name(self) -> str:
        """
        Give the name of this locale's language in that language.

        >>> Locale('ar', region='EG').native_name()
        'العربية'
        """
        return native_name(self.language)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Locale):
            return False
        return (
            self.language == other.language
            and self.script == other.script
            and self.region == other.region
        )

    def __hash__(self):
        return hash((self.language, self.script, self.region))

    def __getitem__(self, key):
        if key in self.ATTRIBUTES:
            return getattr(self, key)
        else:
            raise KeyError(key)

    def __repr__(self):
        items = []
        for attr in self.ATTRIBUTES:
            if getattr(self, attr) is not None:
                items.append('{0}={1!r}'.format(attr, getattr(self, attr)))
        return "Locale({})".format(', '.join(items))

    def __str__(self):
        return self.to_tag()


# Make Locale.get available at the top level
parse_locale = Locale.get


def _as_locale(value) -> Locale:
    if isinstance(value, Locale):
        return value
    return parse_locale(value)


def is_rtl(language) -> bool:
    """
    Is a language written right-to-left? The argument can be a language
    code, a Locale, or a whole tag; a tag is parsed first and only its
    language counts.

    >>> is_rtl('ar')
    True
    >>> is_rtl('en')
    False
    >>> is_rtl(Locale('ur', region='PK'))
    True
    >>> is_rtl('ar_EG')
    True
    """
    return _as_locale(language).is_rtl()


def text_direction(locale) -> TextDirection:
    """
    Get the TextDirection for a Locale, a tag, or a language code.

    >>> text_direction(Locale('ar', region='EG'))
    <TextDirection.RTL: 'rtl'>
    >>> text_direction('fa_IR')
    <TextDirection.RTL: 'rtl'>
    >>> text_direction('de')
    <TextDirection.LTR: 'ltr'>
    """
    return _as_locale(locale).text_direction()


def find_best_match(requested, supported):
    """
    You have software that supports any of the `supported` locales. You want
    to use the `requested` locale. This function picks the supported locale
    to use instead, in three steps:

    1. A supported locale equal to the requested one.
    2. If the requested locale has a region, a supported locale with the
       same language and region, whatever its script.
    3. A supported locale with the same language.

    A step that finds something always wins over the later steps. Within a
    step, the earliest supported locale wins. If none of the steps finds
    anything, the result is None, and it's up to you what to fall back on.

    Locales can be given as Locale objects or as strings.

    >>> supported = [Locale('en'), Locale('en', region='GB'), Locale('ar'),
    ...              Locale('ar', region='EG'), Locale('de')]
    >>> find_best_match(Locale('en', region='GB'), supported)
    Locale(language='en', region='GB')
    >>> find_best_match(Locale('ar', region='EG'), supported)
    Locale(language='ar', region='EG')

    There's no Saudi Arabic here, so we get the first Arabic we can find,
    even though Egyptian Arabic is also an option:

    >>> find_best_match(Locale('ar', region='SA'), supported)
    Locale(language='ar')

    >>> find_best_match(Locale('fr'), supported) is None
    True

    The script doesn't matter when the language and region match:

    >>> find_best_match('zh_Hans_TW', ['zh', 'zh_Hant_TW'])
    Locale(language='zh', script='Hant', region='TW')
    """
    requested = _as_locale(requested)
    candidates = [_as_locale(locale) for locale in supported]

    for candidate in candidates:
        if candidate == requested:
            logger.debug("%s is supported exactly", requested)
            return candidate

    if requested.region:
        for candidate in candidates:
            if (candidate.language == requested.language
                    and candidate.region == requested.region):
                logger.debug("%s matched %s by language and region",
                             requested, candidate)
                return candidate

    for candidate in candidates:
        if candidate.language == requested.language:
            logger.debug("%s matched %s by language", requested, candidate)
            return candidate

    logger.debug("No supported locale matches %s", requested)
    return None


def is_locale_supported(locale, supported) -> bool:
    """
    Is any of the `supported` locales in the same language as `locale`?

    >>> is_locale_supported('en_AU', ['en', 'ar'])
    True
    >>> is_locale_supported(Locale('fr'), ['en', 'ar'])
    False
    """
    language = _as_locale(locale).language
    return any(
        _as_locale(candidate).language == language for candidate in supported
    )


def find_language(name: str) -> Locale:
    """
    Find the language that has the given name, in English or in its own
    script. Case doesn't matter. If the name isn't found, you get a
    LookupError.

    >>> find_language('German')
    Locale(language='de')
    >>> find_language('deutsch')
    Locale(language='de')
    >>> find_language('Norsk Bokmål')
    Locale(language='nb')
    >>> find_language('Klingon')
    Traceback (most recent call last):
        ...
    LookupError: Can't find any language named 'Klingon'
    """
    code = name_to_code(name)
    if code is None:
        raise LookupError("Can't find any language named %r" % name)
    return Locale(code)


class LocaleConfig:
    """
    The locales an application supports, and the one it falls back on when
    none of them fits. The application owns this object and passes it to
    whatever needs to know about locales.

    The fallback is the first supported locale, unless you give one.

    >>> config = LocaleConfig(['en', 'en_GB', 'ar', 'ar_EG', 'de'])
    >>> config.negotiate('ar_SA')
    Locale(language='ar')
    >>> config.negotiate('fr_FR')
    Locale(language='en')
    >>> config.text_direction('ar_EG')
    <TextDirection.RTL: 'rtl'>
    """

    def __init__(self, supported, fallback=None):
        self.supported = tuple(_as_locale(locale) for locale in supported)
        if not self.supported:
            raise ValueError("A LocaleConfig needs at least one supported locale")
        if fallback is None:
            self.fallback = self.supported[0]
        else:
            self.fallback = _as_locale(fallback)

    def negotiate(self, requested) -> Locale:
        """
        Get the supported locale to use for a requested locale, or the
        fallback if none of them matches.
        """
        match = find_best_match(requested, self.supported)
        if match is None:
            logger.debug("Falling back on %s for %s", self.fallback, requested)
            return self.fallback
        return match

    def is_supported(self, locale) -> bool:
        return is_locale_supported(locale, self.supported)

    def text_direction(self, requested) -> TextDirection:
        return self.negotiate(requested).text_direction()

    def __repr__(self):
        return "LocaleConfig([{}], fallback={!r})".format(
            ', '.join(repr(str(locale)) for locale in self.supported),
            str(self.fallback)
        )


__all__ = [
    'Locale', 'LocaleConfig', 'TextDirection',
    'parse_locale', 'parse_tag', 'is_script_code',
    'find_best_match', 'is_locale_supported',
    'is_rtl', 'text_direction', 'display_name', 'native_name',
    'find_language',
]
