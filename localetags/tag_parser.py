"""
This module implements a parser for locale tags as they show up in
application settings and device locales: a language code, optionally
followed by a script code and a region code, separated by underscores or
hyphens.

Here, we're only concerned with splitting the tag into its parts. Case is
left alone, and nothing is checked against a registry of real codes.

>>> parse_tag('en')
[('language', 'en')]

>>> parse_tag('en_US')
[('language', 'en'), ('region', 'US')]

>>> parse_tag('en-US')
[('language', 'en'), ('region', 'US')]

>>> parse_tag('zh_Hans')
[('language', 'zh'), ('script', 'Hans')]

>>> parse_tag('zh_Hans_CN')
[('language', 'zh'), ('script', 'Hans'), ('region', 'CN')]

>>> parse_tag('sr-Latn_RS')
[('language', 'sr'), ('script', 'Latn'), ('region', 'RS')]

A two-part tag only gets a script when the second part is a script we know
about. Otherwise, it's a region, even if it has four letters:

>>> parse_tag('zh-hans')
[('language', 'zh'), ('region', 'hans')]

>>> parse_tag('en_Abcd')
[('language', 'en'), ('region', 'Abcd')]

With three or more parts, the second part is always the script and the
third is always the region. Anything after that is dropped. This means that
a tag such as 'de-DE-1901' is read as if 'DE' were a script:

>>> parse_tag('de-DE-1901')
[('language', 'de'), ('script', 'DE'), ('region', '1901')]

>>> parse_tag('en-US_extra-more')
[('language', 'en'), ('script', 'US'), ('region', 'extra')]

Nothing makes the parser fail. A string with no separators is taken
entirely as the language:

>>> parse_tag('English (US)')
[('language', 'English (US)')]
"""
import re

from .data_dicts import SCRIPT_CODES


SEPARATOR_RE = re.compile(r'[_-]')


def is_script_code(token: str) -> bool:
    """
    Decide whether a subtag is a script code, such as 'Hans' or 'Latn',
    rather than a region code.

    >>> is_script_code('Hant')
    True
    >>> is_script_code('hant')
    False
    >>> is_script_code('Zzzz')
    False
    >>> is_script_code('US')
    False
    """
    if len(token) != 4:
        return False
    if token[0] != token[0].upper():
        return False
    return token in SCRIPT_CODES


def split_tag(tag: str) -> list:
    """
    Split a tag on every underscore and hyphen. The two separators mean the
    same thing, and can be mixed in one tag.

    >>> split_tag('zh_Hant-TW')
    ['zh', 'Hant', 'TW']
    >>> split_tag('en-')
    ['en', '']
    """
    return SEPARATOR_RE.split(tag)


def parse_tag(tag: str) -> list:
    """
    Parse the parts of a locale tag, returning a list of (type, value)
    tuples, where the type is 'language', 'script', or 'region'.
    """
    subtags = split_tag(tag)
    if not subtags:
        # re.split always returns at least one string
        return [('language', tag)]

    language = subtags[0]
    if len(subtags) == 1:
        return [('language', language)]
    elif len(subtags) == 2:
        second = subtags[1]
        if is_script_code(second):
            return [('language', language), ('script', second)]
        else:
            return [('language', language), ('region', second)]
    else:
        return [('language', language), ('script', subtags[1]),
                ('region', subtags[2])]
