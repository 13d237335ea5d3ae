import marisa_trie

from .data_dicts import LANGUAGE_NAMES, NATIVE_NAMES


def normalize_name(name):
    """
    When looking up a language code by name, we would rather ignore
    distinctions of case and certain punctuation. "Norwegian (Bokmål)"
    should be matched by "norwegian bokmål".
    """
    name = name.casefold()
    name = name.replace("’", "'")
    name = name.replace("-", " ")
    name = name.replace("(", "")
    name = name.replace(")", "")
    name = name.replace(",", "")
    return name.strip()


def build_trie(*tables):
    """
    Build a BytesTrie from normalized names to language codes. When two
    tables give the same name, the earlier table wins.
    """
    entries = {}
    for table in tables:
        for code, name in table.items():
            entries.setdefault(normalize_name(name), code)
    return marisa_trie.BytesTrie(
        (name, code.encode('utf-8')) for (name, code) in entries.items()
    )


def get_trie_value(trie, key):
    """
    Get the value that a BytesTrie stores for a particular key, decoded
    as Unicode. Raises a KeyError if there is no value for that key.
    """
    return trie[key][0].decode('utf-8')


NAME_TRIE = build_trie(LANGUAGE_NAMES, NATIVE_NAMES)


def display_name(code: str) -> str:
    """
    Get the English name of a language code, or the code itself if we don't
    know its name.

    >>> display_name('ar')
    'Arabic'
    >>> display_name('xyz')
    'xyz'
    """
    return LANGUAGE_NAMES.get(code, code)


def native_name(code: str) -> str:
    """
    Get the name a language has in its own script, or the code itself if we
    don't know it.

    >>> native_name('ja')
    '日本語'
    >>> native_name('xyz')
    'xyz'
    """
    return NATIVE_NAMES.get(code, code)


def name_to_code(name: str):
    """
    Get a language code from its English name or its native name. Returns
    None if the name isn't known.

    A small amount of fuzzy matching is supported: if the name starts with a
    known name of at least four characters, followed by a space, you get that
    language. This allows, for example, "Swahili language" to match "Swahili".
    A known name that is only the start of a longer word doesn't count, so
    "Thailand" is not Thai.

    >>> name_to_code('French')
    'fr'
    >>> name_to_code('français')
    'fr'
    >>> name_to_code('Swahili language')
    'sw'
    >>> name_to_code('Lao People') is None
    True
    >>> name_to_code('Thailand') is None
    True
    """
    lookup = normalize_name(name)
    if lookup in NAME_TRIE:
        return get_trie_value(NAME_TRIE, lookup)
    else:
        for prefix in reversed(NAME_TRIE.prefixes(lookup)):
            if len(prefix) >= 4 and lookup[len(prefix)] == ' ':
                return get_trie_value(NAME_TRIE, prefix)
        return None
