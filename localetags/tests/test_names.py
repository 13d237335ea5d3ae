import pytest

from localetags import (
    Locale, TextDirection, display_name, find_language, is_rtl, native_name,
    text_direction
)
from localetags.data_dicts import LANGUAGE_NAMES, NATIVE_NAMES, RTL_LANGUAGES
from localetags.names import name_to_code, normalize_name


def test_rtl():
    assert is_rtl('ar')
    assert is_rtl('he')
    assert not is_rtl('en')
    assert not is_rtl('xyz')
    for code in RTL_LANGUAGES:
        assert is_rtl(code)


def test_text_direction_ignores_region():
    assert text_direction(Locale('ar', region='EG')) == TextDirection.RTL
    assert text_direction(Locale('en', region='EG')) == TextDirection.LTR
    assert text_direction('he_IL') == TextDirection.RTL


def test_rtl_accepts_whole_tags():
    assert is_rtl('ar_EG')
    assert is_rtl('ur-Arab-PK')
    assert not is_rtl('en-US')


def test_display_names():
    assert display_name('ar') == 'Arabic'
    assert display_name('zh') == 'Chinese'
    assert display_name('fil') == 'Filipino'
    assert display_name('xyz') == 'xyz'
    assert display_name('') == ''


def test_native_names():
    assert native_name('ar') == 'العربية'
    assert native_name('zh') == '中文'
    assert native_name('en') == 'English'
    assert native_name('xyz') == 'xyz'


def test_every_language_has_both_names():
    assert set(LANGUAGE_NAMES) == set(NATIVE_NAMES)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        LANGUAGE_NAMES['tlh'] = 'Klingon'


def test_normalize_name():
    assert normalize_name('Norwegian (Bokmål)') == 'norwegian bokmål'
    assert normalize_name(' Serbo-Croatian ') == 'serbo croatian'


def test_find_language_by_any_name():
    for code in LANGUAGE_NAMES:
        assert name_to_code(LANGUAGE_NAMES[code]) == code
        assert find_language(NATIVE_NAMES[code]) == Locale(code)


def test_find_language_by_prefix():
    assert find_language('Swahili language') == Locale('sw')
    assert find_language(NATIVE_NAMES['vi'].upper() + ' Nam') == Locale('vi')


def test_prefix_must_be_a_whole_word():
    assert name_to_code('Thailand') is None
    assert name_to_code('Englishman') is None
    assert name_to_code('English man') == 'en'
    with pytest.raises(LookupError):
        find_language('Germanic')


def test_unknown_language_name():
    with pytest.raises(LookupError):
        find_language('Klingon')
    with pytest.raises(LookupError):
        find_language('')
