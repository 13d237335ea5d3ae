import copy
import pickle

import pytest

from localetags import Locale, TextDirection


def test_equality_and_hashing():
    assert Locale('en', region='US') == Locale('en', None, 'US')
    assert Locale('zh', script='Hans') != Locale('zh')
    assert Locale('zh', script='Hans') != Locale('zh', region='Hans')
    assert Locale('en') != 'en'
    assert len({Locale('en'), Locale('en'), Locale('en', region='GB')}) == 2


def test_locales_are_immutable():
    locale = Locale('en', region='US')
    with pytest.raises(AttributeError):
        locale.language = 'fr'
    with pytest.raises(AttributeError):
        locale.variant = 'oxendict'
    with pytest.raises(AttributeError):
        locale._language = 'fr'
    with pytest.raises(AttributeError):
        del locale._region
    assert locale == Locale('en', region='US')
    assert hash(locale) == hash(Locale('en', region='US'))


def test_locales_can_be_copied_and_pickled():
    locale = Locale('zh', script='Hans', region='CN')
    assert copy.copy(locale) == locale
    assert copy.deepcopy(locale) == locale
    assert pickle.loads(pickle.dumps(locale)) == locale


def test_to_tag():
    assert Locale('en').to_tag() == 'en'
    assert str(Locale('zh', script='Hans', region='CN')) == 'zh-Hans-CN'
    assert Locale('zh', script='Hans', region='CN').to_tag('_') == 'zh_Hans_CN'
    assert Locale('en', region='').to_tag() == 'en'


def test_round_trip_through_tag():
    for tag in ['en', 'en-US', 'zh-Hans', 'zh-Hant-TW']:
        assert str(Locale.get(tag)) == tag


def test_to_dict_and_indexing():
    locale = Locale('sr', script='Latn')
    assert locale.to_dict() == {'language': 'sr', 'script': 'Latn'}
    assert locale['script'] == 'Latn'
    assert locale['region'] is None
    with pytest.raises(KeyError):
        locale['variant']


def test_repr():
    assert repr(Locale('en')) == "Locale(language='en')"
    assert repr(Locale('en', region='')) == "Locale(language='en', region='')"


def test_locale_methods_ignore_script_and_region():
    locale = Locale('ar', script='Latn', region='EG')
    assert locale.is_rtl()
    assert locale.text_direction() == TextDirection.RTL
    assert locale.display_name() == 'Arabic'
    assert locale.native_name() == 'العربية'
