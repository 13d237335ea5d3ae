import pytest

from localetags import Locale, LocaleConfig, TextDirection


def test_negotiate():
    config = LocaleConfig(['en', 'en_GB', 'ar', 'ar_EG', 'de'])
    assert config.negotiate('en_GB') == Locale('en', region='GB')
    assert config.negotiate(Locale('ar', region='SA')) == Locale('ar')
    assert config.negotiate('fr') == Locale('en')


def test_explicit_fallback():
    config = LocaleConfig([Locale('en'), Locale('de')], fallback='de')
    assert config.fallback == Locale('de')
    assert config.negotiate('ja') == Locale('de')


def test_is_supported():
    config = LocaleConfig(['en', 'ar'])
    assert config.is_supported('ar_SA')
    assert not config.is_supported('fr')


def test_text_direction_follows_negotiated_locale():
    config = LocaleConfig(['ar', 'en'])
    assert config.text_direction('ar_EG') == TextDirection.RTL
    assert config.text_direction('en_US') == TextDirection.LTR
    # unsupported languages get the fallback's direction
    assert config.text_direction('fr') == TextDirection.RTL


def test_needs_a_supported_locale():
    with pytest.raises(ValueError):
        LocaleConfig([])


def test_repr():
    config = LocaleConfig(['en', 'zh_Hans'])
    assert repr(config) == "LocaleConfig(['en', 'zh-Hans'], fallback='en')"
