import pytest

from dbmessages.constants import DEFAULT_CATEGORIES, parse_categories, validate_category
from dbmessages.settings import TranslateSettings, env_flag


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        'TRANSLATE_CATEGORIES',
        'TRANSLATE_ADD_MISSING',
        'TRANSLATE_ADD_MISSING_SITE_REQUEST_ONLY',
        'TRANSLATE_DEFAULT_LOCALE',
        'TRANSLATE_ADMIN_URL_PREFIX',
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_parse_categories_from_string():
    assert parse_categories(' site, app ,,site ') == ['site', 'app']


def test_parse_categories_keeps_case():
    assert parse_categories(['Site', 'site']) == ['Site', 'site']


def test_parse_categories_none():
    assert parse_categories(None) == []


def test_validate_category():
    assert validate_category('site') is True
    assert validate_category('') is False
    assert validate_category(None) is False
    assert validate_category('x' * 256) is False


def test_defaults_from_env(clean_env):
    settings = TranslateSettings.from_env()

    assert settings.categories == DEFAULT_CATEGORIES
    assert settings.add_missing_translations is False
    assert settings.add_missing_site_request_only is False
    assert settings.default_locale == 'en'
    assert settings.admin_url_prefix == '/admin'


def test_values_from_env(clean_env):
    clean_env.setenv('TRANSLATE_CATEGORIES', 'site,app')
    clean_env.setenv('TRANSLATE_ADD_MISSING', 'true')
    clean_env.setenv('TRANSLATE_ADD_MISSING_SITE_REQUEST_ONLY', '1')
    clean_env.setenv('TRANSLATE_DEFAULT_LOCALE', 'lv')

    settings = TranslateSettings.from_env()

    assert settings.categories == ('site', 'app')
    assert settings.add_missing_translations is True
    assert settings.add_missing_site_request_only is True
    assert settings.default_locale == 'lv'


def test_env_flag(clean_env):
    clean_env.setenv('TRANSLATE_ADD_MISSING', 'no')
    assert env_flag('TRANSLATE_ADD_MISSING', default=True) is False
    assert env_flag('TRANSLATE_ADD_MISSING_SITE_REQUEST_ONLY', default=True) is True


def test_is_managed_is_exact():
    settings = TranslateSettings(categories='site')
    assert settings.is_managed('site') is True
    assert settings.is_managed('Site') is False


def test_replace_keeps_other_fields():
    settings = TranslateSettings(categories=['app'], add_missing_translations=True)
    changed = settings.replace(add_missing_site_request_only=True)

    assert changed.categories == ('app',)
    assert changed.add_missing_translations is True
    assert changed.add_missing_site_request_only is True
    assert settings.add_missing_site_request_only is False
