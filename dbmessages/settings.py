"""Translation settings consumed by the message store.

Values come from the environment (``.env`` is loaded by the package) and are
read once when the application is created.
"""

import os

from dbmessages.constants.categories import DEFAULT_CATEGORIES, parse_categories


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', '1', 'yes', 'on')


class TranslateSettings:
    """Configuration for recording and resolving database messages."""

    def __init__(
        self,
        categories=None,
        add_missing_translations: bool = False,
        add_missing_site_request_only: bool = False,
        default_locale: str = 'en',
        admin_url_prefix: str = '/admin',
    ):
        if categories is None:
            categories = DEFAULT_CATEGORIES
        self.categories = tuple(parse_categories(categories))
        self.add_missing_translations = add_missing_translations
        self.add_missing_site_request_only = add_missing_site_request_only
        self.default_locale = default_locale
        self.admin_url_prefix = admin_url_prefix

    def __repr__(self):
        return (
            f'<TranslateSettings categories={list(self.categories)} '
            f'add_missing={self.add_missing_translations} '
            f'site_only={self.add_missing_site_request_only}>'
        )

    @classmethod
    def from_env(cls):
        """Build settings from TRANSLATE_* environment variables."""
        return cls(
            categories=os.getenv('TRANSLATE_CATEGORIES', ','.join(DEFAULT_CATEGORIES)),
            add_missing_translations=env_flag('TRANSLATE_ADD_MISSING'),
            add_missing_site_request_only=env_flag('TRANSLATE_ADD_MISSING_SITE_REQUEST_ONLY'),
            default_locale=os.getenv('TRANSLATE_DEFAULT_LOCALE', 'en'),
            admin_url_prefix=os.getenv('TRANSLATE_ADMIN_URL_PREFIX', '/admin'),
        )

    def is_managed(self, category) -> bool:
        """Check whether a category is handled by the database store."""
        return category in self.categories

    def replace(self, **changes):
        """Return a copy with some fields changed."""
        values = {
            'categories': self.categories,
            'add_missing_translations': self.add_missing_translations,
            'add_missing_site_request_only': self.add_missing_site_request_only,
            'default_locale': self.default_locale,
            'admin_url_prefix': self.admin_url_prefix,
        }
        values.update(changes)
        return TranslateSettings(**values)
