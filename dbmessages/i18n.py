"""Host-facing translation hook.

Usage:
    from dbmessages.i18n import t

    @app.route('/hello')
    def hello():
        return {'greeting': t('Hello')}
"""

from flask import current_app

from dbmessages.utils.request_context import get_request_locale


def get_message_store():
    """Return the message store of the current application."""
    return current_app.extensions['message_store']


def t(message: str, category: str | None = None, locale: str | None = None) -> str:
    """Translate a message from the database.

    Defaults to the first managed category and the locale of the current
    request.
    """
    store = get_message_store()
    if category is None:
        categories = store.settings.categories
        category = categories[0] if categories else 'site'
    if locale is None:
        locale = get_request_locale(store.settings.default_locale)
    return store.translate(category, message, locale)
