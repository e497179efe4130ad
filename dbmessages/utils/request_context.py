"""Helpers describing the request a translation is made for."""

from flask import current_app, has_request_context, request


def _settings():
    return current_app.config.get('TRANSLATE_SETTINGS')


def is_site_request(admin_url_prefix: str | None = None) -> bool:
    """Check whether the current call serves a public, site-facing request.

    Calls made outside a request (CLI commands, scripts, background jobs) and
    requests under the admin URL prefix are not site requests.
    """
    if not has_request_context():
        return False

    prefix = admin_url_prefix
    if prefix is None:
        settings = _settings()
        prefix = settings.admin_url_prefix if settings else '/admin'
    if prefix:
        prefix = prefix.rstrip('/')
        if request.path == prefix or request.path.startswith(prefix + '/'):
            return False
    return True


def get_request_locale(default: str | None = None) -> str | None:
    """Pick the locale for the current request.

    Order: ``lang`` query param, Accept-Language header, then default
    (falling back to the configured default locale).
    """
    if default is None:
        settings = _settings()
        default = settings.default_locale if settings else None

    if not has_request_context():
        return default

    lang = request.args.get('lang', '').strip()
    if lang:
        return lang

    best = request.accept_languages.best
    if best and best != '*':
        return best
    return default
