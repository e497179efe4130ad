"""Database-backed message translation with missing-message recording.

The store resolves ``(category, message, locale)`` to translated text. On a
miss it falls back to the source message and, when configured, records the
message as a new source message so an editor can translate it later.

FAST PATHS (no recording):
- Empty message
- Recording disabled
- Site-request-only recording and the call is not a site request
- Category not managed by the store
- Source message already stored
"""

import logging

from dbmessages import db
from dbmessages.services import message_repository
from dbmessages.utils.request_context import is_site_request

logger = logging.getLogger(__name__)


class MessageStore:
    """Looks up database translations and records missing source messages.

    Holds no cache and no lock: every call reads the shared database through
    the current SQLAlchemy session.
    """

    def __init__(self, settings):
        self.settings = settings

    def configure(self, settings):
        """Replace the settings used by subsequent calls."""
        self.settings = settings
        logger.info(f"Message store reconfigured: {settings!r}")

    def translate(self, category: str, message: str, locale: str, site_request: bool | None = None) -> str:
        """
        Translate a message, falling back to the message itself.

        Args:
            category: Message category, e.g. 'site'
            message: Source text, compared exactly (case and bytes)
            locale: Target locale tag
            site_request: Whether the call serves a public request. Derived
                from the active Flask request when None.

        Returns:
            The stored translation, or ``message`` unchanged on a miss.

        Database errors while looking up the translation propagate.
        """
        if not message:
            return message

        source = message_repository.find_source_message(category, message)
        if source is not None:
            translation = message_repository.find_translation(source.id, locale)
            if translation is not None and translation.is_translated:
                return translation.text

        self.record_missing_translation(category, message, site_request, existing=source)
        return message

    def record_missing_translation(self, category: str, message: str, site_request: bool | None = None, existing=None):
        """Record a message that could not be translated.

        Best effort: never raises. Returns the new source message, or None
        when nothing was recorded.
        """
        settings = self.settings

        if not settings.add_missing_translations:
            return None

        if settings.add_missing_site_request_only:
            if site_request is None:
                site_request = is_site_request(settings.admin_url_prefix)
            if not site_request:
                logger.debug(f"Not recording '{category}' message outside a site request")
                return None

        if not message:
            return None

        if not settings.is_managed(category):
            logger.debug(f"Not recording message for unmanaged category '{category}'")
            return None

        try:
            if existing is None:
                existing = message_repository.find_source_message(category, message)
            if existing is not None:
                return None

            source = message_repository.insert_source_message(category, message)
            if source is not None:
                logger.info(f"Recorded missing '{category}' message #{source.id}: {message[:80]!r}")
            return source
        except Exception as e:
            logger.warning(f"Could not record missing '{category}' message: {e}")
            try:
                db.session.rollback()
            except Exception as rollback_error:
                logger.debug(f"Rollback after failed recording also failed: {rollback_error}")
            return None

    def static_messages(self, category: str | None = None, locale: str | None = None) -> list[dict]:
        """List known source messages with their translation for a locale.

        Messages without a translation carry the source text. Read-only:
        nothing is recorded here.
        """
        results = []
        for source, text in message_repository.list_static_messages(category, locale):
            results.append({
                'id': source.id,
                'category': source.category,
                'key': source.message,
                'message': text if text else source.message,
                'language': locale,
            })
        return results
