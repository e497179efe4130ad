"""Storage access for source messages and translations.

Every lookup compares category, message and locale exactly. Rows are
narrowed down in SQL through the indexed message hash and then re-checked in
Python, so a case-insensitive collation can never make two distinct strings
match.
"""

import logging

from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError

from dbmessages import db
from dbmessages.models import SourceMessage, Translation

logger = logging.getLogger(__name__)


def find_source_message(category: str, message: str) -> SourceMessage | None:
    """Find the source message matching category and message exactly."""
    candidates = SourceMessage.query.filter_by(
        category=category,
        message_hash=SourceMessage.hash_message(message),
    ).all()

    for candidate in candidates:
        if candidate.matches(category, message):
            return candidate
    return None


def insert_source_message(category: str, message: str) -> SourceMessage | None:
    """Insert a new source message.

    Returns None when the row already exists, which happens when another
    request recorded the same message first. Other database errors propagate.
    """
    source = SourceMessage(category=category, message=message)
    db.session.add(source)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.debug(f"Source message already recorded in '{category}': {message[:80]!r}")
        return None
    return source


def find_translation(source_message_id: int, locale: str) -> Translation | None:
    """Find the translation of a source message for a locale."""
    candidates = Translation.query.filter_by(
        source_message_id=source_message_id,
        locale=locale,
    ).all()

    for candidate in candidates:
        if candidate.locale == locale:
            return candidate
    return None


def set_translation(source_message: SourceMessage, locale: str, text: str | None) -> Translation:
    """Create or update the translation of a source message for a locale."""
    translation = find_translation(source_message.id, locale)
    if translation is None:
        translation = Translation(
            source_message_id=source_message.id,
            locale=locale,
            text=text,
        )
        db.session.add(translation)
    else:
        translation.text = text

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return translation


def list_static_messages(category: str | None = None, locale: str | None = None) -> list[tuple]:
    """List source messages with their translation text for a locale.

    Returns (SourceMessage, text) pairs ordered by category then id. The text
    is None when there is no translation for the locale, or no locale given.
    """
    if locale is None:
        query = SourceMessage.query
    else:
        query = db.session.query(SourceMessage, Translation).outerjoin(
            Translation,
            and_(
                Translation.source_message_id == SourceMessage.id,
                Translation.locale == locale,
            ),
        )

    if category is not None:
        query = query.filter(SourceMessage.category == category)

    rows = query.order_by(SourceMessage.category, SourceMessage.id).all()
    if locale is None:
        rows = [(source, None) for source in rows]

    # A case-insensitive join can return more than one row per message
    texts = {}
    sources = []
    for source, translation in rows:
        if category is not None and source.category != category:
            continue
        if source.id not in texts:
            texts[source.id] = None
            sources.append(source)
        if translation is not None and translation.locale == locale:
            texts[source.id] = translation.text

    return [(source, texts[source.id]) for source in sources]
