"""Read-only routes for static messages."""

import logging

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from dbmessages import db
from dbmessages.constants import validate_category
from dbmessages.i18n import get_message_store
from dbmessages.utils import get_request_locale

logger = logging.getLogger(__name__)

messages_bp = Blueprint('messages', __name__)


@messages_bp.route('', methods=['GET'])
def get_static_messages():
    """List source messages with their translation for a locale.

    Query params:
        - category: Only messages of this category
        - locale: Locale to resolve translations for (or lang / Accept-Language)
    """
    category = request.args.get('category') or None
    locale = request.args.get('locale') or get_request_locale()

    if category is not None and not validate_category(category):
        return jsonify({'error': 'Invalid category'}), 400

    try:
        messages = get_message_store().static_messages(category=category, locale=locale)
        return jsonify({
            'messages': messages,
            'total': len(messages),
            'category': category,
            'locale': locale,
        }), 200
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Static messages lookup failed: {e}")
        return jsonify({'error': 'Message store unavailable'}), 500


@messages_bp.route('/translate', methods=['GET'])
def translate_message():
    """Translate one message.

    Query params:
        - category: Message category (required)
        - message: Source text
        - locale: Target locale (or lang / Accept-Language)
    """
    category = request.args.get('category', '')
    message = request.args.get('message', '')
    locale = request.args.get('locale') or get_request_locale()

    if not validate_category(category):
        return jsonify({'error': 'category is required'}), 400

    try:
        translation = get_message_store().translate(category, message, locale)
        return jsonify({
            'category': category,
            'message': message,
            'locale': locale,
            'translation': translation,
        }), 200
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Translation lookup failed: {e}")
        return jsonify({'error': 'Message store unavailable'}), 500
