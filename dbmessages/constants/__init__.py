"""Shared constants for the application."""

from dbmessages.constants.categories import (
    DEFAULT_CATEGORIES,
    MAX_CATEGORY_LENGTH,
    parse_categories,
    validate_category,
)

__all__ = [
    'DEFAULT_CATEGORIES',
    'MAX_CATEGORY_LENGTH',
    'parse_categories',
    'validate_category',
]
