"""Shared utilities for the message store.

Request helpers used by the store, the host hook and the routes.
"""

from dbmessages.utils.request_context import (
    is_site_request,
    get_request_locale,
)

__all__ = [
    'is_site_request',
    'get_request_locale',
]
