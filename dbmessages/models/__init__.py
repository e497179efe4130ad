"""Database models for the message store."""

from .source_message import SourceMessage
from .translation import Translation

__all__ = ['SourceMessage', 'Translation']
