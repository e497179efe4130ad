"""Source message model: the original-language strings of each category."""

import hashlib
from sqlalchemy.orm import validates
from dbmessages import db


class SourceMessage(db.Model):
    """A translatable string, unique per category under exact comparison."""

    __tablename__ = 'source_messages'

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(255), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)

    # SHA-256 of the UTF-8 bytes of message. Equality on the hash is
    # byte-exact whatever collation the database uses for text columns.
    message_hash = db.Column(db.String(64), nullable=False)

    created_at = db.Column(db.DateTime, default=db.func.now())

    # Relationships
    translations = db.relationship(
        'Translation',
        backref='source_message',
        lazy='select',
        cascade='all, delete-orphan',
    )

    __table_args__ = (
        db.UniqueConstraint('category', 'message_hash', name='unique_source_message'),
    )

    def __repr__(self):
        return f'<SourceMessage {self.id} [{self.category}] {self.message[:40]!r}>'

    @validates('message')
    def _sync_message_hash(self, key, message):
        # Hash always follows the message, on create and on edit
        self.message_hash = self.hash_message(message) if message is not None else None
        return message

    @staticmethod
    def hash_message(message: str) -> str:
        """Generate the lookup hash for a message."""
        return hashlib.sha256(message.encode('utf-8')).hexdigest()

    def matches(self, category: str, message: str) -> bool:
        """Exact, case-sensitive comparison against a category/message pair."""
        return self.category == category and self.message == message
