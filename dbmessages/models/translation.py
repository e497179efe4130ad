"""Translation model: the text of a source message in one locale."""

from dbmessages import db


class Translation(db.Model):
    """Translated text for a source message. Written by administrators."""

    __tablename__ = 'translations'

    id = db.Column(db.Integer, primary_key=True)
    source_message_id = db.Column(
        db.Integer,
        db.ForeignKey('source_messages.id', ondelete='CASCADE'),
        nullable=False,
    )
    locale = db.Column(db.String(16), nullable=False)  # e.g. 'fr', 'de-CH'
    text = db.Column(db.Text, nullable=True)  # NULL or '' means not translated yet

    # Timestamps
    created_at = db.Column(db.DateTime, default=db.func.now())
    updated_at = db.Column(db.DateTime, default=db.func.now(), onupdate=db.func.now())

    # One translation per source message and locale
    __table_args__ = (
        db.UniqueConstraint('source_message_id', 'locale', name='unique_message_locale'),
    )

    def __repr__(self):
        return f'<Translation {self.id} source={self.source_message_id} locale={self.locale}>'

    @property
    def is_translated(self) -> bool:
        return bool(self.text)
