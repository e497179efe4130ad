"""
Pytest configuration and fixtures for testing the message store.
"""

import os
import sys
import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dbmessages import create_app, db
from dbmessages.models import SourceMessage, Translation
from dbmessages.settings import TranslateSettings

fake = Faker()


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    os.environ['FLASK_ENV'] = 'testing'

    app = create_app('testing')

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create a fresh database session for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        yield db.session
        db.session.rollback()


@pytest.fixture
def recording_settings():
    """Settings that record misses for the 'site' and 'app' categories."""
    return TranslateSettings(
        categories=['site', 'app'],
        add_missing_translations=True,
        add_missing_site_request_only=False,
    )


@pytest.fixture
def store(app, db_session, recording_settings):
    """The app's message store, configured to record misses."""
    message_store = app.extensions['message_store']
    original = message_store.settings
    message_store.configure(recording_settings)
    yield message_store
    message_store.configure(original)


def _create_source_message(category='site', message=None):
    """Helper to store a source message."""
    source = SourceMessage(
        category=category,
        message=message if message is not None else fake.sentence(nb_words=4),
    )
    db.session.add(source)
    db.session.commit()
    return source


def _create_translation(source, locale='fr', text=None):
    """Helper to store a translation for a source message."""
    translation = Translation(
        source_message_id=source.id,
        locale=locale,
        text=text if text is not None else fake.sentence(nb_words=4),
    )
    db.session.add(translation)
    db.session.commit()
    return translation


@pytest.fixture
def make_source_message(db_session):
    """Factory fixture for source messages."""
    return _create_source_message


@pytest.fixture
def make_translation(db_session):
    """Factory fixture for translations."""
    return _create_translation


def count_source_messages(category=None, message=None):
    """Count stored source messages, optionally filtered exactly."""
    rows = SourceMessage.query.all()
    if category is not None:
        rows = [r for r in rows if r.category == category]
    if message is not None:
        rows = [r for r in rows if r.message == message]
    return len(rows)


@pytest.fixture
def source_count(db_session):
    """Counter for stored source messages."""
    return count_source_messages
