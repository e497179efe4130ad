from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
import os
import logging
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'migrations')


def _database_url(config_name):
    """Resolve the database URL for the given config."""
    if config_name == 'testing':
        return os.getenv('TEST_DATABASE_URL', 'sqlite://')

    url = os.getenv('DATABASE_URL', 'sqlite:///dbmessages.db')
    # Some hosts still hand out postgres:// URLs
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def create_app(config_name='development', create_tables=None):
    """Create the application.

    Tables are only created here when asked for (create_tables or the
    AUTO_CREATE_TABLES env flag); otherwise run `flask db upgrade` or init_db.py.
    """
    app = Flask(__name__)

    # Config
    app.config['SQLALCHEMY_DATABASE_URI'] = _database_url(config_name)
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['TESTING'] = config_name == 'testing'

    # Translation settings are read once per process
    from dbmessages.settings import TranslateSettings, env_flag
    settings = TranslateSettings.from_env()
    app.config['TRANSLATE_SETTINGS'] = settings

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    CORS(app)

    from dbmessages.services.message_store import MessageStore
    app.extensions['message_store'] = MessageStore(settings)

    from dbmessages import models  # noqa: F401 - register tables

    if create_tables is None:
        create_tables = env_flag('AUTO_CREATE_TABLES')

    # Create tables with error handling
    if create_tables:
        with app.app_context():
            try:
                db.create_all()
            except Exception as e:
                logger.warning(f"Could not create database tables: {e}")

    # Register routes
    from dbmessages.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app
