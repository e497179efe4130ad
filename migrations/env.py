import logging
from logging.config import fileConfig

from sqlalchemy import create_engine
from sqlalchemy import pool

from alembic import context
from flask import current_app, has_app_context

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from dbmessages import create_app, db
from dbmessages.models import *  # noqa: F401,F403

# this is the Alembic Config object
config = context.config

# Interpret the config file for Python logging.
fileConfig(config.config_file_name, disable_existing_loggers=False)
logger = logging.getLogger('alembic.env')

# `flask db` runs inside the app it was given; standalone alembic builds one
if has_app_context():
    app = current_app._get_current_object()
else:
    app = create_app(create_tables=False)
target_metadata = db.metadata


def get_url():
    """Get database URL from Flask app configuration."""
    with app.app_context():
        url = app.config.get('SQLALCHEMY_DATABASE_URI')
        if not url:
            url = os.environ.get('DATABASE_URL', 'sqlite:///dbmessages.db')
        if url.startswith('postgres://'):
            url = url.replace('postgres://', 'postgresql://', 1)
        return url


def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    context.configure(
        url=get_url(), target_metadata=target_metadata, literal_binds=True
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode."""

    def process_revision_directives(context, revision, directives):
        if getattr(config.cmd_opts, 'autogenerate', False):
            script = directives[0]
            if script.upgrade_ops.is_empty():
                directives[:] = []
                logger.info('No changes in schema detected.')

    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            process_revision_directives=process_revision_directives,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
