#!/usr/bin/env python
"""Database initialization script for the message store.

Creates the source_messages and translations tables from the SQLAlchemy
models. Run this once before starting the application for the first time,
or use `flask db upgrade` to go through the migrations instead.

Usage:
    python init_db.py
"""

import os
import sys
from dbmessages import create_app, db


def init_database():
    """Initialize the database by creating all tables."""
    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)

    print(f"\n{'='*60}")
    print(f"Database Initialization for {config_name.upper()} Environment")
    print(f"{'='*60}\n")

    with app.app_context():
        try:
            print("Creating database tables...")
            print(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}\n")

            db.create_all()

            tables_info = [
                ("source_messages", "Original-language strings per category"),
                ("translations", "Translated text per source message and locale"),
            ]

            print("Created tables:")
            for table_name, description in tables_info:
                print(f"  ✓ {table_name:<25} - {description}")

            settings = app.config['TRANSLATE_SETTINGS']
            print(f"\nManaged categories: {', '.join(settings.categories)}")
            print(f"Record missing translations: {settings.add_missing_translations}")
            print(f"\n{'='*60}")
            print("✅ Database initialization complete!")
            print(f"{'='*60}\n")
            return True

        except Exception as e:
            print(f"❌ Error creating database: {type(e).__name__}: {e}\n")
            return False


if __name__ == '__main__':
    success = init_database()
    sys.exit(0 if success else 1)
