#!/usr/bin/env python3
"""Seed the database with known source messages and their translations."""

import sys
import os

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dbmessages import create_app, db
from dbmessages.services import message_repository

# category -> source message -> {locale: text}
MESSAGES_DATA = {
    'site': {
        'Hello': {'fr': 'Bonjour', 'de': 'Hallo', 'lv': 'Sveiki'},
        'Goodbye': {'fr': 'Au revoir', 'de': 'Auf Wiedersehen', 'lv': 'Uz redzēšanos'},
        'Read more': {'fr': 'Lire la suite', 'de': 'Weiterlesen'},
        'Search': {'fr': 'Rechercher', 'de': 'Suchen', 'lv': 'Meklēt'},
        'Contact us': {'fr': 'Nous contacter', 'de': 'Kontakt'},
    },
}


def seed_messages(data=None):
    """Insert missing source messages and set their translations.

    Returns (created_messages, saved_translations).
    """
    data = MESSAGES_DATA if data is None else data
    created = 0
    saved = 0

    for category, messages in data.items():
        for message, translations in messages.items():
            source = message_repository.find_source_message(category, message)
            if source is None:
                source = message_repository.insert_source_message(category, message)
                if source is None:
                    # Recorded concurrently, pick up the winner
                    source = message_repository.find_source_message(category, message)
                else:
                    created += 1

            for locale, text in translations.items():
                message_repository.set_translation(source, locale, text)
                saved += 1

    return created, saved


def main():
    app = create_app(os.getenv('FLASK_ENV', 'development'))

    with app.app_context():
        db.create_all()
        try:
            created, saved = seed_messages()
        except Exception as e:
            db.session.rollback()
            print(f'❌ Seeding failed: {e}')
            sys.exit(1)

    print(f'✅ Created {created} source messages, saved {saved} translations')


if __name__ == '__main__':
    main()
