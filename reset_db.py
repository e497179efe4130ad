"""Database reset script for development.

Drops the message tables and recreates them with the current schema.
USE ONLY IN DEVELOPMENT - this deletes every source message and translation!

Usage:
    python reset_db.py
"""

import sys

print("="*60)
print("WARNING: This will DELETE ALL messages and translations!")
print("This should only be used in development.")
print("="*60)

confirm = input("Type 'yes' to confirm: ")
if confirm.lower() != 'yes':
    print("Aborted.")
    sys.exit(0)

from dbmessages import create_app, db

app = create_app()

with app.app_context():
    print("\nDropping all tables...")
    db.drop_all()

    print("Creating all tables with current schema...")
    db.create_all()

    print("\nDatabase reset complete!")
    print("Seed messages with: python scripts/seed_messages.py")
