"""Add source_messages and translations tables

Revision ID: add_message_tables
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'add_message_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'source_messages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('message_hash', sa.String(64), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('category', 'message_hash', name='unique_source_message'),
    )
    op.create_index('ix_source_messages_category', 'source_messages', ['category'])

    op.create_table(
        'translations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source_message_id', sa.Integer(), nullable=False),
        sa.Column('locale', sa.String(16), nullable=False),
        sa.Column('text', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['source_message_id'], ['source_messages.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('source_message_id', 'locale', name='unique_message_locale'),
    )


def downgrade():
    op.drop_table('translations')
    op.drop_index('ix_source_messages_category', table_name='source_messages')
    op.drop_table('source_messages')
