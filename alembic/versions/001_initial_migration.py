"""Initial migration: create words and translations tables

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create words table
    op.create_table(
        'words',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('language', sa.String(), nullable=False),
        sa.Column('sex', sa.String(), nullable=True),
        sa.Column('text', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('text', 'language', name='uq_words_text_language')
    )

    # Create translations table
    op.create_table(
        'translations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('word_from', sa.Integer(), nullable=False),
        sa.Column('word_to', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['word_from'], ['words.id'], ),
        sa.ForeignKeyConstraint(['word_to'], ['words.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('word_from', 'word_to', name='uq_translations_word_from_word_to')
    )
    op.create_index(op.f('ix_translations_word_from'), 'translations', ['word_from'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_translations_word_from'), table_name='translations')
    op.drop_table('translations')
    op.drop_table('words')
