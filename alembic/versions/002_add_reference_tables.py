"""Add languages and sex reference tables

Revision ID: 002_add_reference_tables
Revises: 001_initial
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '002_add_reference_tables'
down_revision = '001_initial'
branch_labels = None
depends_on = None


def upgrade() -> None:
    languages_table = op.create_table(
        'languages',
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('code')
    )
    sex_table = op.create_table(
        'sex',
        sa.Column('code', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('code')
    )

    op.bulk_insert(
        languages_table,
        [
            {'code': 'DE', 'name': 'German'},
            {'code': 'EN', 'name': 'English'},
            {'code': 'RU', 'name': 'Russian'},
        ]
    )
    op.bulk_insert(
        sex_table,
        [
            {'code': 'F'},
            {'code': 'M'},
            {'code': 'N'},
        ]
    )


def downgrade() -> None:
    op.drop_table('sex')
    op.drop_table('languages')
