"""创建 owners / pets / types 表

Revision ID: 20261019090000
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019090000'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'types',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_types_name', 'types', ['name'], unique=True)

    op.create_table(
        'owners',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=80), nullable=False),
        sa.Column('telephone', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_owners_last_name', 'owners', ['last_name'], unique=False)

    op.create_table(
        'pets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=30), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['type_id'], ['types.id']),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_pets_name', 'pets', ['name'], unique=False)
    op.create_index('ix_pets_owner_id', 'pets', ['owner_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_pets_owner_id', table_name='pets')
    op.drop_index('ix_pets_name', table_name='pets')
    op.drop_table('pets')
    op.drop_index('ix_owners_last_name', table_name='owners')
    op.drop_table('owners')
    op.drop_index('ix_types_name', table_name='types')
    op.drop_table('types')
