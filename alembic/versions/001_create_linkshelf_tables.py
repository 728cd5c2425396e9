"""create linkshelf tables

Revision ID: 001_linkshelf_tables
Revises:
Create Date: 2024-06-02 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_linkshelf_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Create users, api_keys, collections and links.

    Order columns have no uniqueness constraint: a partial reorder can
    leave duplicate positions, and reads break ties on id.
    """
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'api_keys',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('key_hash', sa.String(255), nullable=False),
        sa.Column('key_prefix', sa.String(20), nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_used_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_api_keys_key_hash', 'api_keys', ['key_hash'], unique=True)

    op.create_table(
        'collections',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_collections_user_id', 'collections', ['user_id'])
    op.create_index('ix_collections_user_order', 'collections', ['user_id', 'order'])
    # Public catalog scans public rows newest first
    op.create_index('ix_collections_public_updated', 'collections', ['is_public', 'updated_at'])

    op.create_table(
        'links',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column(
            'collection_id', sa.String(36),
            sa.ForeignKey('collections.id', ondelete='CASCADE'), nullable=False
        ),
        sa.Column('url', sa.String(2048), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_links_collection_id', 'links', ['collection_id'])
    op.create_index('ix_links_collection_order', 'links', ['collection_id', 'order'])


def downgrade() -> None:
    """
    Drop all linkshelf tables.

    Warning: This deletes every collection and link.
    """
    op.drop_table('links')
    op.drop_table('collections')
    op.drop_table('api_keys')
    op.drop_table('users')
