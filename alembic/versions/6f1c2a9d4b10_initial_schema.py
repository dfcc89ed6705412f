"""Initial schema: users, tokens, folders, tags, notes, versions, comments

Revision ID: 6f1c2a9d4b10
Revises:
Create Date: 2026-10-18 10:12:31.408113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from inkwell.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '6f1c2a9d4b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('username', sa.String(length=50), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(username) <= 50', name='ck_users_username_len'),
    )
    op.create_index('idx_users_username', 'users', ['username'])

    op.create_table(
        'refresh_tokens',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('token', sa.String(length=255), nullable=False, unique=True),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_refresh_tokens_user_id', 'refresh_tokens', ['user_id'])
    op.create_index('idx_refresh_tokens_expires_at', 'refresh_tokens', ['expires_at'])

    op.create_table(
        'folders',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) <= 100', name='ck_folders_name_len'),
        sa.CheckConstraint('length(color) <= 7', name='ck_folders_color_len'),
    )
    op.create_index('idx_folders_user_id', 'folders', ['user_id'])

    op.create_table(
        'tags',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('user_id', 'name', name='uq_tags_user_name'),
        sa.CheckConstraint('length(name) <= 50', name='ck_tags_name_len'),
        sa.CheckConstraint('length(color) <= 7', name='ck_tags_color_len'),
    )
    op.create_index('idx_tags_user_id', 'tags', ['user_id'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('pinned', sa.Boolean(), nullable=False),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('folder_id', GUID(), sa.ForeignKey('folders.id', ondelete='SET NULL'), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('lock_hash', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
    )
    op.create_index('idx_notes_user_id', 'notes', ['user_id'])
    op.create_index('idx_notes_folder_id', 'notes', ['folder_id'])
    op.create_index('idx_notes_user_deleted', 'notes', ['user_id', 'deleted_at'])
    op.create_index('idx_notes_user_updated', 'notes', ['user_id', 'updated_at'])

    op.create_table(
        'note_tags',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('tag_id', GUID(), sa.ForeignKey('tags.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('note_id', 'tag_id', name='uq_note_tags_note_tag'),
    )
    op.create_index('idx_note_tags_note_id', 'note_tags', ['note_id'])
    op.create_index('idx_note_tags_tag_id', 'note_tags', ['tag_id'])

    op.create_table(
        'note_versions',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_note_versions_note_created', 'note_versions', ['note_id', 'created_at'])

    op.create_table(
        'comments',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(content) <= 2000', name='ck_comments_content_len'),
    )
    op.create_index('idx_comments_note_id', 'comments', ['note_id'])


def downgrade() -> None:
    """Downgrade schema."""
    for table in ('comments', 'note_versions', 'note_tags', 'notes', 'tags', 'folders', 'refresh_tokens', 'users'):
        op.drop_table(table)
