"""create study tables

Revision ID: 3f9c2a7d41b0
Revises:
Create Date: 2026-10-19 09:12:40

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d41b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


user_role = sa.Enum('user', 'admin', 'super_admin', name='user_role')
admin_action = sa.Enum(
    'SET_ROLE',
    'CREATE_CLASS', 'UPDATE_CLASS', 'DELETE_CLASS',
    'CREATE_CHARACTER', 'UPDATE_CHARACTER', 'DELETE_CHARACTER',
    name='admin_action',
)


def _link_columns() -> list:
    return [
        sa.Column('class_id', sa.Uuid(), nullable=True),
        sa.Column('character_id', sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(['class_id'], ['classes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['character_id'], ['characters.id'], ondelete='CASCADE'),
    ]


def _link_indexes(table: str) -> None:
    op.create_index(f'ix_{table}_class_id', table, ['class_id'])
    op.create_index(f'ix_{table}_character_id', table, ['character_id'])
    op.create_index(f'ix_{table}_user_id', table, ['user_id'])


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'classes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('section', sa.String(length=255), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('estimated_time', sa.Integer(), nullable=False),
        sa.Column('activities', sa.Integer(), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_classes_section', 'classes', ['section'])
    op.create_index('ix_classes_is_published', 'classes', ['is_published'])

    op.create_table(
        'characters',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(length=1024), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_characters_is_published', 'characters', ['is_published'])

    op.create_table(
        'user_progress',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        *_link_columns(),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('reading_progress', sa.Integer(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'class_id', name='uq_user_progress_user_class'),
        sa.UniqueConstraint('user_id', 'character_id', name='uq_user_progress_user_character'),
        sa.CheckConstraint('reading_progress BETWEEN 0 AND 100', name='ck_user_progress_percentage'),
        sa.CheckConstraint('class_id IS NULL OR character_id IS NULL', name='ck_user_progress_single_link'),
    )
    _link_indexes('user_progress')

    op.create_table(
        'bookmarks',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        *_link_columns(),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('class_id IS NULL OR character_id IS NULL', name='ck_bookmarks_single_link'),
    )
    _link_indexes('bookmarks')

    op.create_table(
        'notes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        *_link_columns(),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_private', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('class_id IS NULL OR character_id IS NULL', name='ck_notes_single_link'),
    )
    _link_indexes('notes')

    op.create_table(
        'admin_action_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('actor_id', sa.Uuid(), nullable=False),
        sa.Column('target_user_id', sa.Uuid(), nullable=True),
        sa.Column('target_id', sa.Uuid(), nullable=True),
        sa.Column('action', admin_action, nullable=False),
        sa.Column('before', sa.String(length=255), nullable=True),
        sa.Column('after', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['actor_id'], ['users.id']),
        sa.ForeignKeyConstraint(['target_user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('admin_action_logs')
    for table in ('notes', 'bookmarks', 'user_progress'):
        op.drop_index(f'ix_{table}_user_id', table_name=table)
        op.drop_index(f'ix_{table}_character_id', table_name=table)
        op.drop_index(f'ix_{table}_class_id', table_name=table)
        op.drop_table(table)
    op.drop_index('ix_characters_is_published', table_name='characters')
    op.drop_table('characters')
    op.drop_index('ix_classes_is_published', table_name='classes')
    op.drop_index('ix_classes_section', table_name='classes')
    op.drop_table('classes')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    admin_action.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
