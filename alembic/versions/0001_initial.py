"""Create users, profiles, transcripts and insights

Revision ID: 0001_initial
Revises: None
Create Date: 2025-09-29 16:57:38.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('full_name', sa.String(255)),
        sa.Column('company', sa.String(255)),
        sa.Column('role', sa.String(255)),
        *_timestamps(),
    )
    op.create_table(
        'transcripts',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('file_name', sa.Text(), nullable=False),
        sa.Column('transcript_text', sa.Text()),
        sa.Column('audio_duration', sa.Integer()),
        sa.Column('processed_at', sa.DateTime(timezone=True)),
        *_timestamps(),
    )
    op.create_index('ix_transcripts_user_id', 'transcripts', ['user_id'])
    op.create_table(
        'insights',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('transcript_id', sa.String(36), sa.ForeignKey('transcripts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('summary_text', sa.Text(), nullable=False),
        sa.Column('key_points', sa.JSON()),
        sa.Column('tags', sa.JSON()),
        sa.Column('confidence_score', sa.Float()),
        *_timestamps(),
        sa.CheckConstraint('confidence_score >= 0 AND confidence_score <= 1', name='ck_insights_confidence_range'),
    )
    op.create_index('ix_insights_transcript_id', 'insights', ['transcript_id'])
    op.create_index('ix_insights_user_id', 'insights', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_insights_user_id', table_name='insights')
    op.drop_index('ix_insights_transcript_id', table_name='insights')
    op.drop_table('insights')
    op.drop_index('ix_transcripts_user_id', table_name='transcripts')
    op.drop_table('transcripts')
    op.drop_table('profiles')
    op.drop_table('users')
