"""Create sponsor, attachment and review tables

Revision ID: sps001_sponsor_tables
Revises:
Create Date: 2026-10-19

This migration creates the tables owned by the sponsor service:
- attachment: uploaded files (sponsor logos) and their CDN URLs
- event_sponsors: per-edition sponsor list with positions and soft delete
- pre_review / post_review: two-phase audit trail, append-only

event, event_edition, company, venue and contact belong to the core
platform schema and must already exist.
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'sps001_sponsor_tables'
down_revision = None
branch_labels = None
depends_on = None


def _review_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('entity_type', sa.String(20), nullable=False),
        sa.Column('entity_id', sa.Integer(), nullable=False),
        sa.Column('entity_name', sa.String(255), nullable=True),
        sa.Column('title', sa.Text(), nullable=True),
        sa.Column('remark', sa.Text(), nullable=True),
        sa.Column('review_type', sa.String(1), nullable=False, server_default='M'),
        sa.Column('modify_type', sa.String(1), nullable=False, server_default='E'),
        sa.Column('by_user', sa.Integer(), nullable=False),
        sa.Column('added_by', sa.Integer(), nullable=True),
        sa.Column('qc_by', sa.Integer(), nullable=True),
        sa.Column('added_on', sa.DateTime(timezone=True), nullable=True),
        sa.Column('qc_on', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('system_verified', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('website', sa.String(500), nullable=True),
        sa.Column('functionality', sa.String(50), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('online_event', sa.Integer(), nullable=True),
        sa.Column('event_audience', sa.String(50), nullable=True),
        sa.Column('city', sa.Integer(), nullable=True),
        sa.Column('country', sa.String(2), nullable=True),
        sa.Column('company_id', sa.Integer(), nullable=True),
        sa.Column('venue_id', sa.Integer(), nullable=True),
    ]


def upgrade() -> None:
    # ============================================
    # 1. attachment
    # ============================================
    op.create_table(
        'attachment',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('file_type', sa.String(50), nullable=False),
        sa.Column('value', sa.String(500), nullable=False),
        sa.Column('cdn_url', sa.String(1000), nullable=True),
        sa.Column('published', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('createdby', sa.Integer(), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )

    # ============================================
    # 2. event_sponsors
    # ============================================
    op.create_table(
        'event_sponsors',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('event.id'), nullable=False),
        sa.Column('event_edition', sa.Integer(), sa.ForeignKey('event_edition.id'), nullable=True),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('company.id'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('website', sa.String(500), nullable=True),
        sa.Column('logo', sa.Integer(), sa.ForeignKey('attachment.id'), nullable=True),
        sa.Column('position', sa.Integer(), nullable=True),
        # 1 active, 2 draft, 0 inactive, -1 deleted
        sa.Column('published', sa.SmallInteger(), nullable=False, server_default='1'),
        sa.Column('verified', sa.SmallInteger(), nullable=True),
        sa.Column('verified_by', sa.Integer(), nullable=True),
        sa.Column('verified_on', sa.DateTime(timezone=True), nullable=True),
        sa.Column('createdby', sa.Integer(), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('modifiedby', sa.Integer(), nullable=True),
        sa.Column('modified', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        'ix_event_sponsors_edition_position', 'event_sponsors',
        ['event_id', 'event_edition', 'position'],
    )
    op.create_index(
        'ix_event_sponsors_edition_company', 'event_sponsors',
        ['event_id', 'event_edition', 'company_id'],
    )

    # ============================================
    # 3. pre_review / post_review
    # ============================================
    op.create_table(
        'pre_review',
        *_review_columns(),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('status', sa.String(1), nullable=False, server_default='P'),
    )
    op.create_index('ix_pre_review_entity', 'pre_review', ['entity_type', 'entity_id'])

    op.create_table(
        'post_review',
        *_review_columns(),
        sa.Column('content_approved', sa.Text(), nullable=True),
        sa.Column('post_status', sa.String(1), nullable=False, server_default='A'),
        sa.Column('review_id', sa.Integer(), sa.ForeignKey('pre_review.id'), nullable=True),
    )
    op.create_index('ix_post_review_entity', 'post_review', ['entity_type', 'entity_id'])
    op.create_index('ix_post_review_review_id', 'post_review', ['review_id'])


def downgrade() -> None:
    op.drop_table('post_review')
    op.drop_table('pre_review')
    op.drop_table('event_sponsors')
    op.drop_table('attachment')
