"""Create job board tables

Revision ID: 001_create_job_board_tables
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_create_job_board_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create jobs, employers, admin_users and stripe_orders."""
    op.create_table(
        'employers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('company_logo', sa.String(length=1000), nullable=True),
        sa.Column('contact_person', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=40), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_employers_email', 'employers', ['email'])

    op.create_table(
        'admin_users',
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('is_super_admin', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('user_id'),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('employer_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('company_name', sa.String(length=255), nullable=False),
        sa.Column('company_logo', sa.String(length=1000), nullable=True),
        sa.Column('company_website', sa.String(length=500), nullable=True),
        sa.Column('location', sa.String(length=120), nullable=False),
        sa.Column('salary_min', sa.Integer(), nullable=True),
        sa.Column('salary_max', sa.Integer(), nullable=True),
        sa.Column('salary_currency', sa.String(length=3), nullable=True, server_default='AUD'),
        sa.Column('job_type', sa.String(length=20), nullable=False, server_default='full_time'),
        sa.Column('is_remote', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('requirements', sa.JSON(), nullable=True),
        sa.Column('benefits', sa.JSON(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('categories', sa.JSON(), nullable=True),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('contact_phone', sa.String(length=40), nullable=True),
        sa.Column('apply_url', sa.String(length=1000), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_filled', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('applications_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_jobs_employer_id', 'jobs', ['employer_id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_location', 'jobs', ['location'])
    op.create_index('ix_jobs_is_filled', 'jobs', ['is_filled'])
    op.create_index('idx_jobs_open', 'jobs', ['is_filled', 'expires_at'])
    op.create_index('idx_jobs_employer_created', 'jobs', ['employer_id', 'created_at'])

    op.create_table(
        'stripe_orders',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('checkout_session_id', sa.String(length=255), nullable=False),
        sa.Column('payment_intent_id', sa.String(length=255), nullable=True),
        sa.Column('customer_id', sa.String(length=255), nullable=True),
        sa.Column('employer_id', sa.String(length=36), nullable=True),
        sa.Column('job_id', sa.String(length=36), nullable=True),
        sa.Column('amount_subtotal', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('amount_total', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('currency', sa.String(length=3), nullable=False, server_default='aud'),
        sa.Column('payment_status', sa.String(length=30), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('checkout_session_id', name='uq_stripe_orders_checkout_session_id'),
    )
    op.create_index('ix_stripe_orders_employer_id', 'stripe_orders', ['employer_id'])


def downgrade() -> None:
    """Drop the job board tables."""
    op.drop_index('ix_stripe_orders_employer_id', table_name='stripe_orders')
    op.drop_table('stripe_orders')

    op.drop_index('idx_jobs_employer_created', table_name='jobs')
    op.drop_index('idx_jobs_open', table_name='jobs')
    op.drop_index('ix_jobs_is_filled', table_name='jobs')
    op.drop_index('ix_jobs_location', table_name='jobs')
    op.drop_index('ix_jobs_title', table_name='jobs')
    op.drop_index('ix_jobs_employer_id', table_name='jobs')
    op.drop_table('jobs')

    op.drop_table('admin_users')

    op.drop_index('ix_employers_email', table_name='employers')
    op.drop_table('employers')
