"""create users and transactions tables

Revision ID: 0001_create_users_and_transactions
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_users_and_transactions'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'transactions',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.Uuid(as_uuid=True), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date, nullable=False),
        sa.Column('details', sa.Text, nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('type', sa.Enum('earn', 'expense', name='transaction_type'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_transactions_user_id_date', 'transactions', ['user_id', 'date'])

def downgrade():
    op.drop_index('ix_transactions_user_id_date', table_name='transactions')
    op.drop_table('transactions')
    sa.Enum(name='transaction_type').drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
