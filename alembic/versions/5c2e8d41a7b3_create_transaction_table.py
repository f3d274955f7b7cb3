"""create transaction table

Revision ID: 5c2e8d41a7b3
Revises:
Create Date: 2025-09-02 19:41:27.118304

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c2e8d41a7b3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema: create transaction table."""
    op.create_table(
        'transaction',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('type', sa.Enum('income', 'expense', name='transactiontype', native_enum=False, length=16), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('concept', sa.String(), nullable=True),
        sa.Column('budget', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('budget >= 0', name='ck_transaction_budget_non_negative'),
        sa.CheckConstraint('amount >= 0', name='ck_transaction_amount_non_negative'),
    )
    op.create_index('ix_transaction_date', 'transaction', ['date'])


def downgrade() -> None:
    """Downgrade schema: drop transaction table."""
    op.drop_index('ix_transaction_date', table_name='transaction')
    op.drop_table('transaction')
