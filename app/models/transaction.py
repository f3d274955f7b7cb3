import datetime as dt
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Enum as SAEnum
from sqlmodel import SQLModel, Field

from app.models.enums import TransactionType


def utcnow() -> dt.datetime:
    # naive UTC, igual que el resto de columnas de fecha
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


class Transaction(SQLModel, table=True):
    __table_args__ = (
        CheckConstraint("budget >= 0", name="ck_transaction_budget_non_negative"),
        CheckConstraint("amount >= 0", name="ck_transaction_amount_non_negative"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    date: dt.date = Field(index=True)
    type: TransactionType = Field(
        sa_column=Column(
            SAEnum(TransactionType, name="transactiontype", native_enum=False, length=16),
            nullable=False,
        )
    )
    category: str = Field(max_length=100)
    concept: Optional[str] = None
    budget: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)

    created_at: dt.datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=False), nullable=False),
    )
    updated_at: dt.datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=False), nullable=False),
    )
