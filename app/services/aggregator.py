import calendar
import datetime as dt
import logging
from decimal import Decimal
from typing import Iterable, Tuple

from sqlmodel import Session, col, select

from app.core.errors import ValidationError
from app.models.enums import TransactionType
from app.models.transaction import Transaction
from app.schemas.monthly_summary import CategoryRollup, MonthlySummaryRead
from app.utils.db_helpers import store_errors

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _as_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def month_bounds(year: int, month: int) -> Tuple[dt.date, dt.date]:
    """Primer y último día del mes, ambos inclusive (años bisiestos incluidos)."""
    if not 1 <= month <= 12:
        raise ValidationError("month", "El mes debe estar entre 1 y 12.")
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise ValidationError("year", "Año inválido.")

    last_day = calendar.monthrange(year, month)[1]
    return dt.date(year, month, 1), dt.date(year, month, last_day)


def fetch_transactions_between(session: Session, start: dt.date, end: dt.date) -> list:
    query = (
        select(Transaction)
        .where(col(Transaction.date) >= start)
        .where(col(Transaction.date) <= end)
        .order_by(col(Transaction.date).desc())
    )
    with store_errors(session, "consultar las transacciones del mes"):
        return list(session.exec(query).all())


def summarize(transactions: Iterable[Transaction]) -> dict:
    # Agrupa por (tipo, categoría) respetando el orden en que aparecen
    grouped = {}
    for tx in transactions:
        key = (TransactionType(tx.type), tx.category)
        if key not in grouped:
            grouped[key] = {"category": tx.category, "budget": ZERO, "amount": ZERO}
        grouped[key]["budget"] += _as_decimal(tx.budget)
        grouped[key]["amount"] += _as_decimal(tx.amount)

    ingresos = []
    egresos = []
    for (type_, _), data in grouped.items():
        rollup = CategoryRollup(**data)
        if type_ == TransactionType.income:
            ingresos.append(rollup)
        else:
            egresos.append(rollup)

    total_income = sum((r.amount for r in ingresos), ZERO)
    total_expense = sum((r.amount for r in egresos), ZERO)
    expense_ratio = total_expense / total_income * 100 if total_income > 0 else ZERO

    return {
        "ingresos": ingresos,
        "egresos": egresos,
        "total_income": total_income,
        "total_expense": total_expense,
        "total_income_budget": sum((r.budget for r in ingresos), ZERO),
        "total_expense_budget": sum((r.budget for r in egresos), ZERO),
        "balance": total_income - total_expense,
        "expense_ratio": expense_ratio,
    }


def get_monthly_summary(session: Session, year: int, month: int) -> MonthlySummaryRead:
    start_date, end_date = month_bounds(year, month)
    transactions = fetch_transactions_between(session, start_date, end_date)
    logger.debug("Resumen %s-%02d: %s transacciones", year, month, len(transactions))

    return MonthlySummaryRead(
        year=year,
        month=month,
        start_date=start_date,
        end_date=end_date,
        **summarize(transactions),
    )
