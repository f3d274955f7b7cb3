import datetime as dt
from typing import List

from pydantic import BaseModel

from app.schemas.transaction import Money


class CategoryRollup(BaseModel):
    category: str
    budget: Money
    amount: Money


class MonthlySummaryRead(BaseModel):
    year: int
    month: int
    start_date: dt.date
    end_date: dt.date
    ingresos: List[CategoryRollup]
    egresos: List[CategoryRollup]
    total_income: Money
    total_expense: Money
    total_income_budget: Money
    total_expense_budget: Money
    balance: Money
    expense_ratio: Money  # porcentaje, puede superar 100
