import datetime as dt
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.constants.categories import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from app.core.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.database import get_session
from app.models.enums import TransactionType
from app.schemas.monthly_summary import MonthlySummaryRead
from app.schemas.transaction import (
    CategoryVocabulary,
    TransactionCreate,
    TransactionDeleted,
    TransactionFilters,
    TransactionListResponse,
    TransactionRead,
    TransactionUpdate,
)
from app.services import aggregator, query_builder
from app.services import transactions as service

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
@router.get("/", response_model=TransactionListResponse)
def list_transactions(
    session: Session = Depends(get_session),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    type: Optional[TransactionType] = Query(None),
    category: Optional[str] = Query(None),
    start_date: Optional[dt.date] = Query(None, alias="startDate"),
    end_date: Optional[dt.date] = Query(None, alias="endDate"),
    search: Optional[str] = Query(None),
):
    filters = TransactionFilters(
        type=type,
        category=category,
        start_date=start_date,
        end_date=end_date,
        search=search,
    )
    result = query_builder.list_transactions(session, filters, limit=limit, offset=(page - 1) * limit)

    return TransactionListResponse(
        transactions=[TransactionRead.model_validate(t) for t in result.rows],
        total=result.total,
        page=page,
        limit=limit,
        total_pages=math.ceil(result.total / limit),
    )


@router.get("/monthly", response_model=MonthlySummaryRead)
def get_monthly_summary(
    session: Session = Depends(get_session),
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None),
):
    today = dt.datetime.now(dt.timezone.utc).date()
    return aggregator.get_monthly_summary(
        session,
        year if year is not None else today.year,
        month if month is not None else today.month,
    )


@router.get("/categories", response_model=CategoryVocabulary)
def list_categories():
    return CategoryVocabulary(income=list(INCOME_CATEGORIES), expense=list(EXPENSE_CATEGORIES))


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(transaction_id: int, session: Session = Depends(get_session)):
    return service.get_transaction(session, transaction_id)


@router.post("", response_model=TransactionRead, status_code=201)
@router.post("/", response_model=TransactionRead, status_code=201)
def create_transaction(data: TransactionCreate, session: Session = Depends(get_session)):
    return service.create_transaction(session, data.model_dump(exclude_unset=True))


@router.put("/{transaction_id}", response_model=TransactionRead)
@router.patch("/{transaction_id}", response_model=TransactionRead)
def update_transaction(
    transaction_id: int,
    data: TransactionUpdate,
    session: Session = Depends(get_session),
):
    return service.update_transaction(session, transaction_id, data.model_dump(exclude_unset=True))


@router.delete("/{transaction_id}", response_model=TransactionDeleted)
def delete_transaction(transaction_id: int, session: Session = Depends(get_session)):
    deleted = service.delete_transaction(session, transaction_id)
    return TransactionDeleted(
        message="Transacción eliminada correctamente",
        transaction=TransactionRead.model_validate(deleted),
    )
