import logging
from typing import List, NamedTuple, Optional

from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from app.core.errors import ValidationError
from app.models.transaction import Transaction
from app.schemas.transaction import TransactionFilters
from app.utils.db_helpers import store_errors

logger = logging.getLogger(__name__)


class TransactionPage(NamedTuple):
    rows: List[Transaction]
    total: int


def build_predicates(filters: Optional[TransactionFilters] = None) -> list:
    """
    Cada filtro presente aporta un predicado independiente con sus valores
    como parámetros. La consulta los combina con AND.

    La categoría se guarda en mayúsculas, así que se compara contra el valor
    en mayúsculas en Python: lower() de SQLite solo convierte ASCII.
    """
    if filters is None:
        return []

    predicates = []

    if filters.type is not None:
        predicates.append(col(Transaction.type) == filters.type)

    if filters.category:
        predicates.append(col(Transaction.category).contains(filters.category.upper(), autoescape=True))

    if filters.start_date is not None:
        predicates.append(col(Transaction.date) >= filters.start_date)

    if filters.end_date is not None:
        predicates.append(col(Transaction.date) <= filters.end_date)

    if filters.search:
        predicates.append(
            or_(
                col(Transaction.category).contains(filters.search.upper(), autoescape=True),
                col(Transaction.concept).icontains(filters.search, autoescape=True),
            )
        )

    return predicates


def build_list_query(
    filters: Optional[TransactionFilters] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
):
    query = (
        select(Transaction)
        .where(*build_predicates(filters))
        .order_by(
            col(Transaction.date).desc(),
            col(Transaction.created_at).desc(),
            col(Transaction.id).desc(),
        )
    )
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query


def build_count_query(filters: Optional[TransactionFilters] = None):
    return select(func.count()).select_from(Transaction).where(*build_predicates(filters))


def list_transactions(
    session: Session,
    filters: Optional[TransactionFilters] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> TransactionPage:
    if limit is not None and limit < 0:
        raise ValidationError("limit", "limit no puede ser negativo.")
    if offset is not None and offset < 0:
        raise ValidationError("offset", "offset no puede ser negativo.")

    with store_errors(session, "listar las transacciones"):
        total = session.exec(build_count_query(filters)).one()
        rows = session.exec(build_list_query(filters, limit, offset)).all()

    logger.debug("Listado de transacciones: %s filas de %s", len(rows), total)
    return TransactionPage(rows=list(rows), total=total)
