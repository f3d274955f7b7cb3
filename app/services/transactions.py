import datetime as dt
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping

from sqlmodel import Session

from app.core import config
from app.core.errors import NotFound, ValidationError
from app.models.enums import TransactionType
from app.models.transaction import Transaction, utcnow
from app.utils.category_helpers import ensure_known_category, normalize_category
from app.utils.db_helpers import store_errors

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("date", "type", "category", "budget", "amount")
EDITABLE_FIELDS = REQUIRED_FIELDS + ("concept",)

MONEY_INTEGER_DIGITS = 10
CENT = Decimal("0.01")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(value: Any) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError("date", "La fecha debe tener formato AAAA-MM-DD.")


def _parse_type(value: Any) -> TransactionType:
    try:
        return TransactionType(value)
    except ValueError:
        raise ValidationError("type", 'El tipo debe ser "income" o "expense".')


def _parse_money(field: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(field, f"El campo '{field}' debe ser un número.")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(field, f"El campo '{field}' debe ser un número.")
    if not number.is_finite():
        raise ValidationError(field, f"El campo '{field}' debe ser un número.")
    if number < 0:
        raise ValidationError(field, f"El campo '{field}' no puede ser negativo.")
    # Columnas Numeric(12, 2): hasta 10 dígitos enteros y 2 decimales
    if number.adjusted() >= MONEY_INTEGER_DIGITS:
        raise ValidationError(field, f"El campo '{field}' excede el valor máximo permitido.")
    if number != number.quantize(CENT):
        raise ValidationError(field, f"El campo '{field}' admite máximo 2 decimales.")
    return number


def _parse_concept(value: Any):
    if _is_blank(value):
        return None
    return str(value).strip()


def validate_fields(fields: Mapping[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    Valida y normaliza los campos de una transacción.

    En modo parcial solo se revisan los campos presentes; en creación todos
    los de REQUIRED_FIELDS son obligatorios. No toca la base de datos.
    """
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        field = sorted(unknown)[0]
        raise ValidationError(field, f"Campo no permitido: {field}")

    for field in REQUIRED_FIELDS:
        if field in fields or not partial:
            if _is_blank(fields.get(field)):
                raise ValidationError(field, f"El campo '{field}' es obligatorio.")

    clean: Dict[str, Any] = {}
    if "date" in fields:
        clean["date"] = _parse_date(fields["date"])
    if "type" in fields:
        clean["type"] = _parse_type(fields["type"])
    if "category" in fields:
        clean["category"] = normalize_category(fields["category"])
    if "concept" in fields:
        clean["concept"] = _parse_concept(fields["concept"])
    for field in ("budget", "amount"):
        if field in fields:
            clean[field] = _parse_money(field, fields[field])
    return clean


def _check_vocabulary(category: str, type_: TransactionType) -> None:
    if config.ENFORCE_CATEGORY_VOCABULARY:
        ensure_known_category(category, type_)


def get_transaction(session: Session, transaction_id: int) -> Transaction:
    with store_errors(session, "consultar la transacción"):
        transaction = session.get(Transaction, transaction_id)
    if not transaction:
        raise NotFound("Transacción", transaction_id)
    return transaction


def create_transaction(session: Session, fields: Mapping[str, Any]) -> Transaction:
    data = validate_fields(fields)
    _check_vocabulary(data["category"], data["type"])

    transaction = Transaction(**data)
    with store_errors(session, "crear la transacción"):
        session.add(transaction)
        session.commit()
        session.refresh(transaction)

    logger.info("Transacción %s creada (%s %s)", transaction.id, transaction.type.value, transaction.category)
    return transaction


def update_transaction(session: Session, transaction_id: int, fields: Mapping[str, Any]) -> Transaction:
    data = validate_fields(fields, partial=True)
    if not data:
        raise ValidationError("body", "Nada para actualizar.")

    transaction = get_transaction(session, transaction_id)

    if "category" in data or "type" in data:
        _check_vocabulary(
            data.get("category", transaction.category),
            data.get("type", TransactionType(transaction.type)),
        )

    for field, value in data.items():
        setattr(transaction, field, value)
    transaction.updated_at = utcnow()

    with store_errors(session, "actualizar la transacción"):
        session.add(transaction)
        session.commit()
        session.refresh(transaction)

    logger.info("Transacción %s actualizada: %s", transaction_id, ", ".join(sorted(data)))
    return transaction


def delete_transaction(session: Session, transaction_id: int) -> Transaction:
    transaction = get_transaction(session, transaction_id)
    # Copia fuera de la sesión para poder mostrarla después del commit
    deleted = Transaction(**{name: getattr(transaction, name) for name in Transaction.model_fields})

    with store_errors(session, "eliminar la transacción"):
        session.delete(transaction)
        session.commit()

    logger.info("Transacción %s eliminada", transaction_id)
    return deleted
