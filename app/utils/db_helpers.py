import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.errors import TransportFailure

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(session: Session, action: str):
    """
    Convierte cualquier error de SQLAlchemy en TransportFailure.
    Hace rollback para que nunca quede una escritura a medias.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Fallo de base de datos al %s", action)
        raise TransportFailure(f"No se pudo {action}: error de base de datos") from exc
