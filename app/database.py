import logging

from sqlmodel import SQLModel, Session, create_engine

from app.core.config import DATABASE_URL, DB_ECHO

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Un solo engine (pool de conexiones) por proceso
engine = create_engine(DATABASE_URL, echo=DB_ECHO, pool_pre_ping=True, connect_args=connect_args)


def create_db_and_tables(bind=None):
    from app.models.transaction import Transaction  # importar los modelos
    SQLModel.metadata.create_all(bind or engine)
    logger.info("Tablas verificadas")


def get_session():
    with Session(engine) as session:
        yield session
