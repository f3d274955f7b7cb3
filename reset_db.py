from sqlmodel import SQLModel
from app.database import create_db_and_tables, engine
from app.models.transaction import Transaction  # noqa: F401

SQLModel.metadata.drop_all(engine)
create_db_and_tables()

print("✅ Base de datos reseteada correctamente (tabla transaction recreada).")
