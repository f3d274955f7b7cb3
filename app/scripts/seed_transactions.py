import datetime as dt

from sqlmodel import Session

from app.database import create_db_and_tables, engine
from app.services.query_builder import list_transactions
from app.services.transactions import create_transaction

BASE_TRANSACTIONS = [
    {"day": 1, "type": "income", "category": "Monitoria", "budget": "1200000", "amount": "1200000"},
    {"day": 2, "type": "expense", "category": "Arriendo", "concept": "Pago del mes", "budget": "650000", "amount": "650000"},
    {"day": 5, "type": "expense", "category": "Mercado", "budget": "300000", "amount": "276500"},
    {"day": 9, "type": "expense", "category": "Transporte", "budget": "120000", "amount": "98000"},
    {"day": 15, "type": "income", "category": "Bonos", "concept": "Bono de desempeño", "budget": "0", "amount": "150000"},
    {"day": 20, "type": "expense", "category": "Servicios", "concept": "Luz y agua", "budget": "180000", "amount": "191300"},
]


def seed_transactions(year: int, month: int):
    create_db_and_tables()
    with Session(engine) as session:
        if list_transactions(session, limit=1).total:
            print("ℹ️ Ya hay transacciones, no se agregan datos de ejemplo.")
            return
        for item in BASE_TRANSACTIONS:
            fields = {k: v for k, v in item.items() if k != "day"}
            fields["date"] = dt.date(year, month, item["day"])
            tx = create_transaction(session, fields)
            print(f"✅ Creada transacción {tx.id}: {tx.type.value} {tx.category} {tx.amount}")
    print("🎉 Datos de ejemplo cargados.")


if __name__ == "__main__":
    today = dt.date.today()
    seed_transactions(today.year, today.month)
