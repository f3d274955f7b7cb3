from app.models.enums import TransactionType

# Categorías que ofrece el formulario de registro
INCOME_CATEGORIES = (
    "MONITORIA",
    "RAUFOLL",
    "TRABAJOS EXTRA",
    "BONOS",
    "OTROS INGRESOS",
)

EXPENSE_CATEGORIES = (
    "SERVICIOS",
    "ARRIENDO",
    "TRANSPORTE",
    "MERCADO",
    "DEUDA",
    "AHORRO",
    "COSITAS",
    "SALUD",
    "EDUCACION",
)

CATEGORIES_BY_TYPE = {
    TransactionType.income: INCOME_CATEGORIES,
    TransactionType.expense: EXPENSE_CATEGORIES,
}
