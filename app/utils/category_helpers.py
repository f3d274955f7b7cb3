from typing import Optional

from app.constants.categories import CATEGORIES_BY_TYPE
from app.core.errors import ValidationError
from app.models.enums import TransactionType


def normalize_category(value: Optional[str]) -> str:
    """Las categorías se guardan sin espacios sobrantes y en mayúsculas."""
    if value is None or not str(value).strip():
        raise ValidationError("category", "El campo 'category' es obligatorio.")
    return " ".join(str(value).split()).upper()


def ensure_known_category(category: str, type_: TransactionType) -> None:
    """Solo se llama cuando ENFORCE_CATEGORY_VOCABULARY está activo."""
    allowed = CATEGORIES_BY_TYPE[type_]
    if category not in allowed:
        raise ValidationError(
            "category",
            f"Categoría inválida para {type_.value}: {category}. "
            f"Opciones: {', '.join(allowed)}",
        )
