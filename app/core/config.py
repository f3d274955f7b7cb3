import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./finanzas.db")
DB_ECHO = _env_bool("DB_ECHO")  # True imprime las queries

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))

# Si está activo, solo se aceptan las categorías de app/constants/categories.py
ENFORCE_CATEGORY_VOCABULARY = _env_bool("ENFORCE_CATEGORY_VOCABULARY")
