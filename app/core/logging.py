import logging

from app.core.config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # El echo de SQLAlchemy ya se controla con DB_ECHO
    logging.getLogger("sqlalchemy.engine").propagate = False
