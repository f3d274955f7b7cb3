import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import transactions
from app.core.config import CORS_ORIGINS
from app.core.errors import FinanzasError, ValidationError
from app.core.logging import configure_logging
from app.database import create_db_and_tables

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("Servidor de finanzas personales listo")
    yield

app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FinanzasError)
async def finanzas_error_handler(request: Request, exc: FinanzasError):
    content = {"detail": exc.detail}
    if isinstance(exc, ValidationError):
        content["field"] = exc.field
    if exc.status_code >= 500:
        logger.error("%s %s -> %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=content)


app.include_router(transactions.router)

@app.get("/")
def root():
    return {"message": "Servidor de finanzas personales"}
