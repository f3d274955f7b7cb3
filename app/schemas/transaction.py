import datetime as dt
from decimal import Decimal
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from app.models.enums import TransactionType

# Decimal en Python, número en el JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# El servicio se encarga de validar tipos y rangos, aquí solo llega la entrada cruda
RawNumber = Optional[Union[Decimal, str]]


class TransactionCreate(BaseModel):
    date: Optional[Union[dt.date, str]] = None
    type: Optional[Union[str, int]] = None
    category: Optional[str] = None
    concept: Optional[str] = None
    budget: RawNumber = None
    amount: RawNumber = None


class TransactionUpdate(TransactionCreate):
    """Actualización parcial: solo se aplican los campos enviados."""


class TransactionRead(BaseModel):
    id: int
    date: dt.date
    type: TransactionType
    category: str
    concept: Optional[str] = None
    budget: Money
    amount: Money
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionFilters(BaseModel):
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    search: Optional[str] = None

    @field_validator("category", "search", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class TransactionListResponse(BaseModel):
    transactions: List[TransactionRead]
    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class TransactionDeleted(BaseModel):
    message: str
    transaction: TransactionRead


class CategoryVocabulary(BaseModel):
    income: List[str]
    expense: List[str]
