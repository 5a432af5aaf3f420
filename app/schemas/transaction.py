# app/schemas/transaction.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date as Date, datetime
import uuid


def _coerce_date(value):
    # Accept full ISO timestamps and keep only the calendar date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value


class TransactionBase(BaseModel):
    date: Date = Field(..., description="Calendar date of the transaction, e.g. 2024-05-01")
    details: str = Field(..., min_length=1, description="E.g. Grocery at Costco")
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    # Checked against TransactionType by the service so the error message stays stable
    type: str = Field(..., description='Either "earn" or "expense"')

    normalize_date = field_validator("date", mode="before")(_coerce_date)


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(BaseModel):
    date: Optional[Date] = None
    details: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    type: str

    normalize_date = field_validator("date", mode="before")(_coerce_date)


class TransactionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    user_id: uuid.UUID = Field(..., serialization_alias="user")
    date: Date
    details: str
    amount: float
    type: str

    @field_validator("type", mode="before")
    @classmethod
    def enum_value(cls, value):
        return getattr(value, "value", value)


class TransactionCreated(BaseModel):
    message: str
    id: uuid.UUID


class TransactionUpdated(BaseModel):
    message: str
    expense: TransactionRead
