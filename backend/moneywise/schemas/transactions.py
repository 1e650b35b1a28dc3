from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from .insights import TransactionType


def _non_negative(v: Optional[float]) -> Optional[float]:
    if v is not None and v < 0:
        raise ValueError('amount must be >= 0')
    return v


def _wall_clock(v: Optional[datetime]) -> Optional[datetime]:
    # Keep the local wall time and drop the offset; the stored column is naive
    if v is not None and v.tzinfo is not None:
        return v.replace(tzinfo=None)
    return v


class TransactionBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True, allow_inf_nan=False)

    amount: float
    description: str = ""
    category: str
    type: TransactionType
    date: datetime

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v: float) -> float:
        return _non_negative(v)

    @field_validator('date')
    @classmethod
    def strip_offset(cls, v: datetime) -> datetime:
        return _wall_clock(v)


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True, allow_inf_nan=False)

    amount: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[TransactionType] = None
    date: Optional[datetime] = None

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v: Optional[float]) -> Optional[float]:
        return _non_negative(v)

    @field_validator('date')
    @classmethod
    def strip_offset(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _wall_clock(v)


class TransactionOut(TransactionBase):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
