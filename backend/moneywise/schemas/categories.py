from pydantic import BaseModel, ConfigDict
from typing import Optional

from .insights import TransactionType


class CategoryBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str
    color: str = "#94a3b8"
    icon: str = "tag"
    type: TransactionType = TransactionType.EXPENSE.value


class CategoryOut(CategoryBase):
    id: str
    user_id: str
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class CategoryCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str
    icon: str = "tag"
    type: TransactionType = TransactionType.EXPENSE.value
    color: Optional[str] = None
