import uuid
from datetime import datetime

from sqlalchemy import Column, String, Float, Date, DateTime
from .database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class OwnedRecord:
    """Columns shared by every per-user table."""
    id = Column(String, primary_key=True, default=_new_id)
    user_id = Column(String, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Transaction(OwnedRecord, Base):
    __tablename__ = "transactions"

    amount = Column(Float, nullable=False)
    description = Column(String, default="")
    category = Column(String, index=True)
    type = Column(String, nullable=False)  # income, expense
    date = Column(DateTime, index=True, nullable=False)


class Category(OwnedRecord, Base):
    __tablename__ = "categories"

    name = Column(String, index=True, nullable=False)
    color = Column(String, default="#94a3b8")
    icon = Column(String, default="tag")
    type = Column(String, default="expense")  # income, expense


class Budget(OwnedRecord, Base):
    __tablename__ = "budgets"

    category = Column(String, index=True, nullable=False)
    amount = Column(Float, nullable=False)
    period = Column(String, default="monthly")  # weekly, monthly, yearly


class Goal(OwnedRecord, Base):
    __tablename__ = "goals"

    title = Column(String, nullable=False)
    target_amount = Column(Float, nullable=False)
    current_amount = Column(Float, default=0.0)
    target_date = Column(Date, nullable=False)
