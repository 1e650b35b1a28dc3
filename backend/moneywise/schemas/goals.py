from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date, datetime


class GoalBase(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    title: str
    target_amount: float
    current_amount: float = 0.0
    target_date: date


class GoalCreate(GoalBase):
    pass


class GoalUpdate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    title: Optional[str] = None
    target_amount: Optional[float] = None
    current_amount: Optional[float] = None
    target_date: Optional[date] = None


class GoalProgressUpdate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    current_amount: float


class GoalOut(GoalBase):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class GoalWithProgress(GoalOut):
    progress_percent: float = 0.0
    remaining: float = 0.0
    days_left: int = 0
    is_overdue: bool = False
    is_completed: bool = False
