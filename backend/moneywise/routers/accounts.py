from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from .. import services, schemas

router = APIRouter(prefix="/users/{user_id}", tags=["Account"])


@router.get("/export", response_model=schemas.UserExport)
async def export_data(user_id: str, db: AsyncSession = Depends(get_db)):
    """All of the user's transactions, budgets and goals plus an ``exportDate``."""
    return await services.export_user_data(db, user_id)


@router.delete("", response_model=schemas.AccountDeletion)
async def delete_account(user_id: str, db: AsyncSession = Depends(get_db)):
    """Permanently removes the user's transactions, budgets and goals."""
    deleted = await services.delete_user_data(db, user_id)
    return schemas.AccountDeletion(message="Account data deleted successfully", deleted=deleted)
