from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from ..database import get_db
from .. import models, schemas, services

router = APIRouter(prefix="/users/{user_id}/transactions", tags=["Transactions"])


@router.get("/", response_model=List[schemas.TransactionOut])
async def read_transactions(
    user_id: str,
    txn_type: Optional[schemas.TransactionType] = Query(None, alias="type"),
    db: AsyncSession = Depends(get_db)
):
    """Newest first. Omit ``type`` to list both income and expenses."""
    filters = {"type": txn_type.value} if txn_type else None
    return await services.select_all_by_owner(
        db, models.Transaction, user_id, order_by="date", filters=filters
    )


@router.post("/", response_model=schemas.TransactionOut)
async def create_transaction(
    user_id: str,
    data: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db)
):
    return await services.insert(db, models.Transaction, user_id, data.model_dump())


@router.put("/{txn_id}", response_model=schemas.TransactionOut)
async def update_transaction(
    user_id: str,
    txn_id: str,
    data: schemas.TransactionUpdate,
    db: AsyncSession = Depends(get_db)
):
    updated = await services.update_by_id(
        db, models.Transaction, user_id, txn_id, data.model_dump(exclude_unset=True)
    )
    if not updated:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return updated


@router.delete("/{txn_id}")
async def delete_transaction(user_id: str, txn_id: str, db: AsyncSession = Depends(get_db)):
    if not await services.delete_by_id(db, models.Transaction, user_id, txn_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    return {"message": "Transaction deleted successfully"}
