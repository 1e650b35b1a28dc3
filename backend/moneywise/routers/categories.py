from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ..database import get_db
from .. import models, schemas, services

router = APIRouter(prefix="/users/{user_id}/categories", tags=["Categories"])

@router.get("/", response_model=List[schemas.CategoryOut])
async def get_categories(user_id: str, db: AsyncSession = Depends(get_db)):
    return await services.select_all_by_owner(db, models.Category, user_id, order_by="name", descending=False)

@router.post("/", response_model=schemas.CategoryOut)
async def create_category(user_id: str, req: schemas.CategoryCreate, db: AsyncSession = Depends(get_db)):
    # 1. Check for duplicates
    if await services.get_category_by_name(db, user_id, req.name):
        raise HTTPException(status_code=400, detail="Category already exists")

    # 2. Pick a colour unless one was given
    color = req.color or await services.get_next_available_color(db, user_id)

    # 3. Create
    return await services.insert(db, models.Category, user_id, req.model_dump() | {"color": color})

@router.delete("/{category_id}")
async def delete_category(user_id: str, category_id: str, db: AsyncSession = Depends(get_db)):
    if not await services.delete_by_id(db, models.Category, user_id, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted successfully"}
