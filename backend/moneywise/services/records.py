"""Generic owner-scoped record store over the SQLAlchemy models."""

from typing import Any, Dict, List, Optional, Type

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base


async def select_all_by_owner(
    db: AsyncSession,
    model: Type[Base],
    user_id: str,
    order_by: Optional[str] = None,
    descending: bool = True,
    filters: Optional[Dict[str, Any]] = None,
) -> List[Any]:
    """All records owned by ``user_id``, optionally filtered by column equality
    and ordered by a column name."""
    stmt = select(model).where(model.user_id == user_id)
    for column_name, value in (filters or {}).items():
        stmt = stmt.where(getattr(model, column_name) == value)
    if order_by:
        column = getattr(model, order_by)
        stmt = stmt.order_by(column.desc() if descending else column.asc())
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_by_id(db: AsyncSession, model: Type[Base], user_id: str, record_id: str) -> Optional[Any]:
    stmt = select(model).where(model.id == record_id, model.user_id == user_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def insert(db: AsyncSession, model: Type[Base], user_id: str, data: Dict[str, Any]) -> Any:
    record = model(user_id=user_id, **data)
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def update_by_id(
    db: AsyncSession,
    model: Type[Base],
    user_id: str,
    record_id: str,
    updates: Dict[str, Any],
) -> Optional[Any]:
    """Applies non-None updates. Returns None when the record doesn't exist."""
    record = await get_by_id(db, model, user_id, record_id)
    if not record:
        return None

    for field, value in updates.items():
        if value is not None:
            setattr(record, field, value)

    await db.commit()
    await db.refresh(record)
    return record


async def delete_by_id(db: AsyncSession, model: Type[Base], user_id: str, record_id: str) -> bool:
    record = await get_by_id(db, model, user_id, record_id)
    if not record:
        return False

    await db.delete(record)
    await db.commit()
    return True


async def delete_all_by_owner(db: AsyncSession, model: Type[Base], user_id: str) -> int:
    """Bulk delete of every record owned by ``user_id``. Returns the row count."""
    result = await db.execute(delete(model).where(model.user_id == user_id))
    await db.commit()
    return result.rowcount
