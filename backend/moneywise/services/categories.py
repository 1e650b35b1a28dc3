import random
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .. import models

COLOR_PALETTE = [
    "#ef4444", "#f97316", "#f59e0b", "#84cc16", "#10b981", "#06b6d4",
    "#3b82f6", "#6366f1", "#8b5cf6", "#d946ef", "#f43f5e", "#64748b",
    "#a1a1aa", "#b45309", "#15803d", "#1d4ed8", "#7e22ce", "#be123c"
]

async def get_next_available_color(db: AsyncSession, user_id: str) -> str:
    """
    Returns the first palette colour the user's categories don't use yet.
    Once the palette is exhausted colours repeat at random.
    """
    result = await db.execute(
        select(models.Category.color).where(models.Category.user_id == user_id)
    )
    used_colors = set(result.scalars().all())

    for color in COLOR_PALETTE:
        if color not in used_colors:
            return color

    return random.choice(COLOR_PALETTE)

async def get_category_by_name(db: AsyncSession, user_id: str, name: str):
    result = await db.execute(
        select(models.Category).where(
            models.Category.user_id == user_id,
            models.Category.name == name
        )
    )
    return result.scalar_one_or_none()
