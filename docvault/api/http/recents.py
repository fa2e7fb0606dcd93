from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.auth import get_current_user
from docvault.core.db import get_db
from docvault.domains.activity.schemas import RecentActivityResponse
from docvault.domains.activity.services import ActivityService
from docvault.domains.identity.entities import User

router = APIRouter(prefix="/recents", tags=["recents"])


@router.get("", response_model=List[RecentActivityResponse])
async def get_recents(
    limit: int = Query(20, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Последние действия текущего пользователя"""
    return await ActivityService(db).get_recent(current_user.uuid, limit)
