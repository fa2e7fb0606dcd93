from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.auth import get_current_user
from docvault.core.db import get_db
from docvault.domains.analytics.schemas import UserStatsResponse, DashboardResponse
from docvault.domains.analytics.services import AnalyticsService
from docvault.domains.identity.entities import User

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/user-stats", response_model=UserStatsResponse)
async def get_user_stats(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Статистика документов текущего пользователя"""
    return await AnalyticsService(db).get_user_stats(current_user)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Сводка по системе (только администратор)"""
    try:
        return await AnalyticsService(db).get_dashboard(current_user)
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
