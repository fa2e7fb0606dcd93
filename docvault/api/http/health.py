import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(db: AsyncSession = Depends(get_db)):
    """Состояние сервиса и базы данных"""
    try:
        await db.execute(text("SELECT 1"))
        database = "up"
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Health check: database unreachable: {e}")
        database = "down"

    return {
        "status": "OK" if database == "up" else "degraded",
        "database": database,
        "timestamp": datetime.utcnow().isoformat()
    }
