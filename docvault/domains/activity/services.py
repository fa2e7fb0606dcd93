import logging
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docvault.db.repositories.activity_repository import ActivityRepository
from docvault.domains.activity.entities import ActivityAction, RecentActivity
from docvault.domains.activity.schemas import ActivityDocument, RecentActivityResponse

logger = logging.getLogger(__name__)


class ActivityService:
    """Журнал действий пользователей над документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.activity_repository = ActivityRepository(session)

    async def record(
        self,
        user_id: uuid.UUID,
        document_id: uuid.UUID,
        action: ActivityAction
    ) -> Optional[RecentActivity]:
        """Запись действия. Ошибки журнала не прерывают основную операцию:
        они логируются и отбрасываются, метод возвращает None."""
        try:
            return await self.activity_repository.create(
                RecentActivity.create(user_id=user_id, document_id=document_id, action=action)
            )
        except Exception as e:
            logger.warning(f"Activity log failed ({action.value} {document_id} by {user_id}): {e}")
            try:
                await self.session.rollback()
            except Exception as rollback_error:
                logger.warning(f"Rollback after activity log failure failed: {rollback_error}")
            return None

    async def get_recent(self, user_id: uuid.UUID, limit: int = 20) -> List[RecentActivityResponse]:
        """Последние действия пользователя"""
        rows = await self.activity_repository.list_by_user(user_id, limit)
        return [
            RecentActivityResponse(
                uuid=activity.uuid,
                user_id=activity.user_id,
                document_id=activity.document_id,
                action=activity.action,
                timestamp=activity.timestamp,
                document=ActivityDocument(title=title, file_type=file_type or "") if title is not None else None
            )
            for activity, title, file_type in rows
        ]
