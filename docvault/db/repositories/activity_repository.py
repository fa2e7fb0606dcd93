from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
import uuid

from docvault.db.models.activity import RecentActivity as ActivityModel
from docvault.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from docvault.domains.activity.entities import ActivityAction, RecentActivity


class ActivityRepository:
    """Репозиторий журнала действий (только добавление)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, activity: "RecentActivity") -> "RecentActivity":
        db_activity = ActivityModel(
            uuid=activity.uuid,
            user_id=activity.user_id,
            document_id=activity.document_id,
            action=activity.action.value,
            timestamp=activity.timestamp
        )
        self.session.add(db_activity)
        await self.session.commit()
        return activity

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20) -> List[tuple]:
        """Последние действия пользователя: (запись, заголовок, тип файла)"""
        result = await self.session.execute(
            select(ActivityModel, DocumentModel.title, DocumentModel.file_type)
            .outerjoin(DocumentModel, DocumentModel.uuid == ActivityModel.document_id)
            .where(ActivityModel.user_id == user_id)
            .order_by(ActivityModel.timestamp.desc())
            .limit(limit)
        )
        return [(self._to_domain(row), title, file_type) for row, title, file_type in result.all()]

    async def most_active_users(self, since: datetime, limit: int = 10) -> List[tuple]:
        """(user_id, количество действий) начиная с since"""
        count = func.count(ActivityModel.uuid).label("count")
        result = await self.session.execute(
            select(ActivityModel.user_id, count)
            .where(ActivityModel.timestamp >= since)
            .group_by(ActivityModel.user_id)
            .order_by(count.desc())
            .limit(limit)
        )
        return list(result.all())

    async def top_documents(self, action: "ActivityAction", limit: int = 10, since: Optional[datetime] = None) -> List[tuple]:
        """(document_id, количество) для заданного действия"""
        count = func.count(ActivityModel.uuid).label("count")
        query = select(ActivityModel.document_id, count).where(ActivityModel.action == action.value)
        if since is not None:
            query = query.where(ActivityModel.timestamp >= since)
        result = await self.session.execute(
            query.group_by(ActivityModel.document_id).order_by(count.desc()).limit(limit)
        )
        return list(result.all())

    def _to_domain(self, db_activity: ActivityModel) -> "RecentActivity":
        from docvault.domains.activity.entities import RecentActivity

        return RecentActivity(
            uuid=db_activity.uuid,
            user_id=db_activity.user_id,
            document_id=db_activity.document_id,
            action=db_activity.action,
            timestamp=db_activity.timestamp
        )
