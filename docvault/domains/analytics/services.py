from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.config import settings
from docvault.db.repositories.activity_repository import ActivityRepository
from docvault.db.repositories.document_repository import DocumentRepository
from docvault.db.repositories.user_repository import UserRepository
from docvault.domains.activity.entities import ActivityAction
from docvault.domains.activity.services import ActivityService
from docvault.domains.analytics.schemas import (
    ActiveUser, DailyUploads, DashboardResponse, FileTypeStat, TopDocument,
    TotalStats, UserStatsResponse, UserStorage
)
from docvault.domains.identity.entities import User

TIMELINE_DAYS = 30
RECENT_ACTIVITY_LIMIT = 10
TOP_LIMIT = 10


def bucket_by_day(dates: List[datetime]) -> List[DailyUploads]:
    """Количество загрузок по дням, по возрастанию даты"""
    counts = Counter(d.date().isoformat() for d in dates)
    return [DailyUploads(date=day, count=counts[day]) for day in sorted(counts)]


class AnalyticsService:
    """Агрегации только для чтения"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.activity_repository = ActivityRepository(session)
        self.user_repository = UserRepository(session)
        self.activity_service = ActivityService(session)

    @staticmethod
    def _window_start(now: Optional[datetime] = None) -> datetime:
        return (now or datetime.utcnow()) - timedelta(days=TIMELINE_DAYS)

    async def get_user_stats(self, requester: User, now: Optional[datetime] = None) -> UserStatsResponse:
        total_documents, total_storage = await self.document_repository.totals(owner_id=requester.uuid)
        distribution = await self.document_repository.file_type_distribution(requester.uuid)
        upload_dates = await self.document_repository.upload_dates_since(
            self._window_start(now), owner_id=requester.uuid
        )
        recent = await self.activity_service.get_recent(requester.uuid, RECENT_ACTIVITY_LIMIT)

        return UserStatsResponse(
            total_documents=total_documents,
            total_storage=total_storage,
            storage_quota=settings.storage_quota_bytes,
            file_types=[
                FileTypeStat(file_type=file_type, count=count, total_size=size)
                for file_type, count, size in distribution
            ],
            upload_timeline=bucket_by_day(upload_dates),
            recent_activity=recent
        )

    async def get_dashboard(self, requester: User, now: Optional[datetime] = None) -> DashboardResponse:
        if not requester.is_admin:
            raise PermissionError("Administrator role required")

        since = self._window_start(now)
        total_documents, total_storage = await self.document_repository.totals()
        storage_rows = await self.document_repository.storage_per_user()
        active_rows = await self.activity_repository.most_active_users(since, TOP_LIMIT)
        download_rows = await self.activity_repository.top_documents(ActivityAction.DOWNLOAD, TOP_LIMIT)

        user_ids = {row[0] for row in storage_rows} | {row[0] for row in active_rows}
        usernames = await self._usernames(user_ids)
        documents = {
            doc.uuid: doc
            for doc in await self.document_repository.get_many([row[0] for row in download_rows])
        }

        return DashboardResponse(
            total_stats=TotalStats(
                documents=total_documents,
                users=await self.user_repository.count(),
                storage=total_storage
            ),
            storage_per_user=[
                UserStorage(
                    user_id=user_id,
                    username=usernames.get(user_id, ""),
                    document_count=count,
                    total_size=size
                )
                for user_id, count, size in storage_rows
            ],
            daily_uploads=bucket_by_day(await self.document_repository.upload_dates_since(since)),
            active_users=[
                ActiveUser(user_id=user_id, username=usernames.get(user_id, ""), activity_count=count)
                for user_id, count in active_rows
            ],
            # Удаленные документы в рейтинг не попадают
            top_documents=[
                TopDocument(
                    document_id=document_id,
                    title=documents[document_id].title,
                    file_type=documents[document_id].file_type,
                    download_count=count
                )
                for document_id, count in download_rows
                if document_id in documents
            ]
        )

    async def _usernames(self, user_ids) -> dict:
        users = await self.user_repository.get_many(list(user_ids))
        return {user.uuid: user.username for user in users}
