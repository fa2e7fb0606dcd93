from pydantic import BaseModel
from typing import List
import uuid

from docvault.domains.activity.schemas import RecentActivityResponse


class FileTypeStat(BaseModel):
    file_type: str
    count: int
    total_size: int


class DailyUploads(BaseModel):
    date: str
    count: int


class UserStatsResponse(BaseModel):
    """Статистика текущего пользователя"""
    total_documents: int
    total_storage: int
    storage_quota: int
    file_types: List[FileTypeStat]
    upload_timeline: List[DailyUploads]
    recent_activity: List[RecentActivityResponse]


class TotalStats(BaseModel):
    documents: int
    users: int
    storage: int


class UserStorage(BaseModel):
    user_id: uuid.UUID
    username: str
    document_count: int
    total_size: int


class ActiveUser(BaseModel):
    user_id: uuid.UUID
    username: str
    activity_count: int


class TopDocument(BaseModel):
    document_id: uuid.UUID
    title: str
    file_type: str
    download_count: int


class DashboardResponse(BaseModel):
    """Сводка по всей системе для администратора"""
    total_stats: TotalStats
    storage_per_user: List[UserStorage]
    daily_uploads: List[DailyUploads]
    active_users: List[ActiveUser]
    top_documents: List[TopDocument]
