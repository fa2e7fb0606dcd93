from datetime import datetime

from sqlalchemy import Column, String, DateTime, UUID

from docvault.db.base import BaseModel


class RecentActivity(BaseModel):
    __tablename__ = "recent_activity"

    # Без внешних ключей: журнал переживает удаление документа
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    document_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    action = Column(String(20), nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
