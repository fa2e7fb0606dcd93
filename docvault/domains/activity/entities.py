import uuid
from datetime import datetime
from enum import Enum
from typing import Optional


class ActivityAction(str, Enum):
    UPLOAD = "upload"
    DELETE = "delete"
    DOWNLOAD = "download"
    VIEW = "view"


class RecentActivity:
    """Запись журнала действий пользователя над документом"""

    def __init__(
        self,
        uuid: uuid.UUID,
        user_id: uuid.UUID,
        document_id: uuid.UUID,
        action: ActivityAction,
        timestamp: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.user_id = user_id
        self.document_id = document_id
        self.action = ActivityAction(action)
        self.timestamp = timestamp or datetime.utcnow()

    @classmethod
    def create(cls, user_id: uuid.UUID, document_id: uuid.UUID, action: ActivityAction) -> "RecentActivity":
        return cls(uuid=uuid.uuid4(), user_id=user_id, document_id=document_id, action=action)

    def __repr__(self) -> str:
        return f"RecentActivity(user_id={self.user_id}, document_id={self.document_id}, action={self.action.value})"
