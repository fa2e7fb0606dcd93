from pydantic import BaseModel
from typing import Optional
import uuid
from datetime import datetime

from docvault.domains.activity.entities import ActivityAction


class ActivityDocument(BaseModel):
    title: str
    file_type: str


class RecentActivityResponse(BaseModel):
    """Запись журнала с краткими данными документа"""
    uuid: uuid.UUID
    user_id: uuid.UUID
    document_id: uuid.UUID
    action: ActivityAction
    timestamp: datetime
    # None, если документ уже удален
    document: Optional[ActivityDocument] = None
