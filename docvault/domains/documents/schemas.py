from pydantic import BaseModel, ConfigDict
from typing import List
import uuid
from datetime import datetime


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    uuid: uuid.UUID
    title: str
    description: str
    file_type: str
    file_url: str
    file_size: int
    resource_type: str
    access_level: str
    uploader_id: uuid.UUID
    upload_date: datetime

    model_config = ConfigDict(from_attributes=True)


class DocumentDeleteResponse(BaseModel):
    message: str
    deleted_id: uuid.UUID


class FileTypeResponse(BaseModel):
    extension: str
    category: str
    mime_type: str
    resource_type: str
    can_preview: bool
    icon: str


class FileTypeListResponse(BaseModel):
    supported_types: List[FileTypeResponse]
    max_upload_bytes: int
