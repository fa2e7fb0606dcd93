from pydantic import BaseModel, Field, field_validator, ConfigDict
import uuid
from datetime import datetime

from docvault.domains.notes.entities import MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH


class NoteBase(BaseModel):
    """Базовая схема заметки"""
    title: str = Field(..., max_length=MAX_TITLE_LENGTH)
    description: str = Field(..., max_length=MAX_DESCRIPTION_LENGTH)

    @field_validator('title', 'description')
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v.strip():
            raise ValueError(f'{info.field_name.capitalize()} cannot be empty')
        return v.strip()


class NoteCreate(NoteBase):
    """Схема для создания заметки"""
    pass


class NoteUpdate(NoteBase):
    """Схема для обновления заметки: оба поля обязательны"""
    pass


class NoteResponse(BaseModel):
    uuid: uuid.UUID
    title: str
    description: str
    user_id: uuid.UUID
    username: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteDeleteResponse(BaseModel):
    message: str
    deleted_id: uuid.UUID


class NoteCountResponse(BaseModel):
    count: int
