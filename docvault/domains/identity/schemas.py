from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime
import uuid

from docvault.domains.identity.entities import UserRole


class UserBase(BaseModel):
    """Базовая схема пользователя"""
    username: str = Field(..., min_length=3, max_length=50)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        if not v.replace('_', '').replace('-', '').replace('.', '').isalnum():
            raise ValueError('Username must contain only letters, digits, dots, underscores and hyphens')
        return v


class UserCreate(UserBase):
    """Схема для регистрации пользователя"""
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.USER


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    username: str
    password: str


class UserResponse(UserBase):
    """Схема для ответа с данными пользователя"""
    uuid: uuid.UUID
    role: UserRole
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    """Схема для JWT токена"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
