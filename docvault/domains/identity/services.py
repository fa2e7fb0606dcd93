import logging
import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.config import settings
from docvault.core.security import create_access_token, verify_token
from docvault.db.repositories.user_repository import UserRepository
from docvault.domains.identity.entities import User, UserRole
from docvault.domains.identity.schemas import UserCreate, UserLogin

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис регистрации и аутентификации пользователей"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def register_user(self, user_data: UserCreate) -> User:
        """Регистрация нового пользователя"""
        if user_data.role == UserRole.ADMIN and not settings.allow_admin_registration:
            raise PermissionError("Administrator accounts cannot be self-registered")

        if await self.user_repository.username_exists(user_data.username):
            raise ValueError("Username already taken")

        user = User.create_user(
            username=user_data.username,
            password=user_data.password,
            role=user_data.role
        )
        created = await self.user_repository.create(user)
        logger.info(f"User registered: {created.username} ({created.role.value})")
        return created

    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя"""
        user = await self.user_repository.get_by_username(login_data.username)

        if not user or not user.is_active:
            return None

        if not user.authenticate(login_data.password):
            return None

        return user

    async def login_user(self, login_data: UserLogin) -> Optional[tuple]:
        """Вход пользователя: возвращает (токен, пользователь)"""
        user = await self.authenticate_user(login_data)

        if not user:
            logger.info(f"Failed login attempt for {login_data.username}")
            return None

        token = create_access_token(data={
            "sub": str(user.uuid),
            "username": user.username,
            "role": user.role.value
        })
        return token, user

    async def get_current_user_from_token(self, token: str) -> Optional[User]:
        """Получение текущего пользователя из JWT токена"""
        payload = verify_token(token)
        if not payload or not payload.get("sub"):
            return None

        try:
            user_uuid = uuid.UUID(payload["sub"])
        except ValueError:
            return None

        user = await self.user_repository.get_by_uuid(user_uuid)

        if user is None or not user.is_active:
            return None

        return user
