from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
import uuid

from docvault.db.models.user import User as UserModel

if TYPE_CHECKING:
    from docvault.domains.identity.entities import User


class UserRepository:
    """Репозиторий для работы с пользователями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: "User") -> "User":
        """Создание нового пользователя"""
        db_user = UserModel(
            uuid=user.uuid,
            username=user.username,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active
        )

        self.session.add(db_user)
        try:
            await self.session.commit()
            await self.session.refresh(db_user)
            return self._to_domain(db_user)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Username already taken")

    async def get_by_uuid(self, user_uuid: uuid.UUID) -> Optional["User"]:
        """Получение пользователя по UUID"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.uuid == user_uuid)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_by_username(self, username: str) -> Optional["User"]:
        """Получение пользователя по username"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_many(self, user_uuids: List[uuid.UUID]) -> List["User"]:
        """Получение пользователей по списку UUID"""
        if not user_uuids:
            return []
        result = await self.session.execute(
            select(UserModel).where(UserModel.uuid.in_(user_uuids))
        )
        return [self._to_domain(user) for user in result.scalars().all()]

    async def count(self) -> int:
        """Подсчет количества пользователей"""
        result = await self.session.execute(select(func.count(UserModel.uuid)))
        return result.scalar()

    async def username_exists(self, username: str) -> bool:
        """Проверка существования username"""
        result = await self.session.execute(
            select(UserModel.uuid).where(UserModel.username == username)
        )
        return result.scalar_one_or_none() is not None

    def _to_domain(self, db_user: UserModel) -> "User":
        """Преобразование модели БД в доменную сущность"""
        from docvault.domains.identity.entities import User

        return User(
            uuid=db_user.uuid,
            username=db_user.username,
            password_hash=db_user.password_hash,
            role=db_user.role,
            is_active=db_user.is_active,
            created_at=db_user.created_at,
            updated_at=db_user.updated_at
        )
