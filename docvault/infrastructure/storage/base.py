from abc import ABC, abstractmethod
from dataclasses import dataclass


class StorageError(Exception):
    """Ошибка внешнего объектного хранилища"""

    def __init__(self, message: str, detail: str = ""):
        super().__init__(message)
        self.detail = detail


@dataclass(frozen=True)
class StoredObject:
    """Результат успешной загрузки объекта"""
    key: str
    url: str
    size: int
    resource_type: str


class StorageBackend(ABC):
    """Интерфейс объектного хранилища"""

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str, resource_type: str = "auto") -> StoredObject:
        """Сохранение байтов под ключом, возвращает публичный URL"""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Удаление объекта"""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Проверка наличия объекта"""
