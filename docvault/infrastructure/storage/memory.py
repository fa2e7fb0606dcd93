from datetime import datetime
from typing import Dict

from docvault.infrastructure.storage.base import StorageBackend, StoredObject


class MemoryBackend(StorageBackend):
    """Хранилище в памяти процесса: для разработки и тестов"""

    def __init__(self, base_url: str = "memory://"):
        self.base_url = base_url
        self._objects: Dict[str, dict] = {}

    async def put(self, key: str, data: bytes, content_type: str, resource_type: str = "auto") -> StoredObject:
        self._objects[key] = {
            "data": bytes(data),
            "content_type": content_type,
            "resource_type": resource_type,
            "created_at": datetime.utcnow(),
        }
        return StoredObject(key=key, url=f"{self.base_url}{key}", size=len(data), resource_type=resource_type)

    async def delete(self, key: str) -> bool:
        return self._objects.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        return key in self._objects

    def get(self, key: str) -> bytes:
        return self._objects[key]["data"]

    def __len__(self) -> int:
        return len(self._objects)
