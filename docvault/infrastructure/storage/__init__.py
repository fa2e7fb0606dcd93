from functools import lru_cache

from docvault.core.config import settings
from docvault.infrastructure.storage.base import StorageBackend, StorageError, StoredObject
from docvault.infrastructure.storage.memory import MemoryBackend


@lru_cache
def get_storage() -> StorageBackend:
    """Зависимость FastAPI: настроенное хранилище"""
    if settings.storage_backend == "memory":
        return MemoryBackend()
    if settings.storage_backend == "s3":
        from docvault.infrastructure.storage.s3 import S3Backend

        return S3Backend(
            bucket=settings.s3_bucket,
            region=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
            access_key=settings.s3_access_key_id,
            secret_key=settings.s3_secret_access_key,
            public_base_url=settings.s3_public_base_url
        )
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "StorageBackend",
    "StorageError",
    "StoredObject",
    "MemoryBackend",
    "get_storage"
]
