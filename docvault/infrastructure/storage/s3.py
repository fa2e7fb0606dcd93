import logging
from typing import Optional

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from docvault.infrastructure.storage.base import StorageBackend, StorageError, StoredObject

logger = logging.getLogger(__name__)


class S3Backend(StorageBackend):
    """S3-совместимое хранилище (AWS S3, MinIO)"""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        public_base_url: Optional[str] = None
    ):
        if not bucket:
            raise ValueError("S3 bucket is not configured")
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self.public_base_url = public_base_url
        self._session = aioboto3.Session(
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region
        )

    def _client(self):
        return self._session.client("s3", endpoint_url=self.endpoint_url)

    def public_url(self, key: str) -> str:
        """Публичный URL объекта"""
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    async def put(self, key: str, data: bytes, content_type: str, resource_type: str = "auto") -> StoredObject:
        try:
            async with self._client() as s3:
                await s3.put_object(
                    Bucket=self.bucket,
                    Key=key,
                    Body=data,
                    ContentType=content_type,
                    Metadata={"resource-type": resource_type}
                )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 upload failed for {key}: {e}")
            raise StorageError("Storage upload failed", detail=str(e)) from e

        logger.info(f"Stored {key} ({len(data)} bytes) in bucket {self.bucket}")
        return StoredObject(key=key, url=self.public_url(key), size=len(data), resource_type=resource_type)

    async def delete(self, key: str) -> bool:
        try:
            async with self._client() as s3:
                await s3.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError("Storage delete failed", detail=str(e)) from e
        return True

    async def exists(self, key: str) -> bool:
        try:
            async with self._client() as s3:
                await s3.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError("Storage lookup failed", detail=str(e)) from e
        except BotoCoreError as e:
            raise StorageError("Storage lookup failed", detail=str(e)) from e
        return True
