import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.config import settings
from docvault.db.repositories.document_repository import DocumentRepository
from docvault.domains.activity.entities import ActivityAction
from docvault.domains.activity.services import ActivityService
from docvault.domains.documents.entities import CONTROL_CHARS, Document, DocumentAccess
from docvault.domains.documents.file_types import classify
from docvault.domains.identity.entities import User
from docvault.infrastructure.storage.base import StorageBackend, StorageError

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 255
MAX_ACCESS_LEVEL_LENGTH = 50


class DocumentService:
    """Сервис загрузки и управления документами"""

    def __init__(self, session: AsyncSession, storage: Optional[StorageBackend] = None):
        self.session = session
        self.storage = storage
        self.document_repository = DocumentRepository(session)
        self.activity_service = ActivityService(session)

    async def upload_document(
        self,
        requester: User,
        file_bytes: Optional[bytes],
        filename: Optional[str],
        title: str = "",
        description: str = "",
        access_level: str = "private"
    ) -> Document:
        """Загрузка файла: классификация, хранилище, запись метаданных, журнал.

        Запись документа создается только после успешной загрузки в хранилище.
        Ошибка хранилища пробрасывается как StorageError без побочных эффектов в БД.
        """
        if not file_bytes:
            raise ValueError("No file uploaded")
        if len(file_bytes) > settings.max_upload_bytes:
            raise ValueError(f"File exceeds the {settings.max_upload_bytes} byte upload limit")

        file_info = classify(filename)

        title = (title or "").strip()
        if not title:
            name = filename or "untitled"
            title = name[: -(len(file_info.extension) + 1)] if file_info.extension else name
        if len(title) > MAX_TITLE_LENGTH:
            raise ValueError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
        if CONTROL_CHARS.search(title):
            raise ValueError("Title must not contain control characters")

        access_level = (access_level or "private").strip() or "private"
        if len(access_level) > MAX_ACCESS_LEVEL_LENGTH:
            raise ValueError(f"Access level must be at most {MAX_ACCESS_LEVEL_LENGTH} characters")

        document_uuid = uuid.uuid4()
        key = f"{file_info.resource_type}/{requester.uuid}/{document_uuid}"
        if file_info.extension:
            key = f"{key}.{file_info.extension}"

        stored = await self.storage.put(
            key=key,
            data=file_bytes,
            content_type=file_info.mime_type,
            resource_type=file_info.resource_type
        )

        document = Document(
            uuid=document_uuid,
            title=title,
            description=(description or "").strip(),
            file_type=file_info.extension,
            file_url=stored.url,
            storage_key=stored.key,
            resource_type=stored.resource_type,
            file_size=len(file_bytes),
            uploader_id=requester.uuid,
            access_level=access_level
        )

        try:
            created = await self.document_repository.create(document)
        except (SQLAlchemyError, ValueError):
            await self._discard_orphan(stored.key)
            raise

        logger.info(
            f"Document uploaded: {created.uuid} ({created.file_type or 'no extension'}, "
            f"{created.file_size} bytes) by {requester.username}"
        )
        await self.activity_service.record(requester.uuid, created.uuid, ActivityAction.UPLOAD)
        return created

    async def _discard_orphan(self, key: str) -> None:
        """Попытка удалить объект, для которого не удалось создать запись"""
        try:
            await self.storage.delete(key)
        except StorageError as e:
            logger.warning(f"Orphaned storage object left behind: {key} ({e.detail})")

    async def list_documents(self, requester: User) -> List[Document]:
        """Свои документы; администратор видит все"""
        owner_id = None if requester.is_admin else requester.uuid
        return await self.document_repository.list(owner_id=owner_id)

    async def get_document(self, document_uuid: uuid.UUID, requester: User) -> Optional[Document]:
        """Получение документа с проверкой доступа и записью просмотра"""
        document = await self._get_accessible(document_uuid, requester, "access")
        if document:
            await self.activity_service.record(requester.uuid, document.uuid, ActivityAction.VIEW)
        return document

    async def prepare_download(self, document_uuid: uuid.UUID, requester: User) -> Optional[Document]:
        """Документ для скачивания; сами байты отдает хранилище по редиректу"""
        document = await self._get_accessible(document_uuid, requester, "download")
        if document:
            await self.activity_service.record(requester.uuid, document.uuid, ActivityAction.DOWNLOAD)
        return document

    async def delete_document(self, document_uuid: uuid.UUID, requester: User) -> bool:
        """Удаление записи документа владельцем или администратором"""
        document = await self._get_accessible(document_uuid, requester, "delete")
        if not document:
            return False

        deleted = await self.document_repository.delete(document_uuid)
        if deleted:
            logger.info(f"Document deleted: {document_uuid} by {requester.username}")
            await self.activity_service.record(requester.uuid, document_uuid, ActivityAction.DELETE)
        return deleted

    async def _get_accessible(self, document_uuid: uuid.UUID, requester: User, action: str) -> Optional[Document]:
        document = await self.document_repository.get_by_uuid(document_uuid)
        if not document:
            return None

        access = DocumentAccess(document.uuid, document.uploader_id)
        if not access.can_access(requester.uuid, requester.role):
            logger.info(f"Denied {action} of {document_uuid} for {requester.username}")
            raise PermissionError(f"Not authorized to {action} this document")
        return document
