import re
import uuid
from datetime import datetime
from typing import Optional
from urllib.parse import quote

from docvault.domains.documents.file_types import get_mime_type
from docvault.domains.identity.entities import UserRole

CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def can_access(requester_id: uuid.UUID, requester_role: UserRole, owner_id: uuid.UUID) -> bool:
    """Администратор или владелец"""
    return requester_role == UserRole.ADMIN or requester_id == owner_id


class Document:
    """Сущность загруженного документа"""

    def __init__(
        self,
        uuid: uuid.UUID,
        title: str,
        file_type: str,
        file_url: str,
        storage_key: str,
        file_size: int,
        uploader_id: uuid.UUID,
        description: str = "",
        resource_type: str = "auto",
        access_level: str = "private",
        upload_date: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.title = title
        self.description = description
        self.file_type = file_type
        self.file_url = file_url
        self.storage_key = storage_key
        self.resource_type = resource_type
        self.file_size = file_size
        self.uploader_id = uploader_id
        self.access_level = access_level
        self.upload_date = upload_date or datetime.utcnow()

    @property
    def content_type(self) -> str:
        return get_mime_type(self.file_type)

    def download_filename(self) -> str:
        """Имя файла для скачивания: заголовок + расширение"""
        if self.file_type:
            return f"{self.title}.{self.file_type}"
        return self.title

    def content_disposition(self) -> str:
        """Заголовок Content-Disposition с fallback для не-ASCII имен"""
        filename = CONTROL_CHARS.sub("_", self.download_filename())
        fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_").replace('"', "'")
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Document(uuid={self.uuid}, title={self.title}, file_type={self.file_type})"


class DocumentAccess:
    """Проверка прав на документ"""

    def __init__(self, document_id: uuid.UUID, owner_id: uuid.UUID):
        self.document_id = document_id
        self.owner_id = owner_id

    def is_owner(self, user_id: uuid.UUID) -> bool:
        return user_id == self.owner_id

    def can_access(self, user_id: uuid.UUID, role: UserRole) -> bool:
        return can_access(user_id, role, self.owner_id)

    def can_download(self, user_id: uuid.UUID, role: UserRole) -> bool:
        return self.can_access(user_id, role)

    def can_delete(self, user_id: uuid.UUID, role: UserRole) -> bool:
        return self.can_access(user_id, role)
