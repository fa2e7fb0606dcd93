from docvault.domains.documents.entities import Document, DocumentAccess, can_access
from docvault.domains.documents.file_types import FileTypeInfo, classify
from docvault.domains.documents.schemas import (
    DocumentResponse, DocumentDeleteResponse, FileTypeResponse, FileTypeListResponse
)
from docvault.domains.documents.services import DocumentService

__all__ = [
    "Document", "DocumentAccess", "can_access",
    "FileTypeInfo", "classify",
    "DocumentResponse", "DocumentDeleteResponse", "FileTypeResponse", "FileTypeListResponse",
    "DocumentService"
]
