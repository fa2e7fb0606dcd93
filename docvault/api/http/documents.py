from typing import List, Optional
import uuid

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.auth import get_current_user
from docvault.core.config import settings
from docvault.core.db import get_db
from docvault.domains.documents.file_types import SUPPORTED_FILE_TYPES
from docvault.domains.documents.schemas import (
    DocumentResponse, DocumentDeleteResponse, FileTypeResponse, FileTypeListResponse
)
from docvault.domains.documents.services import DocumentService
from docvault.domains.identity.entities import User
from docvault.infrastructure.storage import StorageBackend, get_storage

router = APIRouter(prefix="/documents", tags=["documents"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")


@router.post("/upload", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    title: str = Form(""),
    description: str = Form(""),
    access_level: str = Form("private"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
):
    """Загрузка документа в объектное хранилище"""
    # Не больше лимита + 1 байт: превышение отклоняет сервис
    file_bytes = await file.read(settings.max_upload_bytes + 1) if file is not None else b""
    document_service = DocumentService(db, storage)

    try:
        document = await document_service.upload_document(
            current_user,
            file_bytes=file_bytes,
            filename=file.filename if file is not None else None,
            title=title,
            description=description,
            access_level=access_level
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return DocumentResponse.model_validate(document)


@router.get("", response_model=List[DocumentResponse])
async def list_documents(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Свои документы; администратор видит все"""
    documents = await DocumentService(db).list_documents(current_user)
    return [DocumentResponse.model_validate(doc) for doc in documents]


@router.get("/file-types", response_model=FileTypeListResponse)
async def get_file_types(current_user: User = Depends(get_current_user)):
    """Поддерживаемые типы файлов"""
    return FileTypeListResponse(
        supported_types=[FileTypeResponse(**info.to_dict()) for info in SUPPORTED_FILE_TYPES.values()],
        max_upload_bytes=settings.max_upload_bytes
    )


@router.get("/download/{document_uuid}")
async def download_document(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Редирект на файл в хранилище с заголовками скачивания"""
    try:
        document = await DocumentService(db).prepare_download(document_uuid, current_user)
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    if not document:
        raise _not_found()

    return RedirectResponse(
        url=document.file_url,
        status_code=status.HTTP_302_FOUND,
        headers={
            "Content-Disposition": document.content_disposition(),
            "Content-Type": document.content_type
        }
    )


@router.get("/{document_uuid}", response_model=DocumentResponse)
async def get_document(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение документа по UUID"""
    try:
        document = await DocumentService(db).get_document(document_uuid, current_user)
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    if not document:
        raise _not_found()

    return DocumentResponse.model_validate(document)


@router.delete("/{document_uuid}", response_model=DocumentDeleteResponse)
async def delete_document(
    document_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Удаление документа владельцем или администратором"""
    try:
        deleted = await DocumentService(db).delete_document(document_uuid, current_user)
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    if not deleted:
        raise _not_found()

    return DocumentDeleteResponse(message="Document deleted successfully", deleted_id=document_uuid)
