from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError
import uuid

from docvault.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from docvault.domains.documents.entities import Document


class DocumentRepository:
    """Репозиторий метаданных документов"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: "Document") -> "Document":
        """Создание записи документа"""
        db_document = DocumentModel(
            uuid=document.uuid,
            title=document.title,
            description=document.description,
            file_type=document.file_type,
            file_url=document.file_url,
            storage_key=document.storage_key,
            resource_type=document.resource_type,
            file_size=document.file_size,
            access_level=document.access_level,
            uploader_id=document.uploader_id,
            upload_date=document.upload_date
        )

        self.session.add(db_document)
        try:
            await self.session.commit()
            await self.session.refresh(db_document)
            return self._to_domain(db_document)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Invalid uploader_id")

    async def get_by_uuid(self, document_uuid: uuid.UUID) -> Optional["Document"]:
        """Получение документа по UUID"""
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.uuid == document_uuid)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_many(self, document_uuids: List[uuid.UUID]) -> List["Document"]:
        """Получение документов по списку UUID"""
        if not document_uuids:
            return []
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.uuid.in_(document_uuids))
        )
        return [self._to_domain(doc) for doc in result.scalars().all()]

    async def list(self, owner_id: Optional[uuid.UUID] = None) -> List["Document"]:
        """Документы владельца или все документы, если owner_id не задан"""
        query = select(DocumentModel)
        if owner_id is not None:
            query = query.where(DocumentModel.uploader_id == owner_id)
        result = await self.session.execute(
            query.order_by(DocumentModel.upload_date.desc())
        )
        return [self._to_domain(doc) for doc in result.scalars().all()]

    async def delete(self, document_uuid: uuid.UUID) -> bool:
        """Удаление документа"""
        stmt = delete(DocumentModel).where(DocumentModel.uuid == document_uuid)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def totals(self, owner_id: Optional[uuid.UUID] = None) -> tuple:
        """(количество, суммарный размер) документов"""
        query = select(
            func.count(DocumentModel.uuid),
            func.coalesce(func.sum(DocumentModel.file_size), 0)
        )
        if owner_id is not None:
            query = query.where(DocumentModel.uploader_id == owner_id)
        result = await self.session.execute(query)
        count, total_size = result.one()
        return count, int(total_size)

    async def file_type_distribution(self, owner_id: uuid.UUID) -> List[tuple]:
        """Распределение по типам: (тип, количество, размер) по убыванию количества"""
        count = func.count(DocumentModel.uuid).label("count")
        result = await self.session.execute(
            select(
                DocumentModel.file_type,
                count,
                func.coalesce(func.sum(DocumentModel.file_size), 0)
            )
            .where(
                DocumentModel.uploader_id == owner_id,
                DocumentModel.file_type.is_not(None),
                DocumentModel.file_type != ""
            )
            .group_by(DocumentModel.file_type)
            .order_by(count.desc(), DocumentModel.file_type)
        )
        return [(file_type, n, int(size)) for file_type, n, size in result.all()]

    async def upload_dates_since(self, since: datetime, owner_id: Optional[uuid.UUID] = None) -> List[datetime]:
        """Даты загрузок начиная с since"""
        query = select(DocumentModel.upload_date).where(DocumentModel.upload_date >= since)
        if owner_id is not None:
            query = query.where(DocumentModel.uploader_id == owner_id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def storage_per_user(self) -> List[tuple]:
        """(uploader_id, количество, размер) по убыванию размера"""
        total_size = func.coalesce(func.sum(DocumentModel.file_size), 0).label("total_size")
        result = await self.session.execute(
            select(DocumentModel.uploader_id, func.count(DocumentModel.uuid), total_size)
            .group_by(DocumentModel.uploader_id)
            .order_by(total_size.desc())
        )
        return [(uploader_id, n, int(size)) for uploader_id, n, size in result.all()]

    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from docvault.domains.documents.entities import Document

        return Document(
            uuid=db_document.uuid,
            title=db_document.title,
            description=db_document.description or "",
            file_type=db_document.file_type or "",
            file_url=db_document.file_url,
            storage_key=db_document.storage_key,
            resource_type=db_document.resource_type,
            file_size=db_document.file_size or 0,
            uploader_id=db_document.uploader_id,
            access_level=db_document.access_level,
            upload_date=db_document.upload_date
        )
