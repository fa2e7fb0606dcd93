from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
import uuid

from docvault.db.models.note import Note as NoteModel

if TYPE_CHECKING:
    from docvault.domains.notes.entities import Note


class NoteRepository:
    """Репозиторий заметок. Каждый запрос ограничен владельцем."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, note: "Note") -> "Note":
        db_note = NoteModel(
            uuid=note.uuid,
            title=note.title,
            description=note.description,
            user_id=note.user_id,
            username=note.username,
            created_at=note.created_at,
            updated_at=note.updated_at
        )
        self.session.add(db_note)
        await self.session.commit()
        await self.session.refresh(db_note)
        return self._to_domain(db_note)

    async def get(self, note_uuid: uuid.UUID, user_id: uuid.UUID) -> Optional["Note"]:
        result = await self.session.execute(
            select(NoteModel).where(NoteModel.uuid == note_uuid, NoteModel.user_id == user_id)
        )
        db_note = result.scalar_one_or_none()
        return self._to_domain(db_note) if db_note else None

    async def list_by_user(self, user_id: uuid.UUID) -> List["Note"]:
        result = await self.session.execute(
            select(NoteModel)
            .where(NoteModel.user_id == user_id)
            .order_by(NoteModel.created_at.desc())
        )
        return [self._to_domain(note) for note in result.scalars().all()]

    async def update(self, note: "Note") -> Optional["Note"]:
        stmt = (
            update(NoteModel)
            .where(NoteModel.uuid == note.uuid, NoteModel.user_id == note.user_id)
            .values(
                title=note.title,
                description=note.description,
                updated_at=note.updated_at
            )
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount == 0:
            return None
        return await self.get(note.uuid, note.user_id)

    async def delete(self, note_uuid: uuid.UUID, user_id: uuid.UUID) -> bool:
        stmt = delete(NoteModel).where(NoteModel.uuid == note_uuid, NoteModel.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def count_by_user(self, user_id: uuid.UUID) -> int:
        result = await self.session.execute(
            select(func.count(NoteModel.uuid)).where(NoteModel.user_id == user_id)
        )
        return result.scalar()

    def _to_domain(self, db_note: NoteModel) -> "Note":
        from docvault.domains.notes.entities import Note

        return Note(
            uuid=db_note.uuid,
            title=db_note.title,
            description=db_note.description,
            user_id=db_note.user_id,
            username=db_note.username,
            created_at=db_note.created_at,
            updated_at=db_note.updated_at
        )
