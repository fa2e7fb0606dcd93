import logging
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docvault.db.repositories.note_repository import NoteRepository
from docvault.domains.identity.entities import User
from docvault.domains.notes.entities import Note
from docvault.domains.notes.schemas import NoteCreate, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """Заметки доступны только автору, без исключений для администратора"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repository = NoteRepository(session)

    async def list_notes(self, requester: User) -> List[Note]:
        notes = await self.note_repository.list_by_user(requester.uuid)
        logger.debug(f"Fetched {len(notes)} notes for user {requester.username}")
        return notes

    async def get_note(self, note_uuid: uuid.UUID, requester: User) -> Optional[Note]:
        return await self.note_repository.get(note_uuid, requester.uuid)

    async def create_note(self, note_data: NoteCreate, requester: User) -> Note:
        note = Note.create_note(
            title=note_data.title,
            description=note_data.description,
            user_id=requester.uuid,
            username=requester.username
        )
        created = await self.note_repository.create(note)
        logger.info(f"Note created: {created.uuid} by user {requester.username}")
        return created

    async def update_note(self, note_uuid: uuid.UUID, update_data: NoteUpdate, requester: User) -> Optional[Note]:
        note = await self.note_repository.get(note_uuid, requester.uuid)
        if not note:
            return None

        note.update(update_data.title, update_data.description)
        updated = await self.note_repository.update(note)
        logger.info(f"Note updated: {note_uuid} by user {requester.username}")
        return updated

    async def delete_note(self, note_uuid: uuid.UUID, requester: User) -> bool:
        deleted = await self.note_repository.delete(note_uuid, requester.uuid)
        if deleted:
            logger.info(f"Note deleted: {note_uuid} by user {requester.username}")
        return deleted

    async def count_notes(self, requester: User) -> int:
        return await self.note_repository.count_by_user(requester.uuid)
