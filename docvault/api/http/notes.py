from typing import List
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from docvault.core.auth import get_current_user
from docvault.core.db import get_db
from docvault.domains.identity.entities import User
from docvault.domains.notes.schemas import (
    NoteCreate, NoteUpdate, NoteResponse, NoteDeleteResponse, NoteCountResponse
)
from docvault.domains.notes.services import NoteService

router = APIRouter(prefix="/notes", tags=["notes"])


def _not_found(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Note not found or you do not have permission to {action} it"
    )


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Заметки текущего пользователя, новые первыми"""
    notes = await NoteService(db).list_notes(current_user)
    return [NoteResponse.model_validate(note) for note in notes]


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    note_data: NoteCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Создание заметки"""
    try:
        note = await NoteService(db).create_note(note_data, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return NoteResponse.model_validate(note)


@router.get("/count", response_model=NoteCountResponse)
async def count_notes(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Количество заметок для дашборда"""
    return NoteCountResponse(count=await NoteService(db).count_notes(current_user))


@router.get("/{note_uuid}", response_model=NoteResponse)
async def get_note(
    note_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    note = await NoteService(db).get_note(note_uuid, current_user)
    if not note:
        raise _not_found("view")
    return NoteResponse.model_validate(note)


@router.put("/{note_uuid}", response_model=NoteResponse)
async def update_note(
    note_uuid: uuid.UUID,
    update_data: NoteUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Обновление заметки владельцем"""
    try:
        note = await NoteService(db).update_note(note_uuid, update_data, current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not note:
        raise _not_found("edit")
    return NoteResponse.model_validate(note)


@router.delete("/{note_uuid}", response_model=NoteDeleteResponse)
async def delete_note(
    note_uuid: uuid.UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Удаление заметки владельцем"""
    if not await NoteService(db).delete_note(note_uuid, current_user):
        raise _not_found("delete")
    return NoteDeleteResponse(message="Note deleted successfully", deleted_id=note_uuid)
