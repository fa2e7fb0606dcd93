"""Tests for the notes store."""

import uuid

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select

from docvault.db.models import Note as NoteModel
from docvault.domains.notes.entities import Note, validate_note_fields
from docvault.domains.notes.schemas import NoteCreate, NoteUpdate
from docvault.domains.notes.services import NoteService


async def note_count(session_factory) -> int:
    async with session_factory() as s:
        return (await s.execute(select(func.count()).select_from(NoteModel))).scalar()


class TestNoteValidation:
    def test_fields_are_trimmed(self):
        assert validate_note_fields("  Title ", " body ") == ("Title", "body")

    @pytest.mark.parametrize("title, description", [("", "body"), ("   ", "body"), ("Title", ""), (None, "x")])
    def test_blank_fields_rejected(self, title, description):
        with pytest.raises(ValueError, match="required"):
            validate_note_fields(title, description)

    def test_length_limits(self):
        validate_note_fields("t" * 200, "d" * 5000)
        with pytest.raises(ValueError, match="Title"):
            validate_note_fields("t" * 201, "d")
        with pytest.raises(ValueError, match="Description"):
            validate_note_fields("t", "d" * 5001)

    def test_schema_rejects_oversized_fields(self):
        with pytest.raises(ValidationError):
            NoteCreate(title="t" * 201, description="d")
        with pytest.raises(ValidationError):
            NoteCreate(title="t", description="d" * 5001)

    def test_schema_rejects_blank_fields(self):
        with pytest.raises(ValidationError):
            NoteCreate(title="  ", description="d")

    def test_entity_update_restamps_updated_at(self):
        note = Note.create_note("Title", "body", uuid.uuid4(), "alice")
        before = note.updated_at

        note.update(" New ", " text ")

        assert (note.title, note.description) == ("New", "text")
        assert note.updated_at >= before


@pytest.mark.notes
@pytest.mark.asyncio
class TestNoteService:
    async def test_create_and_list_newest_first(self, session, alice):
        service = NoteService(session)
        first = await service.create_note(NoteCreate(title="First", description="one"), alice)
        second = await service.create_note(NoteCreate(title="Second", description="two"), alice)

        notes = await service.list_notes(alice)

        assert [n.uuid for n in notes] == [second.uuid, first.uuid]
        assert notes[0].username == "alice"
        assert await service.count_notes(alice) == 2

    async def test_notes_are_invisible_to_other_users_including_admin(self, session, alice, bob, admin):
        service = NoteService(session)
        note = await service.create_note(NoteCreate(title="Private", description="mine"), alice)

        for other in (bob, admin):
            assert await service.list_notes(other) == []
            assert await service.get_note(note.uuid, other) is None
            assert await service.update_note(note.uuid, NoteUpdate(title="x", description="y"), other) is None
            assert await service.delete_note(note.uuid, other) is False
            assert await service.count_notes(other) == 0

        assert (await service.get_note(note.uuid, alice)).title == "Private"

    async def test_update_replaces_fields(self, session, alice):
        service = NoteService(session)
        note = await service.create_note(NoteCreate(title="Old", description="old"), alice)

        updated = await service.update_note(note.uuid, NoteUpdate(title="New", description="new"), alice)

        assert (updated.title, updated.description) == ("New", "new")
        assert updated.updated_at >= note.updated_at

    async def test_delete_is_hard_delete(self, session, session_factory, alice):
        service = NoteService(session)
        note = await service.create_note(NoteCreate(title="Gone", description="soon"), alice)

        assert await service.delete_note(note.uuid, alice) is True
        assert await note_count(session_factory) == 0
        assert await service.delete_note(note.uuid, alice) is False
