from docvault.domains.notes.entities import Note
from docvault.domains.notes.schemas import (
    NoteCreate, NoteUpdate, NoteResponse, NoteDeleteResponse, NoteCountResponse
)
from docvault.domains.notes.services import NoteService

__all__ = [
    "Note",
    "NoteCreate", "NoteUpdate", "NoteResponse", "NoteDeleteResponse", "NoteCountResponse",
    "NoteService"
]
