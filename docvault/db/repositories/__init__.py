from docvault.db.repositories.user_repository import UserRepository
from docvault.db.repositories.document_repository import DocumentRepository
from docvault.db.repositories.note_repository import NoteRepository
from docvault.db.repositories.activity_repository import ActivityRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
    "NoteRepository",
    "ActivityRepository"
]
