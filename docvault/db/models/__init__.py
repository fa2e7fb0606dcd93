from docvault.db.models.user import User
from docvault.db.models.document import Document
from docvault.db.models.note import Note
from docvault.db.models.activity import RecentActivity

__all__ = [
    "User",
    "Document",
    "Note",
    "RecentActivity"
]
