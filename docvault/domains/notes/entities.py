import uuid
from datetime import datetime
from typing import Optional

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000


def validate_note_fields(title: Optional[str], description: Optional[str]) -> tuple:
    """Проверка полей заметки, возвращает обрезанные значения"""
    if not title or not title.strip() or not description or not description.strip():
        raise ValueError("Title and description are required")
    if len(title) > MAX_TITLE_LENGTH:
        raise ValueError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValueError(f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters")
    return title.strip(), description.strip()


class Note:
    """Личная заметка пользователя"""

    def __init__(
        self,
        uuid: uuid.UUID,
        title: str,
        description: str,
        user_id: uuid.UUID,
        username: str,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.title = title
        self.description = description
        self.user_id = user_id
        self.username = username
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or self.created_at

    def update(self, title: str, description: str) -> None:
        """Замена заголовка и текста с обновлением updated_at"""
        self.title, self.description = validate_note_fields(title, description)
        self.updated_at = datetime.utcnow()

    @classmethod
    def create_note(cls, title: str, description: str, user_id: uuid.UUID, username: str) -> "Note":
        title, description = validate_note_fields(title, description)
        return cls(
            uuid=uuid.uuid4(),
            title=title,
            description=description,
            user_id=user_id,
            username=username
        )

    def __repr__(self) -> str:
        return f"Note(uuid={self.uuid}, title={self.title}, user_id={self.user_id})"
