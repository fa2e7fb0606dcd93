from sqlalchemy import Column, String, Text, ForeignKey, Index, UUID
from sqlalchemy.orm import relationship

from docvault.db.base import BaseModel


class Note(BaseModel):
    __tablename__ = "notes"
    __table_args__ = (Index("ix_notes_user_created", "user_id", "created_at"),)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
    username = Column(String(50), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="notes")
