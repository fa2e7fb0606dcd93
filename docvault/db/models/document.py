from datetime import datetime

from sqlalchemy import Column, String, Text, BigInteger, ForeignKey, DateTime, UUID
from sqlalchemy.orm import relationship

from docvault.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"

    title = Column(String(255), nullable=False)
    description = Column(Text, default="")
    file_type = Column(String(20), default="", index=True)
    file_url = Column(String(1024), nullable=False)
    storage_key = Column(String(512), nullable=False)
    resource_type = Column(String(10), nullable=False, default="auto")
    file_size = Column(BigInteger, nullable=False, default=0)
    access_level = Column(String(50), nullable=False, default="private")
    uploader_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), nullable=False, index=True)
    upload_date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    uploader = relationship("User", back_populates="documents")
