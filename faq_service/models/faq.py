from datetime import datetime, timezone
from sqlalchemy import Column, Integer, Text
from faq_service.database import Base


def utc_now_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FAQ(Base):
    """Store FAQ entries"""
    __tablename__ = "faq"
    __table_args__ = {"sqlite_autoincrement": True}  # ids are never reused after delete

    id = Column(Integer, primary_key=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(Text, default="", server_default="")
    created_at = Column(Text, default="", server_default="")  # ISO 8601 string
    updated_at = Column(Text, default="", server_default="")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "category": self.category,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
