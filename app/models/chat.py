from datetime import datetime

from sqlmodel import Field, SQLModel

from .base import UtcDateTime, utcnow


class ChatSession(SQLModel, table=True):
    __tablename__ = "chat_sessions"
    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    title: str = "New Chat"
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow, sa_type=UtcDateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UtcDateTime)


class ChatMessage(SQLModel, table=True):
    """Append-only; user_id is the session owner, is_ai marks assistant replies."""
    __tablename__ = "chat_messages"
    id: int | None = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="chat_sessions.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    message: str
    is_ai: bool = False
    timestamp: datetime = Field(default_factory=utcnow, sa_type=UtcDateTime, index=True)
