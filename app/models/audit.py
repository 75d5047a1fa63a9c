from datetime import datetime

from sqlmodel import Field, SQLModel

from .base import UtcDateTime, utcnow


class AuditLog(SQLModel, table=True):
    __tablename__ = "audit_logs"
    id: int | None = Field(default=None, primary_key=True)
    event: str = Field(index=True)  # register, login, failed_login, ai_response
    user_id: int | None = Field(default=None, index=True)
    ip: str | None = None
    detail: str | None = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=UtcDateTime)
