from datetime import datetime

from sqlmodel import Field, SQLModel

from .base import UtcDateTime, utcnow


class User(SQLModel, table=True):
    __tablename__ = "users"
    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    username: str = ""
    hashed_password: str
    role: str = "user"  # "user" | "admin"
    subscription_plan: str = "starter"  # "starter" | "professional" | "enterprise"
    subscription_status: str = "trial_pending"
    trial_start_date: datetime | None = Field(default=None, sa_type=UtcDateTime)
    trial_end_date: datetime | None = Field(default=None, sa_type=UtcDateTime)
    ai_messages_used: int = 0
    voice_calls_used: int = 0
    created_at: datetime | None = Field(default_factory=utcnow, sa_type=UtcDateTime)
    last_login_at: datetime | None = Field(default=None, sa_type=UtcDateTime)
