from datetime import datetime

from pydantic import EmailStr, field_validator

from .base import CamelModel

MIN_PASSWORD_LENGTH = 6


class UserCreate(CamelModel):
    email: EmailStr
    password: str
    username: str | None = None

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        return v


class UserLogin(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    """Profile as returned to clients; never carries the password hash."""
    id: int
    email: str
    username: str
    role: str = "user"
    subscription_plan: str
    subscription_status: str
    ai_messages_used: int = 0
    voice_calls_used: int = 0
    trial_start_date: datetime | None = None
    trial_end_date: datetime | None = None
    created_at: datetime | None = None


class AuthResponse(CamelModel):
    success: bool = True
    token: str
    user: UserResponse


class MeResponse(CamelModel):
    success: bool = True
    user: UserResponse
