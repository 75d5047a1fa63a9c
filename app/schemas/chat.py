from datetime import datetime

from pydantic import field_validator

from .base import CamelModel


class SessionCreate(CamelModel):
    title: str | None = None


class SessionResponse(CamelModel):
    id: int
    user_id: int
    title: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class MessageResponse(CamelModel):
    id: int
    session_id: int
    user_id: int
    message: str
    is_ai: bool
    timestamp: datetime


class SessionEnvelope(CamelModel):
    success: bool = True
    session: SessionResponse


class SessionListResponse(CamelModel):
    success: bool = True
    sessions: list[SessionResponse]


class SessionDetailResponse(CamelModel):
    success: bool = True
    session: SessionResponse
    messages: list[MessageResponse]


class SendMessageRequest(CamelModel):
    session_id: int
    message: str
    is_ai: bool = False

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Missing message or sessionId")
        return v


class MessageEnvelope(CamelModel):
    success: bool = True
    message: MessageResponse


class AiResponseRequest(CamelModel):
    session_id: int
    user_message: str

    @field_validator("user_message")
    @classmethod
    def user_message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Missing userMessage or sessionId")
        return v


class AiResponseResult(CamelModel):
    success: bool = True
    ai_response: str
