from datetime import datetime

from .auth import UserResponse
from .base import CamelModel
from .chat import MessageResponse, SessionResponse


class AdminUsersResponse(CamelModel):
    total_users: int
    users: list[UserResponse]


class AdminChatsResponse(CamelModel):
    total_chats: int
    chats: list[SessionResponse]


class AdminMessagesResponse(CamelModel):
    total_messages: int
    messages: list[MessageResponse]


class AuditLogItem(CamelModel):
    id: int
    event: str
    user_id: int | None = None
    ip: str | None = None
    detail: str | None = None
    created_at: datetime


class ErrorLogItem(CamelModel):
    id: int
    endpoint: str | None = None
    method: str | None = None
    error_message: str | None = None
    created_at: datetime
