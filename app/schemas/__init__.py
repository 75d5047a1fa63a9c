from .admin import (
    AdminChatsResponse,
    AdminMessagesResponse,
    AdminUsersResponse,
    AuditLogItem,
    ErrorLogItem,
)
from .auth import AuthResponse, MeResponse, UserCreate, UserLogin, UserResponse
from .chat import (
    AiResponseRequest,
    AiResponseResult,
    MessageEnvelope,
    MessageResponse,
    SendMessageRequest,
    SessionCreate,
    SessionDetailResponse,
    SessionEnvelope,
    SessionListResponse,
    SessionResponse,
)
from .subscription import SubscriptionResponse

__all__ = [
    "AdminChatsResponse",
    "AdminMessagesResponse",
    "AdminUsersResponse",
    "AiResponseRequest",
    "AiResponseResult",
    "AuditLogItem",
    "AuthResponse",
    "ErrorLogItem",
    "MeResponse",
    "MessageEnvelope",
    "MessageResponse",
    "SendMessageRequest",
    "SessionCreate",
    "SessionDetailResponse",
    "SessionEnvelope",
    "SessionListResponse",
    "SessionResponse",
    "SubscriptionResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
]
