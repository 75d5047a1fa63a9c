from .audit import AuditLog
from .chat import ChatMessage, ChatSession
from .error_log import ErrorLog
from .user import User

__all__ = [
    "AuditLog",
    "ChatMessage",
    "ChatSession",
    "ErrorLog",
    "User",
]
