"""Chat sessions and messages; every query is scoped to the owning user."""
from fastapi import HTTPException
from sqlmodel import Session, select

from app.core.config import settings
from app.models import ChatMessage, ChatSession
from app.models.base import utcnow

DEFAULT_TITLE = "New Chat"


def _deactivate_others(db: Session, user_id: int, keep_id: int | None = None) -> None:
    stmt = select(ChatSession).where(ChatSession.user_id == user_id, ChatSession.is_active == True)  # noqa: E712
    for s in db.exec(stmt).all():
        if s.id != keep_id:
            s.is_active = False
            db.add(s)


def create_session(db: Session, user_id: int, title: str | None = None) -> ChatSession:
    """New session becomes the user's only active one."""
    _deactivate_others(db, user_id)
    session = ChatSession(user_id=user_id, title=(title or "").strip() or DEFAULT_TITLE, is_active=True)
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def list_sessions(db: Session, user_id: int) -> list[ChatSession]:
    stmt = (
        select(ChatSession)
        .where(ChatSession.user_id == user_id)
        .order_by(ChatSession.updated_at.desc(), ChatSession.id.desc())
    )
    return list(db.exec(stmt).all())


def get_owned_session(db: Session, session_id: int, user_id: int) -> ChatSession:
    """Missing and foreign sessions look the same to the caller: 403."""
    stmt = select(ChatSession).where(ChatSession.id == session_id, ChatSession.user_id == user_id)
    session = db.exec(stmt).first()
    if not session:
        raise HTTPException(status_code=403, detail="Session not found")
    return session


def activate_session(db: Session, session: ChatSession) -> ChatSession:
    _deactivate_others(db, session.user_id, keep_id=session.id)
    session.is_active = True
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def list_messages(db: Session, session_id: int) -> list[ChatMessage]:
    stmt = (
        select(ChatMessage)
        .where(ChatMessage.session_id == session_id)
        .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
    )
    return list(db.exec(stmt).all())


def add_message(db: Session, session: ChatSession, text: str, is_ai: bool) -> ChatMessage:
    """Append a message and touch the session's updated_at."""
    msg = ChatMessage(session_id=session.id, user_id=session.user_id, message=text, is_ai=is_ai)
    session.updated_at = utcnow()
    db.add(msg)
    db.add(session)
    db.commit()
    db.refresh(msg)
    return msg


def recent_history(db: Session, session_id: int, limit: int | None = None) -> list[ChatMessage]:
    """Last `limit` messages of the session, oldest first."""
    limit = limit or settings.chat_history_limit
    stmt = (
        select(ChatMessage)
        .where(ChatMessage.session_id == session_id)
        .order_by(ChatMessage.id.desc())
        .limit(limit)
    )
    return list(reversed(db.exec(stmt).all()))


def build_completion_messages(history: list[ChatMessage]) -> list[dict[str, str]]:
    messages: list[dict[str, str]] = []
    if settings.chat_system_prompt:
        messages.append({"role": "system", "content": settings.chat_system_prompt})
    for m in history:
        messages.append({"role": "assistant" if m.is_ai else "user", "content": m.message})
    return messages
