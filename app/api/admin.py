"""Admin API: table dumps for users with the admin role."""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, func, select

from app.api.deps import require_admin
from app.core.database import get_db
from app.models import AuditLog, ChatMessage, ChatSession, ErrorLog, User
from app.schemas import (
    AdminChatsResponse,
    AdminMessagesResponse,
    AdminUsersResponse,
    AuditLogItem,
    ErrorLogItem,
    MessageResponse,
    SessionResponse,
    UserResponse,
)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=AdminUsersResponse)
def admin_users(
    db: Session = Depends(get_db),
    limit: int = Query(500, ge=1, le=1000),
    offset: int = Query(0, ge=0),
):
    """All users without password hashes, newest first."""
    total = db.exec(select(func.count(User.id))).one() or 0
    users = db.exec(select(User).order_by(User.id.desc()).offset(offset).limit(limit)).all()
    return AdminUsersResponse(total_users=total, users=[UserResponse.model_validate(u) for u in users])


@router.get("/chats", response_model=AdminChatsResponse)
def admin_chats(
    db: Session = Depends(get_db),
    limit: int = Query(500, ge=1, le=1000),
    offset: int = Query(0, ge=0),
):
    total = db.exec(select(func.count(ChatSession.id))).one() or 0
    chats = db.exec(select(ChatSession).order_by(ChatSession.id.desc()).offset(offset).limit(limit)).all()
    return AdminChatsResponse(total_chats=total, chats=[SessionResponse.model_validate(c) for c in chats])


@router.get("/messages", response_model=AdminMessagesResponse)
def admin_messages(
    db: Session = Depends(get_db),
    limit: int = Query(500, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    session_id: int | None = Query(None, alias="sessionId"),
):
    count_stmt = select(func.count(ChatMessage.id))
    stmt = select(ChatMessage).order_by(ChatMessage.id.desc())
    if session_id is not None:
        count_stmt = count_stmt.where(ChatMessage.session_id == session_id)
        stmt = stmt.where(ChatMessage.session_id == session_id)
    total = db.exec(count_stmt).one() or 0
    messages = db.exec(stmt.offset(offset).limit(limit)).all()
    return AdminMessagesResponse(
        total_messages=total,
        messages=[MessageResponse.model_validate(m) for m in messages],
    )


@router.get("/logs", response_model=list[AuditLogItem])
def admin_logs(
    db: Session = Depends(get_db),
    limit: int = Query(200, ge=1, le=500),
    event: str | None = Query(None, description="Filter: register, login, failed_login, ai_response"),
):
    stmt = select(AuditLog).order_by(AuditLog.id.desc()).limit(limit)
    if event:
        stmt = stmt.where(AuditLog.event == event)
    return [AuditLogItem.model_validate(r) for r in db.exec(stmt).all()]


@router.get("/errors", response_model=list[ErrorLogItem])
def admin_errors(
    db: Session = Depends(get_db),
    limit: int = Query(100, ge=1, le=500),
):
    stmt = select(ErrorLog).order_by(ErrorLog.id.desc()).limit(limit)
    return [ErrorLogItem.model_validate(r) for r in db.exec(stmt).all()]
