import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from app.api.deps import get_current_user
from app.core.database import get_db
from app.core.rate_limit import get_client_ip
from app.models import User
from app.schemas import (
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
from app.services import chat as chat_service
from app.services import llm
from app.services.audit import record_error, record_event
from app.services.usage import consume_message_credit

log = logging.getLogger("aras")

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("/sessions", response_model=SessionEnvelope)
def create_session(
    body: SessionCreate | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    session = chat_service.create_session(db, user.id or 0, body.title if body else None)
    return SessionEnvelope(session=SessionResponse.model_validate(session))


@router.get("/sessions", response_model=SessionListResponse)
def list_sessions(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    sessions = chat_service.list_sessions(db, user.id or 0)
    return SessionListResponse(sessions=[SessionResponse.model_validate(s) for s in sessions])


@router.get("/sessions/{session_id}", response_model=SessionDetailResponse)
def get_session(
    session_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    session = chat_service.get_owned_session(db, session_id, user.id or 0)
    messages = chat_service.list_messages(db, session.id or 0)
    return SessionDetailResponse(
        session=SessionResponse.model_validate(session),
        messages=[MessageResponse.model_validate(m) for m in messages],
    )


@router.post("/sessions/{session_id}/activate", response_model=SessionEnvelope)
def activate_session(
    session_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    session = chat_service.get_owned_session(db, session_id, user.id or 0)
    session = chat_service.activate_session(db, session)
    return SessionEnvelope(session=SessionResponse.model_validate(session))


@router.post("/send", response_model=MessageEnvelope)
def send_message(
    body: SendMessageRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Store one message; human messages count against the plan's AI-message limit."""
    session = chat_service.get_owned_session(db, body.session_id, user.id or 0)
    if not body.is_ai:
        consume_message_credit(db, user)
    msg = chat_service.add_message(db, session, body.message, is_ai=body.is_ai)
    return MessageEnvelope(message=MessageResponse.model_validate(msg))


@router.post("/ai-response", response_model=AiResponseResult)
def ai_response(
    request: Request,
    body: AiResponseRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Persist the user's message, replay the last messages of the session to the
    completion API, persist and return the assistant's reply. No credit is
    charged here; /send meters the human messages.
    """
    session = chat_service.get_owned_session(db, body.session_id, user.id or 0)
    chat_service.add_message(db, session, body.user_message, is_ai=False)
    history = chat_service.recent_history(db, session.id or 0)
    try:
        reply = llm.chat_completion(chat_service.build_completion_messages(history))
    except HTTPException:
        raise
    except Exception as e:
        log.exception("AI response failed: session_id=%s %s", session.id, e)
        record_error(request.url.path, request.method, e, user_id=user.id)
        raise HTTPException(status_code=500, detail=str(e) or type(e).__name__)
    chat_service.add_message(db, session, reply, is_ai=True)
    record_event(db, "ai_response", user.id, get_client_ip(request))
    return AiResponseResult(ai_response=reply)
