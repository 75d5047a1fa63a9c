import logging
import traceback

from sqlmodel import Session

from app.core.database import engine
from app.models import AuditLog, ErrorLog

logger = logging.getLogger(__name__)


def record_event(db: Session, event: str, user_id: int | None, ip: str | None, detail: str | None = None) -> None:
    """Audit rows are best effort: a failed write is logged and rolled back, the request goes on."""
    try:
        db.add(AuditLog(event=event, user_id=user_id, ip=ip or None, detail=detail))
        db.commit()
    except Exception as e:
        db.rollback()
        logger.warning("AuditLog write failed (%s): %s", event, e)


def record_error(endpoint: str, method: str, exc: BaseException, user_id: int | None = None) -> None:
    """One error_logs row with the stack trace; uses its own session so a broken request session can't block it."""
    try:
        with Session(engine) as db:
            db.add(ErrorLog(
                user_id=user_id,
                endpoint=endpoint,
                method=method,
                error_message=(str(exc) or type(exc).__name__)[:2000],
                stack_trace="".join(traceback.format_exception(exc))[:10000],
            ))
            db.commit()
    except Exception as e:
        logger.warning("ErrorLog write failed: %s", e)
