"""Plan limits and AI-message credit accounting."""
import logging
from datetime import datetime, timedelta

from fastapi import HTTPException
from sqlalchemy import update
from sqlmodel import Session

from app.models import User
from app.models.base import as_utc, utcnow

logger = logging.getLogger(__name__)

DEFAULT_PLAN = "starter"
DEFAULT_STATUS = "trial_pending"
TRIAL_DAYS = 14

# plan -> (AI messages, voice calls); None is unlimited
PLAN_LIMITS: dict[str, tuple[int | None, int | None]] = {
    "starter": (100, 10),
    "professional": (1000, 100),
    "enterprise": (None, None),
}


def trial_window(start: datetime | None = None) -> tuple[datetime, datetime]:
    start = start or utcnow()
    return start, start + timedelta(days=TRIAL_DAYS)


def plan_limits(plan: str | None) -> tuple[int | None, int | None]:
    """Unknown plans fall back to the starter limits."""
    key = (plan or "").strip().lower()
    return PLAN_LIMITS.get(key, PLAN_LIMITS[DEFAULT_PLAN])


def message_limit(plan: str | None) -> int | None:
    return plan_limits(plan)[0]


def is_trial_active(user: User, now: datetime | None = None) -> bool:
    if not user.trial_end_date:
        return False
    now = as_utc(now or utcnow())
    end = as_utc(user.trial_end_date)
    start = as_utc(user.trial_start_date) or end
    return start <= now < end


def consume_message_credit(db: Session, user: User) -> None:
    """
    Count one AI message against the user's plan.

    A single conditional UPDATE: the row is only incremented while it is below
    the limit, so no read-then-write window exists. Raises 402 when exhausted.
    """
    limit = message_limit(user.subscription_plan)
    stmt = (
        update(User)
        .where(User.id == user.id)
        .values(ai_messages_used=User.ai_messages_used + 1)
    )
    if limit is not None:
        stmt = stmt.where(User.ai_messages_used < limit)
    result = db.connection().execute(stmt)
    if result.rowcount == 0:
        db.rollback()
        logger.info("Credit limit reached: user_id=%s plan=%s limit=%s", user.id, user.subscription_plan, limit)
        raise HTTPException(status_code=402, detail="No credits left")
    db.commit()
    db.refresh(user)
