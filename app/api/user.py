from fastapi import APIRouter, Depends

from app.api.deps import get_current_user
from app.models import User
from app.schemas import SubscriptionResponse
from app.services.usage import is_trial_active, plan_limits

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/subscription", response_model=SubscriptionResponse)
def subscription(user: User = Depends(get_current_user)):
    """Plan, usage counters and limits of the logged-in user (dashboard widgets)."""
    messages_limit, calls_limit = plan_limits(user.subscription_plan)
    return SubscriptionResponse(
        plan=user.subscription_plan,
        status=user.subscription_status,
        ai_messages_used=user.ai_messages_used or 0,
        voice_calls_used=user.voice_calls_used or 0,
        ai_messages_limit=messages_limit,
        voice_calls_limit=calls_limit,
        trial_end_date=user.trial_end_date,
        is_trial_active=is_trial_active(user),
        can_upgrade=(user.subscription_plan or "").lower() != "enterprise",
    )
