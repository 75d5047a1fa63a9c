from datetime import datetime

from .base import CamelModel


class SubscriptionResponse(CamelModel):
    plan: str
    status: str
    ai_messages_used: int
    voice_calls_used: int
    # None means unlimited
    ai_messages_limit: int | None = None
    voice_calls_limit: int | None = None
    trial_end_date: datetime | None = None
    is_trial_active: bool = False
    can_upgrade: bool = True
