import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlmodel import Session, select

from app.api.deps import get_current_user
from app.core.config import get_admin_emails, settings
from app.core.database import get_db
from app.core.rate_limit import get_client_ip, limiter
from app.core.security import create_access_token, hash_password, verify_password
from app.models import User
from app.models.base import utcnow
from app.schemas import AuthResponse, MeResponse, UserCreate, UserLogin, UserResponse
from app.services.audit import record_event
from app.services.usage import DEFAULT_PLAN, DEFAULT_STATUS, trial_window

log = logging.getLogger("aras")

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _register_limit() -> str:
    return f"{settings.rate_limit_register_per_minute}/minute"


def _login_limit() -> str:
    return f"{settings.rate_limit_login_per_minute}/minute"


def _auth_response(user: User) -> AuthResponse:
    token = create_access_token(user.id or 0, user.email)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(_register_limit)
def register(
    request: Request,
    body: UserCreate,
    db: Session = Depends(get_db),
):
    email = str(body.email).strip()
    if db.exec(select(User).where(User.email == email)).first():
        raise HTTPException(status_code=400, detail="Email already registered.")
    trial_start, trial_end = trial_window()
    user = User(
        email=email,
        username=(body.username or "").strip() or email.split("@")[0],
        hashed_password=hash_password(body.password),
        role="admin" if email.lower() in get_admin_emails() else "user",
        subscription_plan=DEFAULT_PLAN,
        subscription_status=DEFAULT_STATUS,
        trial_start_date=trial_start,
        trial_end_date=trial_end,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info("User registered: id=%s role=%s", user.id, user.role)
    record_event(db, "register", user.id, get_client_ip(request))
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(_login_limit)
def login(
    request: Request,
    body: UserLogin,
    db: Session = Depends(get_db),
):
    email = str(body.email).strip()
    user = db.exec(select(User).where(User.email == email)).first()
    ip = get_client_ip(request)
    if not user or not verify_password(body.password, user.hashed_password):
        record_event(db, "failed_login", user.id if user else None, ip, detail=email)
        raise HTTPException(status_code=401, detail="Wrong email or password.")
    user.last_login_at = utcnow()
    db.add(user)
    db.commit()
    db.refresh(user)
    record_event(db, "login", user.id, ip)
    return _auth_response(user)


@router.get("/me", response_model=MeResponse)
def me(user: User = Depends(get_current_user)):
    """Profile of the token's owner, without the password hash."""
    return MeResponse(user=UserResponse.model_validate(user))
