import logging
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root wherever uvicorn is started from
_PROJ_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJ_ROOT / ".env")

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.admin import router as admin_router
from app.api.auth import router as auth_router
from app.api.chat import router as chat_router
from app.api.user import router as user_router
from app.core.config import is_openai_configured, settings
from app.core.database import init_db, ping_db
from app.core.rate_limit import limiter
from app.logging import setup_logging
from app.services.audit import record_error

setup_logging(level=settings.log_level)
log = logging.getLogger("aras")


def _cors_origins_list() -> list[str]:
    if not settings.cors_origins or settings.cors_origins.strip() == "*":
        return ["*"]
    return [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    log.info("OPENAI_API_KEY loaded: %s", "yes" if is_openai_configured() else "NO (add OPENAI_API_KEY=sk-... to .env)")
    yield


app = FastAPI(
    title="ARAS API",
    description="Sales automation assistant: auth, chat sessions and AI responses",
    lifespan=lifespan,
)
app.state.limiter = limiter


def _error_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    rid = getattr(request.state, "request_id", None)
    body = {"error": detail, "status_code": status_code}
    if rid:
        body["request_id"] = rid
    return JSONResponse(status_code=status_code, content=body)


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    log.warning("Rate limit exceeded: path=%s limit=%s", request.url.path, exc.detail)
    return _error_response(request, 429, "Too many requests. Please wait a minute.")


def _validation_error_message(exc: RequestValidationError) -> str:
    errs = exc.errors()
    if not errs:
        return "Invalid request."
    first = errs[0]
    loc = list(first.get("loc") or [])
    field = str(loc[-1]) if len(loc) > 0 else None
    if first.get("type") == "missing":
        if field in ("email", "password"):
            return "Email and password are required."
        if field in ("sessionId", "message", "userMessage"):
            return "Missing message or sessionId"
        if field == "body":
            return "Request body is missing."
        return f"Missing field: {field}."
    if field == "email":
        return "Please enter a valid email address."
    msg = first.get("msg") or "Invalid request."
    # pydantic prefixes custom validator messages with "Value error, "
    return msg.removeprefix("Value error, ")


def _jsonable_errors(errs) -> list[dict]:
    """Pydantic error dicts may carry exception objects in ctx; keep only printable parts."""
    return [
        {"loc": list(e.get("loc") or []), "msg": e.get("msg"), "type": e.get("type")}
        for e in errs
    ]


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errs = exc.errors()
    log.info(
        "Request validation error (400): path=%s method=%s detail=%s",
        request.url.path,
        request.method,
        errs,
    )
    rid = getattr(request.state, "request_id", None)
    body = {"error": _validation_error_message(exc), "status_code": 400, "detail": _jsonable_errors(errs)}
    if rid:
        body["request_id"] = rid
    return JSONResponse(status_code=400, content=body)


app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error_response(request, exc.status_code, exc.detail if isinstance(exc.detail, str) else str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("Unhandled exception: path=%s %s", request.url.path, exc, exc_info=exc)
    record_error(request.url.path, request.method, exc, user_id=getattr(request.state, "user_id", None))
    return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__, "status_code": 500})


@app.middleware("http")
async def request_id_and_latency(request: Request, call_next):
    request.state.request_id = str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    latency_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = request.state.request_id
    log.info(
        "request_id=%s method=%s path=%s status=%s latency_ms=%.2f",
        request.state.request_id,
        request.method,
        request.url.path,
        response.status_code,
        latency_ms,
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins_list(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)
app.include_router(auth_router)
app.include_router(chat_router)
app.include_router(user_router)
app.include_router(admin_router)


@app.get("/health")
def health():
    try:
        database = "ok" if ping_db() else "error"
    except Exception as e:
        log.warning("Health check: database unreachable: %s", e)
        database = "error"
    return {"status": "ok", "openai_configured": is_openai_configured(), "database": database}
