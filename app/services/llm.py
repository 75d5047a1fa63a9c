import logging
import time

from openai import OpenAI

from app.core.config import is_openai_configured, settings

logger = logging.getLogger(__name__)

_client: OpenAI | None = None


def _get_client() -> OpenAI:
    """Single cached client; the key is read once from settings."""
    global _client
    if _client is None:
        _client = OpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout)
    return _client


def chat_completion(messages: list[dict[str, str]]) -> str:
    """
    Send the conversation to the completion API and return the assistant text.
    No retry: any API error propagates to the caller.
    """
    if not is_openai_configured():
        raise ValueError("OPENAI_API_KEY is not set. Add OPENAI_API_KEY=sk-... to .env.")
    t0 = time.perf_counter()
    response = _get_client().chat.completions.create(
        model=settings.openai_model,
        messages=messages,
    )
    content = response.choices[0].message.content or ""
    logger.info(
        "Completion done: model=%s messages=%s latency_ms=%.2f",
        settings.openai_model,
        len(messages),
        (time.perf_counter() - t0) * 1000,
    )
    return content
