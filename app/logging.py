"""
Logging configuration.
Uvicorn and app logger levels; AI response failures are logged with log.exception (app/api/chat.py).
"""
import logging
import sys


def setup_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
) -> None:
    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stdout,
        force=True,
    )
    # Keep uvicorn access and error loggers at the same level
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
    logging.getLogger("aras").setLevel(level)
    logging.getLogger("app").setLevel(level)
