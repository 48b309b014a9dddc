# dzwallet/core/logging.py
"""
Loguru setup for the gateway

Every record carries an ``action`` extra (transfer, bill_payment, rpc:<name>,
...) so money-movement lines can be filtered out of the main log.
"""
import logging
import sys
from typing import Any

from loguru import logger

from dzwallet.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[action]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# app.log policy per environment: (level, rotation, retention, serialize)
APP_LOG_POLICY = {
    "production": ("INFO", "500 MB", "10 days", True),
    "staging": ("INFO", "100 MB", "14 days", True),
    "development": ("DEBUG", "50 MB", "3 days", False),
}

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")

logger.configure(extra={"action": "-"})


class InterceptHandler(logging.Handler):
    """Forward stdlib records (uvicorn, httpx) to loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging() -> None:
    """Install console and file sinks and take over stdlib logging"""
    logger.remove()
    logger.add(sys.stdout, level=settings.LOG_LEVEL, format=CONSOLE_FORMAT, colorize=True)

    if settings.LOG_TO_FILE:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        level, rotation, retention, serialize = APP_LOG_POLICY[settings.ENVIRONMENT]

        logger.add(
            settings.LOG_DIR / "app.log",
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip" if serialize else None,
            serialize=serialize,
        )
        logger.add(
            settings.LOG_DIR / "error.log",
            level="ERROR",
            rotation="100 MB",
            retention="30 days",
            backtrace=True,
            diagnose=settings.DEBUG,
        )
        # Rejected and blocked financial actions, one JSON object per line
        logger.add(
            settings.LOG_DIR / "rejections.log",
            level="WARNING",
            filter=lambda record: record["extra"].get("rejected", False),
            serialize=True,
            rotation="50 MB",
            retention="90 days",
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = [InterceptHandler()]
        logging.getLogger(name).propagate = False
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_rejection(action: str, errors: list[str], context: dict[str, Any] | None = None) -> None:
    """Record a financial action refused before it reached the backend"""
    logger.bind(action=action, rejected=True, context=context or {}).warning(
        "⛔ {} rejected: {}", action, "; ".join(errors)
    )


def log_backend_call(rpc_name: str, duration_ms: float, ok: bool) -> None:
    logger.bind(action=f"rpc:{rpc_name}", duration_ms=round(duration_ms, 1)).log(
        "DEBUG" if ok else "WARNING",
        "{} {} in {:.0f} ms",
        rpc_name,
        "ok" if ok else "failed",
        duration_ms,
    )


def log_error(error: Exception, context: dict[str, Any] | None = None) -> None:
    logger.bind(error_type=type(error).__name__, context=context or {}).error(
        "💥 {}: {}", type(error).__name__, error
    )
