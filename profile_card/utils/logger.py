"""
Session logging.

JSON lines through structlog, written to the log file and stdout configured
in AppSettings. Each form session binds its profile id as ``session_id``.
Field values typed by the user never reach the log: editing events carry
field names only, and mask_personal_data blanks personal keys that slip in.
"""

import logging
import re
import sys
from pathlib import Path
from typing import Optional

import structlog
from structlog.types import BindableLogger, EventDict, WrappedLogger

from profile_card.models.config import AppSettings

MASKED_VALUE = "***MASKED***"
PERSONAL_FIELDS = frozenset(
    {"email", "bio", "username", "password", "token", "secret"}
)

_KEY_PARTS = re.compile(r"[_\-]")

# Handlers installed on the root logger by the last configure_logging call
_handlers: list[logging.Handler] = []


def mask_personal_data(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Blank values whose key has a personal-data word as a _/- separated part.

    "contact_email" and "bio-text" are masked; "biography_length" is not.
    """
    for key in event_dict:
        if key == "event":
            continue
        if PERSONAL_FIELDS.intersection(_KEY_PARTS.split(key.lower())):
            event_dict[key] = MASKED_VALUE
    return event_dict


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """Route structlog events to the log file and stdout from settings.

    Safe to call repeatedly: handlers from a previous call are closed and
    replaced, so a later session can switch level or file.

    Args:
        settings: Settings providing log_level and log_file (defaults to AppSettings())
    """
    settings = settings if settings is not None else AppSettings()

    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()

    formatter = logging.Formatter("%(message)s")
    for handler in (
        logging.FileHandler(log_path, encoding="utf-8"),
        logging.StreamHandler(sys.stdout),
    ):
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _handlers.append(handler)
    root.setLevel(getattr(logging, settings.log_level))

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            mask_personal_data,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def is_configured() -> bool:
    return bool(_handlers)


def get_logger(component: str, session_id: Optional[str] = None) -> BindableLogger:
    """Logger bound to a component and, when given, a form session.

    Falls back to default settings if nothing configured logging yet.
    """
    if not is_configured():
        configure_logging()

    logger = structlog.get_logger(component).bind(component=component)
    if session_id:
        logger = logger.bind(session_id=session_id)
    return logger
