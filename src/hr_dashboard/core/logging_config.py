"""Logging configuration.

Console logging always; a rotating file handler when a log file is configured.
Credentials (anon keys, bearer tokens, JWTs) are masked before they reach a handler.
"""

from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3

SENSITIVE_PATTERNS = [
    (
        re.compile(
            r"(apikey|api_key|anon_key|service_role_key|secret|token|password|authorization)"
            r"\s*[:=]\s*['\"]?([^'\"\s&]+)['\"]?",
            re.IGNORECASE,
        ),
        r"\1=***",
    ),
    (re.compile(r"(Bearer\s+)([A-Za-z0-9\-_\.]+)", re.IGNORECASE), r"\1***"),
    (
        re.compile(r"\b(eyJ[A-Za-z0-9\-_]+\.eyJ[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+)\b"),
        r"[JWT:***]",
    ),
]


class SensitiveDataFormatter(logging.Formatter):
    """Formatter that masks credentials in the rendered message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for pattern, replacement in SENSITIVE_PATTERNS:
            message = pattern.sub(replacement, message)
        return message


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = SensitiveDataFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(path),
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # The data client logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
