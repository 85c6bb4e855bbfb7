"""Structlog configuration: JSON log file plus colored console output."""

import logging
import logging.handlers
import os
from dataclasses import dataclass
from pathlib import Path

import structlog
from structlog.typing import Processor

from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

DEFAULT_LOG_FILE = "./logs/event-review-service.log"


@dataclass(frozen=True)
class LoggingSettings:
    """Logging options read from the environment.

    - LOG_FILE_PATH: JSON log file (default: ./logs/event-review-service.log)
    - LOG_LEVEL: level name (default: INFO)
    - LOG_MAX_BYTES: rotate after this many bytes (default: 50MB)
    - LOG_BACKUP_COUNT: rotated files to keep (default: 20)
    """

    file_path: str = DEFAULT_LOG_FILE
    level: str = "INFO"
    max_bytes: int = 50 * 1024 * 1024
    backup_count: int = 20

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        return cls(
            file_path=os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE),
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            max_bytes=int(os.getenv("LOG_MAX_BYTES", str(cls.max_bytes))),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", str(cls.backup_count))),
        )

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level, logging.INFO)


def _formatter(
    renderer: Processor, *, with_metadata: bool
) -> structlog.stdlib.ProcessorFormatter:
    # foreign_pre_chain enriches records from libraries that log through stdlib
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]
    if with_metadata:
        pre_chain += [add_service_context, add_process_info]
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer, foreign_pre_chain=pre_chain
    )


def setup_logging(options: LoggingSettings | None = None) -> None:
    """Route structlog and stdlib logging to a JSON file and the console.

    The file receives one JSON object per line with request, service and
    process metadata; the console gets a colored one-line summary.

    Args:
        options: Logging options; read from the environment when omitted
    """
    options = options or LoggingSettings.from_env()
    Path(options.file_path).parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=options.file_path,
        maxBytes=options.max_bytes,
        backupCount=options.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        _formatter(structlog.processors.JSONRenderer(), with_metadata=True)
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_formatter(console_renderer, with_metadata=False))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(options.numeric_level)
    for handler in (file_handler, console_handler):
        handler.setLevel(options.numeric_level)
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_request_context,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=options.file_path,
        log_level=options.level,
        max_bytes=options.max_bytes,
        backup_count=options.backup_count,
    )
