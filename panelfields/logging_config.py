"""
Logging configuration for panelfields using structlog.

Configures structlog with:
- Pretty console output (human-readable, colored)
- JSON file output (machine-readable, structured)
- Daily log file rotation (UTC)

Library modules only call `structlog.get_logger(__name__)`; applications that
do not configure logging themselves can call setup_logging() once at startup.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

import structlog

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.LINENO
        ]
    ),
]


def setup_logging(
    logs_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
):
    """
    Configure structlog with pretty console and (optionally) JSON file output.

    Args:
        logs_dir: Directory for panelfields.jsonl; no file handler when None
        console_level: Minimum level printed to stdout
        file_level: Minimum level written to the JSON file
    """
    structlog.configure(
        processors=SHARED_PROCESSORS
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(min(console_level, file_level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    root_logger.addHandler(console_handler)

    if logs_dir is None:
        return

    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        filename=logs_dir / "panelfields.jsonl",
        when="midnight",
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding="utf-8",
        utc=True,
    )
    file_handler.suffix = "%Y-%m-%d.jsonl"
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    root_logger.addHandler(file_handler)
