"""Logging configuration with Rich formatting.

setup_logging() is called once by the CLI; modules get their loggers from get_logger().
The publisher reports progress through these loggers (info), skipped uploads
(error) and recovery failures (exception, with traceback).
"""

import logging
from typing import Optional
from rich.logging import RichHandler
from .config import get_settings

def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or get_settings().LOG_LEVEL).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)]
    )

    # slack_sdk logs every request at DEBUG
    logging.getLogger("slack_sdk").setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(f"release_announcer.{name}")
