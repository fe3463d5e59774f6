"""
Logging configuration for the Streamlit entry points.

Modules log through ``logging.getLogger(__name__)``; this only installs
the handler and level once per process.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"

_logging_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR). Falls back to
            Settings.log_level when not given.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        from config.settings import get_settings
        level = get_settings().log_level

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    log_format = LOG_FORMAT_DEBUG if numeric_level == logging.DEBUG else LOG_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _logging_configured = True
