"""
utils/logging_setup.py
----------------------

Central logging configuration for the inflection toolkit.

Goals:
- Provide a single place to configure logging format and level.
- Make it easy to get a structured logger in any module:
      from utils.logging_setup import get_logger
      log = get_logger(__name__)
- Allow overrides via environment variables (see utils/config.py):
      INFLECT_LOG_LEVEL    (e.g. DEBUG, INFO, WARNING, ERROR)
      INFLECT_LOG_FORMAT   ("console" or "json")
      INFLECT_LOG_FILE     (path to a log file; if unset, log to stderr only)

Usage
=====

In your module:

    from utils.logging_setup import get_logger

    log = get_logger(__name__)

    log.info("template_parsed", tags=3)
    log.debug("rule_applied", word="error", result="errors")

In a CLI entrypoint (optional):

    from utils.logging_setup import init_logging

    if __name__ == "__main__":
        init_logging()

Implementation notes
====================

- Events go through `structlog` and end up in the stdlib `logging` handlers,
  so library users can still route them with plain `logging` config.
- `init_logging` is idempotent; calling it multiple times is safe.
- The default level is WARNING so that library use stays quiet; per-word
  rule decisions are logged at DEBUG.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import structlog

from utils.config import LogFormat, get_settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Any]) -> int:
    """
    Map a level name or number to a logging level.
    Defaults to logging.WARNING if unset or invalid.
    """
    if isinstance(level, int):
        return level
    level_name = str(level or "WARNING").upper()
    resolved = getattr(logging, level_name, logging.WARNING)
    return resolved if isinstance(resolved, int) else logging.WARNING


def init_logging(
    level: Optional[Any] = None,
    log_format: Optional[LogFormat] = None,
    filename: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize stdlib logging and the structlog processor chain.

    Args:
        level:
            Logging level (e.g. logging.DEBUG or "DEBUG"). If None, it is read
            from INFLECT_LOG_LEVEL, defaulting to WARNING.
        log_format:
            LogFormat.CONSOLE for human-readable lines, LogFormat.JSON for one
            JSON object per event. If None, read from INFLECT_LOG_FORMAT.
        filename:
            Optional log file, in addition to stderr. If None, read from
            INFLECT_LOG_FILE.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    settings = get_settings()
    resolved_level = _resolve_level(level if level is not None else settings.LOG_LEVEL)
    fmt = log_format or settings.LOG_FORMAT
    filename = filename or settings.LOG_FILE

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if filename:
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))

    logging.basicConfig(
        level=resolved_level,
        format="%(message)s",
        handlers=handlers,
        force=True,  # reset any previous basicConfig
    )

    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt=DEFAULT_DATE_FORMAT),
    ]
    if fmt == LogFormat.JSON:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


def get_logger(name: str) -> Any:
    """
    Get a structlog logger bound to ``name``, ensuring logging is initialized.

    If logging has not been initialized yet, this will initialize it with
    default settings (level from INFLECT_LOG_LEVEL, stderr output only).

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
