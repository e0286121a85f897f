"""
Logging setup for the CI/CD Demo API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from ``Settings``.  Service modules log record creation,
rejected payloads and resets through ``logging.getLogger(__name__)``;
the exception handlers log unexpected errors with their traceback.
All of it reaches the root logger configured here.

Tests and embedding code build several applications per process, so
only the first call attaches handlers.  uvicorn's own loggers keep
their handlers; ``LOG_LEVEL`` is also passed to uvicorn by the entry
point.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names mean INFO."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Configure ``logger`` (the root logger by default) for the service.

    Attaches a console handler and, when ``logfile`` is given, a
    UTF-8 file handler appending to it.  Both use ``LOG_FORMAT``.

    Returns ``True`` when handlers were attached and ``False`` when
    the logger already had handlers and was left untouched.
    """
    root = logger if logger is not None else logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
