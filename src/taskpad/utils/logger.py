"""Application-wide logger writing to platformdirs user_log_dir.

All taskpad logging goes to one rotating file. Modules log through
children of the ``taskpad`` logger, either ``logging.getLogger(__name__)``
or ``get_logger(__name__)``; records from both reach the same handler
once ``get_logger`` has run. The CLI entry points call it first.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "taskpad"
_LOG_FILE = "taskpad.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _setup() -> logging.Logger:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children.

    Args:
        name: Dotted module name such as ``taskpad.commands.tasks``. The
            ``taskpad.`` prefix is optional; other names are nested under it.

    Returns:
        The ``taskpad`` logger when *name* is None, else its child
    """
    global _logger
    if _logger is None:
        _logger = _setup()
    if not name or name == _APP_NAME:
        return _logger
    return _logger.getChild(name.removeprefix(f"{_APP_NAME}."))
