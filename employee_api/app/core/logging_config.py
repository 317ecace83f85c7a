"""
Logging configuration for the application.

``setup_logging`` installs a console handler and, when ``LOG_FILE`` is
set, a file handler on the root logger.  Handlers installed here are
named, so repeated calls (``create_app`` runs on every import of the
app in tests) do not duplicate them and do not disturb handlers added
by other tools such as pytest.  Uvicorn's own loggers are aligned to
the same level so that ``LOG_LEVEL=WARNING`` also silences the access
log.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import PROJECT_ROOT

CONSOLE_HANDLER_NAME = "employee_api.console"
FILE_HANDLER_NAME = "employee_api.file"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_path(logfile: str) -> Path:
    """Resolve ``logfile`` against the project root unless it is absolute."""
    path = Path(logfile)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path.resolve()


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and uvicorn's loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Log file path, relative paths being taken from the project
        root.  Missing parent directories are created.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and FILE_HANDLER_NAME not in installed:
        log_path = resolve_log_path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
