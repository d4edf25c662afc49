"""
Logging setup for the AI Tools API, driven by ``Settings``.

``LOG_LEVEL`` selects the root level and ``LOG_FILE``, when set, adds a
file next to the console output.  ``run.py`` starts uvicorn with
``log_config=None`` so its ``uvicorn.*`` loggers propagate here and
share the service's format instead of installing their own handlers.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(cfg: Settings) -> None:
    """Install the service handlers on the root logger.

    Does nothing when the root logger already has handlers, which is
    the case under pytest and when ``create_app`` runs more than once.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(resolve_level(cfg.log_level))
    for handler in build_handlers(cfg.log_file):
        root.addHandler(handler)
