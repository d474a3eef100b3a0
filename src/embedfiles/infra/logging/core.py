from __future__ import annotations

"""
Root logger setup for embedfiles.

Handlers are attached directly to the root logger, so records reach stderr
in the same order as the CLI's own messages. Only handlers created here are
replaced or removed; handlers installed by test harnesses stay untouched.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from embedfiles.infra.logging.config import LoggingConfig

_OWNED_ATTR = "_embedfiles_owned"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the console and file handlers on the root logger.

    A second call is a no-op unless force is set, in which case the previous
    handlers are closed and rebuilt from cfg.

    Args:
        cfg: Logging settings.
        force: Rebuild handlers even if embedfiles already configured them.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if owned_handlers(root) and not force:
        return root

    _release(root)
    root.setLevel(cfg.level_number())

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        _own(root, console, logging.Formatter(cfg.console_fmt))

    if cfg.log_file:
        file_handler = _open_log_file(cfg)
        if file_handler is not None:
            _own(root, file_handler, logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flush, close and detach every handler installed by configure_logging."""
    _release(logging.getLogger())


def owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    """Return the handlers on logger that configure_logging installed."""
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


# -----------------------------------------------------------------------------
# Internals
# -----------------------------------------------------------------------------

def _own(root: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_ATTR, True)
    root.addHandler(handler)


def _release(root: logging.Logger) -> None:
    for handler in owned_handlers(root):
        root.removeHandler(handler)
        handler.flush()
        handler.close()


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """
    Open the rotating log file, or return None if it cannot be opened.

    An unusable log file is reported on stderr; the run continues with
    console logging only.
    """
    path = os.path.abspath(cfg.log_file or "")
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None
