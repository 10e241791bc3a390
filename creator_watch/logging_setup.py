"""Unified logging setup for Creator Watch."""

import logging
from pathlib import Path

from creator_watch import config


def setup_logging(
    level: int = logging.INFO,
    format_string: str = "%(asctime)s %(levelname)s %(name)s: %(message)s",
    log_dir: str | Path | None = None,
) -> None:
    """
    Configure root logging: one file (logs/app.log) plus console, format timestamp level module: message.
    httpx is held at WARNING because its request lines carry the api-key query param.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        log_path = Path(log_dir or config.LOG_DIR)
        log_path.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path / config.LOG_FILE, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(format_string))
        root.addHandler(fh)
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(format_string))
        root.addHandler(sh)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return module logger (call after setup_logging for consistent config)."""
    return logging.getLogger(name)
