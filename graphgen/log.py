"""Logging setup shared by scripts that drive the generator."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import settings


def setup_logging(logdir: str | Path | None = None, level: int = logging.INFO) -> logging.Logger:
    """Configure root logging and return the package logger (used by run_generator.py).

    If ``logdir`` is given, a ``graphgen.log`` file handler is attached too.
    """
    logging.basicConfig(level=level, format=settings.LOG_FORMAT)
    logger = logging.getLogger(settings.LOG_NAME)

    if logdir is not None:
        path = Path(logdir)
        path.mkdir(parents=True, exist_ok=True)
        log_file = (path / "graphgen.log").resolve()
        # не вешаем второй хендлер на тот же файл при повторном вызове
        for h in logger.handlers:
            if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file:
                return logger
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        logger.addHandler(fh)

    return logger
