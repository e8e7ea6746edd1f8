"""Standard logging setup for applications embedding :mod:`genomic`.

The library itself only creates module loggers; nothing is configured on
import. Call :func:`configure_logging` once at start-up to route those
records to stderr and ``<logs_dir>/genomic.log``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any, Mapping

from .constants import LOG_FILE_NAME
from .settings import Settings, get_settings

__all__ = ["JSONFormatter", "configure_logging"]

logger = logging.getLogger(__name__)

_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


class JSONFormatter(logging.Formatter):
    """Serialise each ``LogRecord`` as one JSON object per line.

    Fields passed through ``extra=`` are merged into the payload, after the
    formatter's default context.
    """

    def __init__(self, *, default_context: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self._default_context = dict(default_context or {})

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info

        payload.update(self._default_context)

        for key, value in record.__dict__.items():
            if key in _RESERVED:
                continue
            payload.setdefault(key, value)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    *,
    settings: Settings | None = None,
    level: int | str | None = None,
    structured: bool | None = None,
    module_levels: Mapping[str, int | str] | None = None,
    stream: IO[str] | None = None,
    context: Mapping[str, Any] | None = None,
    log_file: Path | None = None,
    file_logging: bool = True,
) -> None:
    """Configure the root logger.

    Parameters
    ----------
    settings:
        Settings to read defaults from; :func:`get_settings` when ``None``.
    level:
        Handler level. Defaults to ``settings.log_level``.
    structured:
        Use :class:`JSONFormatter` when ``True``. Defaults to
        ``settings.structured_logging``.
    module_levels:
        ``logger name -> level`` overrides, e.g. ``{"genomic": "DEBUG"}``.
    stream:
        Target of the stream handler; ``sys.stderr`` by default.
    context:
        Extra fields added to every structured record (e.g. ``{"seed": 42}``).
    log_file:
        File receiving a copy of the records (append mode). Defaults to
        ``settings.logs_dir / 'genomic.log'``.
    file_logging:
        Set to ``False`` to skip the file handler entirely.
    """

    settings = settings or get_settings()
    structured = settings.structured_logging if structured is None else structured
    level = settings.log_level if level is None else level
    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    formatter: logging.Formatter
    if structured:
        formatter = JSONFormatter(default_context=context)
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if file_logging:
        file_target = log_file or (settings.logs_dir / LOG_FILE_NAME)
        try:
            file_target.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(file_target, encoding="utf-8")
        except OSError as exc:
            logger.warning("File logging disabled, cannot open %s: %s", file_target, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    if module_levels:
        for logger_name, logger_level in module_levels.items():
            logging.getLogger(logger_name).setLevel(logger_level)
