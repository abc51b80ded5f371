"""
depgraph Logging

Thin structured wrapper over the standard logging module. Keyword arguments
passed to a log call become structured context, rendered as ``key=value``
pairs in text mode or as fields in JSON mode.

Usage:
    from depgraph_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Installed component", component="A")
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional

_session_id: ContextVar[Optional[str]] = ContextVar("depgraph_session_id", default=None)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

ROOT_LOGGER_NAME = "depgraph"


def set_session_id(session_id: str) -> None:
    """Attach a session id to every record logged from this context."""
    _session_id.set(session_id)


def get_session_id() -> Optional[str]:
    return _session_id.get()


def clear_session_id() -> None:
    _session_id.set(None)


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context: Dict[str, Any] = getattr(record, "context", {})
        session_id = getattr(record, "session_id", None)
        if session_id:
            context = {"session": session_id, **context}
        if context:
            base += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return base


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        session_id = getattr(record, "session_id", None)
        if session_id:
            payload["session_id"] = session_id
        payload.update(getattr(record, "context", {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _SessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _session_id.get()
        return True


class DepgraphLogger:
    """
    Structured logger.

    Wraps a standard library logger under the ``depgraph`` namespace so that
    configure_logging() controls every depgraph component at once.
    """

    def __init__(self, name: str):
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        self.name = name
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, exc_info=exc_info, extra={"context": context})

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: bool = False, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **context)

    def is_enabled_for(self, level: str) -> bool:
        return self._logger.isEnabledFor(_LEVELS[level.lower()])


def get_logger(name: str) -> DepgraphLogger:
    """Get a structured logger for a module or component name."""
    return DepgraphLogger(name)


def configure_logging(level: str = "info", fmt: str = "text", stream=None) -> None:
    """
    Configure the depgraph logger hierarchy.

    Args:
        level: One of debug, info, warn, warning, error
        fmt: "text" or "json"
        stream: Output stream (defaults to stderr)
    """
    try:
        numeric_level = _LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level}")

    handler = logging.StreamHandler(stream or sys.stderr)
    if fmt == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(_TextFormatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    handler.addFilter(_SessionFilter())

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    root.propagate = False
