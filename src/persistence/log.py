"""Log collaborator backed by stdlib logging with a bounded line buffer."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Literal

LogLevel = Literal["info", "warn", "error"]

BUFFER_SIZE = 30
PREFIX = "[cache-persist]"

logger = logging.getLogger(__name__)


class PersistLog:
    """Keeps the last ``BUFFER_SIZE`` lines and forwards them to ``logging``.

    Info lines reach the logger at INFO only when ``debug`` is on, otherwise
    at DEBUG. Warnings and errors are always forwarded at their own level.
    """

    def __init__(
        self,
        *,
        debug: bool = False,
        buffer_size: int = BUFFER_SIZE,
        target: logging.Logger | None = None,
    ) -> None:
        self._debug = debug
        self._lines: deque[tuple[LogLevel, str, Any]] = deque(maxlen=buffer_size)
        self._logger = target or logger

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def lines(self) -> list[tuple[LogLevel, str, Any]]:
        return list(self._lines)

    def info(self, message: str, detail: Any = None) -> None:
        self._write("info", message, detail)

    def warn(self, message: str, detail: Any = None) -> None:
        self._write("warn", message, detail)

    def error(self, message: str, detail: Any = None) -> None:
        self._write("error", message, detail)

    def tail(self) -> list[str]:
        return [_format_line(message, detail) for _, message, detail in self._lines]

    def _write(self, level: LogLevel, message: str, detail: Any) -> None:
        self._lines.append((level, message, detail))
        try:
            self._emit(level, message, detail)
        except Exception:  # noqa: BLE001
            # Log sinks never propagate failures to the caller.
            pass

    def _emit(self, level: LogLevel, message: str, detail: Any) -> None:
        text = _format_line(message, detail)
        if level == "error":
            self._logger.error("%s %s", PREFIX, text, exc_info=_exc_info(detail))
        elif level == "warn":
            self._logger.warning("%s %s", PREFIX, text)
        elif self._debug:
            self._logger.info("%s %s", PREFIX, text)
        else:
            self._logger.debug("%s %s", PREFIX, text)


def _format_line(message: str, detail: Any) -> str:
    if detail is None:
        return message
    return f"{message} {detail!r}"


def _exc_info(detail: Any) -> BaseException | None:
    if isinstance(detail, BaseException):
        return detail
    return None


__all__ = ["BUFFER_SIZE", "PersistLog"]
