"""Lightweight logging helper shared by the API, services and scripts."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("pms")


def _coerce(parts: tuple[object, ...]) -> str:
    rendered = " ".join(str(part) for part in parts if part is not None)
    return rendered.strip()


def _emit(level: int, parts: tuple[object, ...], metadata: dict[str, Any]) -> None:
    message = _coerce(parts)
    if metadata:
        message = f"{message} | {metadata}"

    if not _LOGGER.handlers:
        logging.basicConfig(level=logging.INFO)

    _LOGGER.log(level, message)


def log(*parts: object, **metadata: Any) -> None:
    """
    Emit an info-level log message.

    Keyword arguments such as ``collection`` or ``task_id`` are appended to the
    message so call sites can attach context without formatting it themselves.
    """

    _emit(logging.INFO, parts, metadata)


def log_warning(*parts: object, **metadata: Any) -> None:
    """Same as :func:`log` at warning level."""

    _emit(logging.WARNING, parts, metadata)


def log_error(*parts: object, **metadata: Any) -> None:
    """Same as :func:`log` at error level."""

    _emit(logging.ERROR, parts, metadata)


__all__ = ["log", "log_warning", "log_error"]
