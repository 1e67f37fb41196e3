# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import functools
import logging

from string.templatelib import Interpolation, Template
from typing import Any, Literal, override

from .loggable_protocol import LoggableProtocol


# MARK: t-string messages
def _convert(value: object, conversion: Literal["a", "r", "s"] | None) -> object:
    if conversion == "a":
        return ascii(value)
    elif conversion == "r":
        return repr(value)
    elif conversion == "s":
        return str(value)
    return value


def tstring_as_fstring(template: Template) -> str:
    parts = []
    for item in template:
        match item:
            case str() as s:
                parts.append(s)
            case Interpolation(value, _, conversion, format_spec):
                parts.append(format(_convert(value, conversion), format_spec))
    return "".join(parts)


_logrecord_getMessage = logging.LogRecord.getMessage  # noqa: N816 matches logging.LogRecord.getMessage


@functools.wraps(logging.LogRecord.getMessage)
def _getMessage(self: logging.LogRecord) -> str:  # noqa: N802
    # t-strings are only rendered if a handler actually emits the record
    if isinstance(self.msg, Template):
        return tstring_as_fstring(self.msg)
    return _logrecord_getMessage(self)


logging.LogRecord.getMessage = _getMessage


# MARK: Logger
class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        elif handler == "tty":
            return self.isEnabledForTty(level)
        elif handler == "file":
            return self.isEnabledForFile(level)
        else:
            msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
            raise ValueError(msg)

    def _is_enabled_for_handler(self, handler: logging.Handler | None, level: int) -> bool:
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 matches isEnabledFor
        from .manager import LoggingManager

        return self._is_enabled_for_handler(LoggingManager().ch, level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 matches isEnabledFor
        from .manager import LoggingManager

        return self._is_enabled_for_handler(LoggingManager().fh, level)


logging.setLoggerClass(Logger)


# MARK: getLogger
_original_getLogger = logging.getLogger  # noqa: N816


def _getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    else:
        logger = _original_getLogger(name)

    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802
    """Return the :class:`Logger` for ``obj``, optionally nested below ``parent``.

    ``obj`` is either the logger name or an object whose class name is used.
    """
    logger = _getLogger(obj, parent=parent, name=name)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    return logger


@functools.wraps(logging.getLogger)
def _logging_getLogger_wrapper(name: str | None = None) -> logging.Logger:  # noqa: N802
    if name is None:
        return logging.root
    return _getLogger(name)


logging.getLogger = _logging_getLogger_wrapper
