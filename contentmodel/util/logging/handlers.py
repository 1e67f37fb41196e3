# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging
import sys

from typing import TYPE_CHECKING, override


if TYPE_CHECKING:
    from types import TracebackType


class HandlerFilter(logging.Filter):
    """Drop records addressed to another handler via ``extra={'handler': ...}``."""

    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        record_handler = getattr(record, "handler", None)
        return record_handler is None or record_handler == self.handler_name


class ConditionalFormatter(logging.Formatter):
    """Emit the bare message for records logged with ``extra={'simple': True}``."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)


# Logs uncaught exceptions using "logging" object, this way they also show up in the log
def handle_exception(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_traceback: TracebackType | None,
) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))  # noqa: LOG015 as we don't know if logging is properly configured
