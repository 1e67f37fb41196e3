# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Process-wide logging configuration.

Configures the file and TTY handlers, per-logger levels and the uncaught exception hook.
"""

import logging
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .handlers import ConditionalFormatter, HandlerFilter, handle_exception


if TYPE_CHECKING:
    from .levels import LoggingLevel


LOG_FILE_NAME: str = f"{script_info.get_script_name()}.log"


class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.fh = None
            instance.ch = None
        return typing_cast("Self", instance)

    def __init__(self) -> None:
        pass

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / LOG_FILE_NAME

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_exception_handler()
        self._configure_custom_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(max(self.config.levels.root.value, logging.NOTSET))

    def _configure_file_handler(self) -> None:
        self.fh = None
        if not self.config.levels.file.enabled:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures records itself
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def _configure_exception_handler(self) -> None:
        if script_info.is_unit_test():
            return

        if self.config.rich:
            from rich.traceback import install

            install(extra_lines=1, code_width=160, width=200, word_wrap=False)
        else:
            sys.excepthook = handle_exception

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Loggers with an explicit level are left alone
        if logger.level != logging.NOTSET:
            return

        # The most specific (longest) matching custom pattern wins
        level: LoggingLevel = self.config.levels.default
        match_len = 0

        for pattern, custom in self.config.levels.custom.items():
            if (match := pattern.match(logger.name)) is not None and len(match.group(0)) > match_len:
                level = custom
                match_len = len(match.group(0))

        if level == logging.NOTSET:
            return

        # OFF silences the logger entirely
        logger.setLevel(level.value if level.enabled else logging.CRITICAL + 1)

    def _configure_custom_logger_levels(self) -> None:
        for logger_name in tuple(logging.root.manager.loggerDict):
            logger = logging.getLogger(logger_name)
            if isinstance(logger, logging.Logger):
                self.apply_logging_level(logger)

    if script_info.is_unit_test():

        def reset(self) -> None:
            """Undo :meth:`initialize` so tests can configure logging again."""
            for handler in (self.fh, self.ch):
                if handler is not None:
                    logging.root.removeHandler(handler)
                    handler.close()
            self.fh = None
            self.ch = None
            self.initialized = False
