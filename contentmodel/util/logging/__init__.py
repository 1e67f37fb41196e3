# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .loggable_protocol import LoggableProtocol
from .logger import Logger, getLogger


__all__ = [
    "LoggableProtocol",
    "Logger",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "getLogger",
]
