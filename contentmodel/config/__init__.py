# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from ..util.config import ConfigManager
from .main import Config, RepositoryConfig, TrackingConfig


# Export configuration wrapper
CFG = ConfigManager(Config)


__all__ = [
    "CFG",
    "Config",
    "RepositoryConfig",
    "TrackingConfig",
]
