# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from .base_model import BaseConfigModel, ConfigBase
from .loader import ConfigLoader
from .wrapper import ConfigManager


__all__ = [
    "BaseConfigModel",
    "ConfigBase",
    "ConfigLoader",
    "ConfigManager",
]
