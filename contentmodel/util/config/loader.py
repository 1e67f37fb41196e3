# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


import pathlib

from typing import Any

import yaml

from ..helpers import script_info
from ..logging.manager import LoggingManager
from ..mixins import LoggableMixin
from .base_model import ConfigBase
from .yaml_loader import IncludeLoader


class ConfigLoader[C: ConfigBase](LoggableMixin):
    """Validate configuration data (a dict, a YAML string or a YAML file) into ``config_class``."""

    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self.config: C | None = None
        self.path: pathlib.Path | None = None

    def open(self, path: pathlib.Path | str) -> C:
        path = pathlib.Path(path)
        if not path.is_file():
            msg = f"Configuration file not found: {path}"
            raise FileNotFoundError(msg)
        self.path = path

        with path.open(encoding="UTF-8") as f:
            data = yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        return self.load(data if data is not None else {})

    def load(self, data: dict[str, Any] | str) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        if isinstance(data, str):
            data = yaml.load(data, IncludeLoader) or {}  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        if not isinstance(data, dict):
            msg = f"Invalid configuration format. Expected a dictionary, got {type(data).__name__}"
            raise TypeError(msg)

        self.config = self.config_class.model_validate(data)

        self._init_logging_manager()

        self.log.debug(t"Configuration loaded from {self.path or 'data'}")
        if not script_info.is_unit_test():
            self.config.debug()

        return self.config

    def _init_logging_manager(self) -> None:
        assert self.config is not None

        # Logging can only be configured once per process, the first configuration wins
        manager = LoggingManager()
        if manager.initialized:
            return
        manager.initialize(self.config.logging)
