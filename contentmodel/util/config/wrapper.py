# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from typing import TYPE_CHECKING, Any

from ..helpers import script_info
from .loader import ConfigLoader


if TYPE_CHECKING:
    import pathlib

    from .base_model import ConfigBase


class ConfigManager[C: ConfigBase]:
    """Holds the process-wide configuration.

    Attribute access is forwarded to the loaded configuration. Until something is loaded, the defaults of
    ``config_class`` are used so library code can always read its settings.
    """

    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self.config: C | None = None

    @property
    def loaded(self) -> bool:
        return self.config is not None

    def open(self, path: pathlib.Path | str) -> C:
        self.config = ConfigLoader(self.config_class).open(path)
        return self.config

    def load(self, config: str | dict[str, Any] | C) -> C:
        if isinstance(config, self.config_class):
            self.config = config
        elif isinstance(config, (str, dict)):
            self.config = ConfigLoader(self.config_class).load(config)
        else:
            msg = f"Expected {self.config_class.__name__}, str or dict, got {type(config).__name__}"
            raise TypeError(msg)
        return self.config

    def get(self) -> C:
        if self.config is None:
            self.config = self.config_class()
        return self.config

    def reset(self) -> None:
        if not script_info.is_unit_test():
            msg = "Cannot reset configuration outside of unit tests"
            raise RuntimeError(msg)
        self.config = None

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.get(), name)
