# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from reprlib import Repr
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ..logging.config import LoggingConfig
from ..mixins import LoggableMixin


if TYPE_CHECKING:
    import rich.repr


class BaseConfigModel(LoggableMixin, BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def __rich_repr__(self) -> rich.repr.Result:
        for attr, info in type(self).model_fields.items():
            if info.repr is False:
                continue
            yield attr, getattr(self, attr, None)


class ConfigBase(BaseConfigModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    def debug(self) -> None:
        model_dump = None

        # TTY
        if self.log.isEnabledForTty(logging.DEBUG):
            if self.logging.rich:
                from rich import pretty

                pretty.pprint(self, indent_guides=True, expand_all=True)
            else:
                model_dump = self.model_dump()
                self.log.debug(Repr(indent=4).repr(model_dump), extra={"handler": "tty"})

        # File
        if self.log.isEnabledForFile(logging.DEBUG):
            if model_dump is None:
                model_dump = self.model_dump()
            self.log.debug("Configuration: %s", Repr(indent=4).repr(model_dump), extra={"handler": "file"})
