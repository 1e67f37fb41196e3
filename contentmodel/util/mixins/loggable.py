# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Protocol, runtime_checkable

from ..helpers.descriptors import classinstancemethod, classinstanceproperty
from ..logging import LoggableProtocol, Logger, getLogger


@runtime_checkable
class NamedProtocol(Protocol):
    @property
    def instance_name(self) -> str | None: ...


@runtime_checkable
class ParentedProtocol(Protocol):
    @property
    def instance_parent(self) -> object | None: ...


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a ``.log`` property usable on both the class and its instances. Instances that expose an
    ``instance_name`` log under that name, and instances that expose a loggable ``instance_parent`` log
    as a child of the parent's logger, so a property type logs as ``ContentType(page).PropertyGroup(Content).PropertyType(title)``.
    """

    # MARK: Logging
    @classinstanceproperty
    def log(self) -> Logger:
        """Return a logger for the current object (or class)."""
        # Own namespace only, classes cache their own logger
        log: Logger | None = self.__dict__.get("__log")
        if log is None:
            parent = self.instance_parent if isinstance(self, ParentedProtocol) and not isinstance(self, type) else None
            if not isinstance(parent, LoggableProtocol):
                parent = None
            log = getLogger(self.__log_name__, parent=parent)
            setattr(self, "__log", log)
        return log

    @classinstancemethod
    def _reset_log_cache(self) -> None:
        setattr(self, "__log", None)

    @classinstanceproperty
    def __default_log_name__(self) -> str:
        if isinstance(self, type):
            return f"T({self.__name__})"
        return type(self).__name__

    @classinstanceproperty
    def __log_name__(self) -> str:
        if not isinstance(self, type) and isinstance(self, NamedProtocol):
            name = self.instance_name
            if name is not None:
                return name
        return self.__default_log_name__
