# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from collections.abc import Callable
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable


type FieldName = str | StrEnum

#: Called with the mutated object and the name of the field that changed.
type ChangeObserver = Callable[[Any, str], None]


@runtime_checkable
class DirtyTrackingProtocol(Protocol):
    def is_dirty(self) -> bool: ...

    def is_property_dirty(self, field: FieldName) -> bool: ...

    def reset_dirty_properties(self) -> None: ...
