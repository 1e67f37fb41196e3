# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Per-object change tracking.

A :class:`DirtyTracker` is embedded in every entity. It records which fields changed since construction or the
last reset, and notifies observers on every change:

>>> tracker = DirtyTracker()
>>> seen = []
>>> tracker.subscribe(lambda owner, field: seen.append(field))
>>> tracker.set_dirty("name")
>>> tracker.set_dirty("name")
>>> tracker.is_dirty(), tracker.is_property_dirty("name"), seen
(True, True, ['name', 'name'])
>>> tracker.reset()
>>> tracker.is_dirty()
False
"""

import weakref

from typing import TYPE_CHECKING, Any, override

from ...util.mixins import LoggableMixin


if TYPE_CHECKING:
    from .protocols import ChangeObserver, FieldName


def field_name(field: FieldName) -> str:
    # StrEnum members compare equal to their value, but are stored as plain strings
    return str(field)


class DirtyTracker(LoggableMixin):
    def __init__(self, owner: Any = None, *, log_changes: bool = False) -> None:
        self._dirty: set[str] = set()
        self._observers: list[ChangeObserver] = []
        self._owner_ref: weakref.ref[Any] | None = weakref.ref(owner) if owner is not None else None
        self.log_changes = log_changes

    @property
    def owner(self) -> Any:
        return self._owner_ref() if self._owner_ref is not None else None

    # MARK: Dirty flags
    def set_dirty(self, field: FieldName) -> None:
        name = field_name(field)
        self._dirty.add(name)

        owner = self.owner
        if self.log_changes:
            self.log.debug(t"{owner!r}: '{name}' changed")

        for observer in tuple(self._observers):
            observer(owner, name)

    def is_property_dirty(self, field: FieldName) -> bool:
        return field_name(field) in self._dirty

    def is_dirty(self) -> bool:
        return bool(self._dirty)

    def reset(self) -> None:
        self._dirty.clear()

    @property
    def dirty_properties(self) -> frozenset[str]:
        return frozenset(self._dirty)

    # MARK: Observers
    def subscribe(self, observer: ChangeObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: ChangeObserver) -> bool:
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    @property
    def observers(self) -> tuple[ChangeObserver, ...]:
        return tuple(self._observers)

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} dirty={sorted(self._dirty)}>"
