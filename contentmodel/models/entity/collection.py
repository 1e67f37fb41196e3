# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import weakref

from collections.abc import Iterable, Iterator, MutableSequence
from typing import TYPE_CHECKING, Any, ClassVar, overload, override

from pydantic_core import CoreSchema, core_schema

from ...errors import DuplicateAliasError, OwnershipError
from ...util.mixins import LoggableMixin


if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

    from .entity import Entity


class EntityCollection[T: Entity](LoggableMixin, MutableSequence[T]):
    """Ordered collection of owned entities, unique by :attr:`KEY_ATTRIBUTE`.

    Once bound to an owner, every structural change (insert, replace, delete) attaches or detaches the
    affected items and marks the owner's field holding this collection as dirty. Changes to the items'
    own fields are tracked by the items themselves.
    """

    ITEM_TYPE: ClassVar[type]
    KEY_ATTRIBUTE: ClassVar[str]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self._owner_ref: weakref.ref[Entity] | None = None
        self._field: str | None = None

        for item in items:
            self._check_insert(item)
            self._items.append(item)

    # MARK: Owner
    @property
    def owner(self) -> Entity | None:
        return self._owner_ref() if self._owner_ref is not None else None

    def check_bind(self, owner: Entity) -> None:
        """Raise :class:`OwnershipError` if this collection or any of its items belongs to an entity other than ``owner``."""
        if (current := self.owner) is not None and current is not owner:
            msg = f"{type(self).__name__} already belongs to {current!r}"
            raise OwnershipError(msg)

        for item in self._items:
            if (parent := item.instance_parent) is not None and parent is not owner:
                msg = f"{item!r} already belongs to {parent!r}; use deep_clone() to add a copy to {owner!r}"
                raise OwnershipError(msg)

    def bind(self, owner: Entity, field: str) -> None:
        # Nothing is attached unless every item can be
        self.check_bind(owner)

        for item in self._items:
            item._attach(owner)  # noqa: SLF001 as ownership is managed by the collection

        self._owner_ref = weakref.ref(owner)
        self._field = field
        self._reset_log_cache()

    def unbind(self) -> None:
        for item in self._items:
            item._detach()  # noqa: SLF001 as ownership is managed by the collection
        self._owner_ref = None
        self._field = None

    def _on_change(self) -> None:
        if (owner := self.owner) is not None and self._field is not None:
            owner.set_dirty(self._field)

    # MARK: Keys
    @classmethod
    def key_of(cls, item: T) -> str:
        return getattr(item, cls.KEY_ATTRIBUTE)

    def keys(self) -> tuple[str, ...]:
        return tuple(self.key_of(item) for item in self._items)

    def get(self, key: str) -> T | None:
        for item in self._items:
            if self.key_of(item) == key:
                return item
        return None

    def remove_key(self, key: str) -> bool:
        for i, item in enumerate(self._items):
            if self.key_of(item) == key:
                del self[i]
                return True
        return False

    def _check_insert(self, item: Any, *, replacing: T | None = None) -> None:
        if not isinstance(item, self.ITEM_TYPE):
            msg = f"{type(self).__name__} only holds {self.ITEM_TYPE.__name__}, got {type(item).__name__}"
            raise TypeError(msg)

        for existing in self._items:
            if existing is replacing:
                continue
            if existing is item:
                msg = f"{item!r} is already in {type(self).__name__}"
                raise DuplicateAliasError(msg)
            if self.key_of(existing) == self.key_of(item):
                msg = f"{type(self).__name__} already contains an item with {self.KEY_ATTRIBUTE} '{self.key_of(item)}'"
                raise DuplicateAliasError(msg)

    # MARK: MutableSequence
    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    @override
    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    @override
    def __setitem__(self, index: int, value: T) -> None:  # pyright: ignore[reportIncompatibleMethodOverride] as slices are not supported
        if isinstance(index, slice):
            msg = "Sliced assignment not supported"
            raise NotImplementedError(msg)

        previous = self._items[index]
        if previous is value:
            return
        self._check_insert(value, replacing=previous)
        if (owner := self.owner) is not None:
            value._attach(owner)  # noqa: SLF001
            previous._detach()  # noqa: SLF001
        self._items[index] = value
        self._on_change()

    @override
    def __delitem__(self, index: int) -> None:  # pyright: ignore[reportIncompatibleMethodOverride] as slices are not supported
        if isinstance(index, slice):
            msg = "Sliced deletion not supported"
            raise NotImplementedError(msg)

        item = self._items.pop(index)
        if self.owner is not None:
            item._detach()  # noqa: SLF001
        self._on_change()

    @override
    def insert(self, index: int, value: T) -> None:
        self._check_insert(value)
        if (owner := self.owner) is not None:
            value._attach(owner)  # noqa: SLF001
        self._items.insert(index, value)
        self._on_change()

    @override
    def __len__(self) -> int:
        return len(self._items)

    @override
    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @override
    def __contains__(self, value: object) -> bool:
        if isinstance(value, str):
            return value in self.keys()
        return any(item is value for item in self._items)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.keys())!r})"

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: type[Any], handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    @classmethod
    def _pydantic_validate(cls, value: Any) -> EntityCollection[T]:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            msg = f"Expected an iterable of {cls.ITEM_TYPE.__name__}, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(value)
