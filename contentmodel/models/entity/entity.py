# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import copy
import datetime
import uuid
import weakref

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ...config import CFG
from ...errors import IdentityError, OwnershipError
from ...util.helpers import script_info
from ...util.mixins import LoggableMixin
from ..tracking import DirtyTracker


if TYPE_CHECKING:
    from ..tracking.protocols import ChangeObserver, FieldName


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(tz=datetime.UTC)


class EntityField(StrEnum):
    ID = "id"
    KEY = "key"
    CREATE_DATE = "create_date"
    UPDATE_DATE = "update_date"
    VERSION = "version"


class Entity(LoggableMixin, BaseModel):
    """Base of every entity in the content model.

    Carries the identity assigned by the persistence layer (``id`` and ``key``), the creation and
    modification timestamps, a version token, and the two lifecycle hooks fired when the entity is saved:
    :meth:`adding_entity` on the first save and :meth:`updating_entity` on every later one.

    Change tracking is delegated to an embedded :class:`~contentmodel.models.tracking.DirtyTracker`.
    Assigning any model field records the field name as dirty after the value is stored, so each field is
    its own change notification.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    #: Every model field must be named by exactly one of these enums
    FIELD_ENUMS: ClassVar[tuple[type[StrEnum], ...]] = (EntityField,)

    #: Fields that may be assigned once and never again
    IDENTITY_FIELDS: ClassVar[frozenset[str]] = frozenset((EntityField.ID, EntityField.KEY))

    #: Fields reset by deep_clone()
    CLONE_EXCLUDED_FIELDS: ClassVar[frozenset[str]] = frozenset(EntityField)

    id: int | None = Field(default=None, ge=0, description="Numeric identifier, supplied by the persistence layer.")
    key: uuid.UUID | None = Field(default=None, description="Globally unique key, assigned on first save.")
    create_date: datetime.datetime | None = Field(default=None, description="Time of the first save.")
    update_date: datetime.datetime | None = Field(default=None, description="Time of the latest save.")
    version: uuid.UUID | None = Field(default=None, description="Opaque token regenerated on every save.")

    _tracker: DirtyTracker = PrivateAttr()
    _persisted: bool = PrivateAttr(default=False)
    _parent_ref: weakref.ref[Entity] | None = PrivateAttr(default=None)

    # MARK: Subclassing
    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        if script_info.enable_extra_sanity_checks():
            missing = set(cls.model_fields) - cls.tracked_field_names()
            if missing:
                msg = f"{cls.__name__} fields {sorted(missing)} are not named by any of {[e.__name__ for e in cls.FIELD_ENUMS]}"
                raise TypeError(msg)

    @classmethod
    def tracked_field_names(cls) -> frozenset[str]:
        return frozenset(str(member) for enum in cls.FIELD_ENUMS for member in enum)

    @override
    def model_post_init(self, context: Any) -> None:
        super().model_post_init(context)
        self._tracker = DirtyTracker(self, log_changes=CFG.tracking.log_changes)

        from .collection import EntityCollection

        for name in type(self).model_fields:
            if isinstance(value := getattr(self, name), EntityCollection):
                value.bind(self, name)

    # MARK: Naming
    @property
    def instance_name(self) -> str:
        label = self.label
        return f"{type(self).__name__}({label})" if label is not None else type(self).__name__

    @property
    def label(self) -> str | None:
        return str(self.id) if self.id is not None else None

    @override
    def __str__(self) -> str:
        return self.instance_name

    @override
    def __repr__(self) -> str:
        return f"<{self.instance_name}>"

    @override
    def __eq__(self, other: object) -> bool:
        # Entities are equal if they are the same object or the same persisted row
        if self is other:
            return True
        if type(self) is not type(other) or not isinstance(other, Entity):
            return False
        return self.id is not None and self.id == other.id

    # MARK: Field assignment
    @override
    def __setattr__(self, name: str, value: Any) -> None:
        cls = type(self)
        if name not in cls.model_fields:
            super().__setattr__(name, value)
            return

        previous = getattr(self, name)
        if name in cls.IDENTITY_FIELDS and previous is not None:
            msg = f"{self!r}: '{name}' is already assigned ({previous}) and cannot be changed"
            raise IdentityError(msg)

        super().__setattr__(name, value)

        from .collection import EntityCollection

        current = getattr(self, name)
        if current is not previous:
            if isinstance(current, EntityCollection):
                try:
                    current.check_bind(self)
                except OwnershipError:
                    # Restore the previous collection, which is still bound to this entity
                    super().__setattr__(name, previous)
                    raise
            if isinstance(previous, EntityCollection):
                previous.unbind()
            if isinstance(current, EntityCollection):
                current.bind(self, name)

        self.set_dirty(name)

    # MARK: Change tracking
    def set_dirty(self, field: FieldName) -> None:
        self._tracker.set_dirty(field)

    def is_property_dirty(self, field: FieldName) -> bool:
        return self._tracker.is_property_dirty(field)

    def is_dirty(self) -> bool:
        return self._tracker.is_dirty()

    def reset_dirty_properties(self) -> None:
        """Clear the dirty flags of this entity.

        Resetting the flags of an entity that was never saved can prevent a persistence layer that saves
        only dirty entities from storing it.
        """
        self._tracker.reset()

    @property
    def dirty_properties(self) -> frozenset[str]:
        return self._tracker.dirty_properties

    def subscribe(self, observer: ChangeObserver) -> None:
        """Call ``observer(entity, field_name)`` on every change of this entity's own fields."""
        self._tracker.subscribe(observer)

    def unsubscribe(self, observer: ChangeObserver) -> bool:
        return self._tracker.unsubscribe(observer)

    # MARK: Identity
    @property
    def has_identity(self) -> bool:
        return self.id is not None

    @property
    def persisted(self) -> bool:
        """Whether :meth:`adding_entity` has run for this entity."""
        return self._persisted

    def assign_identity(self, entity_id: int) -> None:
        """Store the numeric identifier chosen by the persistence layer. May only be called once."""
        self.id = entity_id

    # MARK: Lifecycle
    def adding_entity(self) -> None:
        """Called by the persistence layer when the entity is saved for the first time."""
        if self._persisted:
            self.log.debug(t"{self!r} is already persisted, handling insert as an update")
            self.updating_entity()
            return

        now = utc_now()
        self.create_date = now
        self.update_date = now
        self.version = uuid.uuid4()
        self._persisted = True
        self.log.debug(t"Inserted {self!r}")

    def updating_entity(self) -> None:
        """Called by the persistence layer on every save after the first."""
        self.update_date = utc_now()
        self.version = uuid.uuid4()
        self.log.debug(t"Updated {self!r} to version {self.version}")

    # MARK: Ownership
    @property
    def instance_parent(self) -> Entity | None:
        return self._parent_ref() if self._parent_ref is not None else None

    def _attach(self, parent: Entity) -> None:
        current = self.instance_parent
        if current is parent:
            return
        if current is not None:
            msg = f"{self!r} already belongs to {current!r}; use deep_clone() to add a copy to {parent!r}"
            raise OwnershipError(msg)
        self._parent_ref = weakref.ref(parent)
        self._reset_log_cache()

    def _detach(self) -> None:
        self._parent_ref = None
        self._reset_log_cache()

    # MARK: Cloning
    def _clone_fields(self) -> dict[str, Any]:
        excluded = type(self).CLONE_EXCLUDED_FIELDS
        return {name: copy.deepcopy(getattr(self, name)) for name in type(self).model_fields if name not in excluded}

    def deep_clone(self) -> Self:
        """Return a transient, unowned and clean copy of this entity. Observers are not copied."""
        return type(self)(**self._clone_fields())
