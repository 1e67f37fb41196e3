# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, override

from pydantic import Field

from .entity import Entity, EntityCollection, EntityField
from .property_type import PropertyType, PropertyTypeCollection


if TYPE_CHECKING:
    from .tracking.protocols import FieldName


class PropertyGroupField(StrEnum):
    NAME = "name"
    SORT_ORDER = "sort_order"
    PROPERTY_TYPES = "property_types"


class PropertyGroup(Entity):
    """A named, ordered group of property types (a "tab").

    A group is dirty when its own fields changed or when any of its property types is dirty. Resetting a
    group only clears its own flags: the owner of the group resets the members explicitly.
    """

    FIELD_ENUMS: ClassVar[tuple[type[StrEnum], ...]] = (EntityField, PropertyGroupField)
    CLONE_EXCLUDED_FIELDS: ClassVar[frozenset[str]] = Entity.CLONE_EXCLUDED_FIELDS | {PropertyGroupField.PROPERTY_TYPES}

    name: str = Field(min_length=1, description="Name of the group, unique within its content type.")
    sort_order: int = Field(default=0)
    property_types: PropertyTypeCollection = Field(default_factory=PropertyTypeCollection, description="Property types in this group, in display order.")

    @property
    @override
    def label(self) -> str:
        return self.name

    # MARK: Change tracking
    @override
    def is_dirty(self) -> bool:
        return super().is_dirty() or any(property_type.is_dirty() for property_type in self.property_types)

    @override
    def is_property_dirty(self, field: FieldName) -> bool:
        if super().is_property_dirty(field):
            return True
        return any(property_type.alias == field and property_type.is_dirty() for property_type in self.property_types)

    # reset_dirty_properties is inherited unchanged: the group's own flags only

    # MARK: Members
    def add_property_type(self, property_type: PropertyType) -> bool:
        """Append ``property_type``, returning ``False`` if a type with the same alias is already present."""
        if property_type.alias in self.property_types:
            return False
        self.property_types.append(property_type)
        return True

    def remove_property_type(self, alias: str) -> bool:
        return self.property_types.remove_key(alias)

    def get_property_type(self, alias: str) -> PropertyType | None:
        return self.property_types.get(alias)

    # MARK: Cloning
    @override
    def _clone_fields(self) -> dict[str, Any]:
        fields = super()._clone_fields()
        fields["property_types"] = [property_type.deep_clone() for property_type in self.property_types]
        return fields


class PropertyGroupCollection(EntityCollection[PropertyGroup]):
    ITEM_TYPE = PropertyGroup
    KEY_ATTRIBUTE = "name"
