# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import itertools

from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, override

from pydantic import Field

from .entity import Entity, EntityField
from .property_group import PropertyGroup, PropertyGroupCollection


if TYPE_CHECKING:
    from collections.abc import Iterator

    from .property_type import PropertyType


#: Group receiving property types added without a group name
GENERIC_PROPERTIES_GROUP = "Generic Properties"


class ContentTypeBaseField(StrEnum):
    PARENT_ID = "parent_id"
    ALIAS = "alias"
    NAME = "name"
    DESCRIPTION = "description"
    ICON = "icon"
    THUMBNAIL = "thumbnail"
    SORT_ORDER = "sort_order"
    LEVEL = "level"
    PATH = "path"
    ALLOWED_AS_ROOT = "allowed_as_root"
    IS_CONTAINER = "is_container"
    TRASHED = "trashed"
    ALLOWED_CONTENT_TYPE_IDS = "allowed_content_type_ids"
    PROPERTY_GROUPS = "property_groups"
    CONTENT_TYPE_COMPOSITION = "content_type_composition"


class ContentTypeBase(Entity):
    """A content type definition composed of property groups and, optionally, other content types.

    The property groups are owned by the content type. Composed content types are only referenced: their
    groups and property types are visible through the ``composition_*`` methods but belong to them.
    """

    FIELD_ENUMS: ClassVar[tuple[type[StrEnum], ...]] = (EntityField, ContentTypeBaseField)
    CLONE_EXCLUDED_FIELDS: ClassVar[frozenset[str]] = Entity.CLONE_EXCLUDED_FIELDS | {
        ContentTypeBaseField.PROPERTY_GROUPS,
        ContentTypeBaseField.CONTENT_TYPE_COMPOSITION,
    }

    parent_id: int = Field(frozen=True, description="Identifier of the parent content type, -1 for a root content type.")
    alias: str = Field(min_length=1, description="Unique alias of the content type.")
    name: str | None = Field(default=None)
    description: str | None = Field(default=None)
    icon: str | None = Field(default=None)
    thumbnail: str | None = Field(default=None)
    sort_order: int = Field(default=0)
    level: int = Field(default=0, ge=0)
    path: str | None = Field(default=None, description="Comma separated ids from the root to this content type.")
    allowed_as_root: bool = Field(default=False)
    is_container: bool = Field(default=False)
    trashed: bool = Field(default=False)
    allowed_content_type_ids: tuple[int, ...] = Field(default=(), description="Content types allowed as children.")
    property_groups: PropertyGroupCollection = Field(default_factory=PropertyGroupCollection, description="Owned property groups, in display order.")
    content_type_composition: tuple[ContentTypeBase, ...] = Field(default=(), description="Content types this one is composed of.")

    @property
    @override
    def label(self) -> str:
        return self.alias

    # MARK: Property types
    @property
    def property_types(self) -> tuple[PropertyType, ...]:
        """Flattened, read-only view over the property types of every owned group, in group then member order."""
        return tuple(itertools.chain.from_iterable(group.property_types for group in self.property_groups))

    def property_group_exists(self, name: str) -> bool:
        return name in self.property_groups

    def property_type_exists(self, alias: str) -> bool:
        """Whether a property type with ``alias`` exists in this content type or in any composed one."""
        return any(property_type.alias == alias for property_type in self.composition_property_types())

    def get_property_type(self, alias: str) -> PropertyType | None:
        for property_type in self.property_types:
            if property_type.alias == alias:
                return property_type
        return None

    def add_property_group(self, name: str) -> PropertyGroup | None:
        """Create and append an empty group named ``name``. Returns ``None`` if it already exists."""
        if self.property_group_exists(name):
            return None

        sort_order = max((group.sort_order for group in self.property_groups), default=-1) + 1
        group = PropertyGroup(name=name, sort_order=sort_order)
        self.property_groups.append(group)
        return group

    def remove_property_group(self, name: str) -> bool:
        return self.property_groups.remove_key(name)

    def add_property_type(self, property_type: PropertyType, group_name: str | None = None) -> bool:
        """Add ``property_type`` to the group ``group_name``, creating the group if needed.

        Types added without a group name go to the :data:`GENERIC_PROPERTIES_GROUP` group. Returns ``False``
        if a property type with the same alias already exists in the composition.
        """
        if self.property_type_exists(property_type.alias):
            return False

        name = group_name if group_name is not None else GENERIC_PROPERTIES_GROUP
        group = self.property_groups.get(name) or self.add_property_group(name)
        assert group is not None
        return group.add_property_type(property_type)

    def remove_property_type(self, alias: str) -> bool:
        return any(group.remove_property_type(alias) for group in self.property_groups)

    def move_property_type(self, alias: str, group_name: str) -> bool:
        """Move the owned property type ``alias`` to the end of ``group_name``, creating the group if needed."""
        for group in self.property_groups:
            property_type = group.get_property_type(alias)
            if property_type is None:
                continue
            if group.name == group_name:
                return True

            target = self.property_groups.get(group_name) or self.add_property_group(group_name)
            assert target is not None
            group.remove_property_type(alias)
            target.add_property_type(property_type)
            return True
        return False

    # MARK: Composition
    def add_content_type(self, content_type: ContentTypeBase) -> bool:
        """Compose ``content_type`` into this one.

        Rejected (``False``) when it is this content type, when a content type with the same alias is already
        part of the composition, or when it is itself composed of this content type.
        """
        if content_type is self or content_type.alias == self.alias:
            return False
        if self.content_type_composition_exists(content_type.alias):
            return False
        if content_type.content_type_composition_exists(self.alias):
            return False

        self.content_type_composition = (*self.content_type_composition, content_type)
        return True

    def remove_content_type(self, alias: str) -> bool:
        remaining = tuple(content_type for content_type in self.content_type_composition if content_type.alias != alias)
        if len(remaining) == len(self.content_type_composition):
            return False
        self.content_type_composition = remaining
        return True

    def content_type_composition_exists(self, alias: str) -> bool:
        return any(
            content_type.alias == alias or content_type.content_type_composition_exists(alias) for content_type in self.content_type_composition
        )

    def _iter_composition(self) -> Iterator[ContentTypeBase]:
        # Self first, then each composed type depth-first, visiting every content type once
        seen: list[ContentTypeBase] = []
        stack: list[ContentTypeBase] = [self]
        while stack:
            content_type = stack.pop(0)
            if any(content_type is visited for visited in seen):
                continue
            seen.append(content_type)
            yield content_type
            stack[0:0] = content_type.content_type_composition

    def composition_aliases(self) -> tuple[str, ...]:
        """Aliases of every content type composed into this one, directly or transitively."""
        return tuple(content_type.alias for content_type in self._iter_composition() if content_type is not self)

    def composition_ids(self) -> tuple[int, ...]:
        return tuple(content_type.id for content_type in self._iter_composition() if content_type is not self and content_type.id is not None)

    def composition_property_groups(self) -> tuple[PropertyGroup, ...]:
        return tuple(group for content_type in self._iter_composition() for group in content_type.property_groups)

    def composition_property_types(self) -> tuple[PropertyType, ...]:
        return tuple(property_type for content_type in self._iter_composition() for property_type in content_type.property_types)

    # MARK: Cloning
    @override
    def _clone_fields(self) -> dict[str, Any]:
        fields = super()._clone_fields()
        fields["property_groups"] = [group.deep_clone() for group in self.property_groups]
        # Composed content types are references, not owned
        fields["content_type_composition"] = self.content_type_composition
        return fields
