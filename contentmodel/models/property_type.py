# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from enum import StrEnum
from typing import ClassVar, override

from pydantic import Field

from .entity import Entity, EntityCollection, EntityField


class PropertyTypeField(StrEnum):
    ALIAS = "alias"
    NAME = "name"
    DESCRIPTION = "description"
    DATA_TYPE_ID = "data_type_id"
    MANDATORY = "mandatory"
    SORT_ORDER = "sort_order"
    VALIDATION_REGEXP = "validation_regexp"
    HELP_TEXT = "help_text"


class PropertyType(Entity):
    """A single property definition. Leaf of the content type graph, so its dirtiness is purely local."""

    FIELD_ENUMS: ClassVar[tuple[type[StrEnum], ...]] = (EntityField, PropertyTypeField)

    alias: str = Field(min_length=1, description="Unique alias of the property within its content type.")
    name: str | None = Field(default=None, description="Display name.")
    description: str | None = Field(default=None)
    data_type_id: int | None = Field(default=None, description="Identifier of the data type definition backing the property.")
    mandatory: bool = Field(default=False)
    sort_order: int = Field(default=0)
    validation_regexp: str | None = Field(default=None, description="Regular expression the property value must match.")
    help_text: str | None = Field(default=None)

    @property
    @override
    def label(self) -> str:
        return self.alias


class PropertyTypeCollection(EntityCollection[PropertyType]):
    ITEM_TYPE = PropertyType
    KEY_ATTRIBUTE = "alias"
