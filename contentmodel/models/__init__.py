# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .content_type import ContentType, ContentTypeField
from .content_type_base import GENERIC_PROPERTIES_GROUP, ContentTypeBase, ContentTypeBaseField
from .entity import Entity, EntityCollection, EntityField
from .property_group import PropertyGroup, PropertyGroupCollection, PropertyGroupField
from .property_type import PropertyType, PropertyTypeCollection, PropertyTypeField
from .template import Template, TemplateProtocol
from .tracking import ChangeObserver, DirtyTracker, DirtyTrackingProtocol


__all__ = [
    "GENERIC_PROPERTIES_GROUP",
    "ChangeObserver",
    "ContentType",
    "ContentTypeBase",
    "ContentTypeBaseField",
    "ContentTypeField",
    "DirtyTracker",
    "DirtyTrackingProtocol",
    "Entity",
    "EntityCollection",
    "EntityField",
    "PropertyGroup",
    "PropertyGroupCollection",
    "PropertyGroupField",
    "PropertyType",
    "PropertyTypeCollection",
    "PropertyTypeField",
    "Template",
    "TemplateProtocol",
]
