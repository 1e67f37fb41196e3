# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Content-type object model with transitive change tracking.

The public surface is re-exported here; see :mod:`contentmodel.models` for the entity graph and
:mod:`contentmodel.persistence` for the reference persistence collaborator.
"""

from .errors import ContentModelError, DuplicateAliasError, IdentityError, OwnershipError
from .models import (
    ContentType,
    ContentTypeBase,
    ContentTypeField,
    DirtyTracker,
    Entity,
    EntityField,
    PropertyGroup,
    PropertyGroupField,
    PropertyType,
    PropertyTypeField,
    Template,
    TemplateProtocol,
)
from .persistence import ContentTypeRepository, IncrementingIdFactory


__all__ = [
    "ContentModelError",
    "ContentType",
    "ContentTypeBase",
    "ContentTypeField",
    "ContentTypeRepository",
    "DirtyTracker",
    "DuplicateAliasError",
    "Entity",
    "EntityField",
    "IdentityError",
    "IncrementingIdFactory",
    "OwnershipError",
    "PropertyGroup",
    "PropertyGroupField",
    "PropertyType",
    "PropertyTypeField",
    "Template",
    "TemplateProtocol",
]
