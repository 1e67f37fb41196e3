# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import uuid

from enum import StrEnum
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, override

from pydantic import AfterValidator, Field, PrivateAttr

from .content_type_base import ContentTypeBase, ContentTypeBaseField
from .entity import EntityField
from .template import TemplateProtocol, validate_template


if TYPE_CHECKING:
    from .tracking.protocols import FieldName


class ContentTypeField(StrEnum):
    DEFAULT_TEMPLATE_ID = "default_template_id"
    ALLOWED_TEMPLATES = "allowed_templates"


class ContentType(ContentTypeBase):
    """The content type a document is based on.

    Adds the templates a document of this type may be rendered with, and answers the dirty queries for the
    whole graph below it: the content type itself, its property groups and their property types.
    """

    FIELD_ENUMS: ClassVar[tuple[type[StrEnum], ...]] = (EntityField, ContentTypeBaseField, ContentTypeField)
    CLONE_EXCLUDED_FIELDS: ClassVar[frozenset[str]] = ContentTypeBase.CLONE_EXCLUDED_FIELDS | {ContentTypeField.ALLOWED_TEMPLATES}

    allowed_templates: tuple[Annotated[Any, AfterValidator(validate_template)], ...] = Field(
        default=(),
        description="Templates allowed for documents of this type, in order. Uniqueness is not enforced.",
    )

    _default_template_id: int | None = PrivateAttr(default=None)

    # MARK: Templates
    @property
    def default_template_id(self) -> int | None:
        return self._default_template_id

    def _set_default_template_id(self, template_id: int | None) -> None:
        # Package-internal mutator, used by the template helpers and the persistence layer
        self._default_template_id = template_id
        self.set_dirty(ContentTypeField.DEFAULT_TEMPLATE_ID)

    @property
    def default_template(self) -> TemplateProtocol | None:
        """The allowed template whose id is :attr:`default_template_id`, or ``None`` if there is no match."""
        template_id = self.default_template_id
        return next((template for template in self.allowed_templates if template.id == template_id), None)

    def is_allowed_template(self, template: int | str) -> bool:
        """Whether a template with the given id (``int``) or alias (``str``) is allowed."""
        if isinstance(template, str):
            return any(getattr(allowed, "alias", None) == template for allowed in self.allowed_templates)
        return any(allowed.id == template for allowed in self.allowed_templates)

    def set_default_template(self, template: TemplateProtocol | None) -> None:
        """Make ``template`` the default, adding it to the allowed templates first if needed. ``None`` clears it."""
        if template is None:
            self._set_default_template_id(None)
            return

        if not self.is_allowed_template(template.id):
            self.allowed_templates = (*self.allowed_templates, template)
        self._set_default_template_id(template.id)

    def remove_template(self, template: TemplateProtocol) -> bool:
        """Remove ``template`` from the allowed templates, clearing the default if it was the default one."""
        remaining = tuple(allowed for allowed in self.allowed_templates if allowed.id != template.id)
        if len(remaining) == len(self.allowed_templates):
            return False

        if self.default_template_id == template.id:
            self._set_default_template_id(None)
        self.allowed_templates = remaining
        return True

    # MARK: Change tracking
    @override
    def is_property_dirty(self, field: FieldName) -> bool:
        exists_in_entity = super().is_property_dirty(field)

        # A property type may be tracked both at group and type level, so both are consulted
        any_dirty_groups = any(group.is_property_dirty(field) for group in self.property_groups)
        any_dirty_types = any(property_type.is_property_dirty(field) for property_type in self.property_types)

        return exists_in_entity or any_dirty_groups or any_dirty_types

    @override
    def is_dirty(self) -> bool:
        dirty_entity = super().is_dirty()

        # Groups already aggregate their types; the flattened check still runs in case a group does not
        dirty_groups = any(group.is_dirty() for group in self.property_groups)
        dirty_types = any(property_type.is_dirty() for property_type in self.property_types)

        return dirty_entity or dirty_groups or dirty_types

    @override
    def reset_dirty_properties(self) -> None:
        """Reset the flags of this content type, each of its groups and each of their property types.

        Resetting the dirty properties can prevent a persistence layer from saving a new or updated entity.
        """
        super().reset_dirty_properties()

        for group in self.property_groups:
            group.reset_dirty_properties()
            for property_type in group.property_types:
                property_type.reset_dirty_properties()

    # MARK: Lifecycle
    @override
    def adding_entity(self) -> None:
        """Set the creation date and assign a unique key."""
        super().adding_entity()
        if self.key is None:
            self.key = uuid.uuid4()

    @override
    def updating_entity(self) -> None:
        """Set the modification date and a new version."""
        super().updating_entity()

    # MARK: Cloning
    @override
    def _clone_fields(self) -> dict[str, Any]:
        fields = super()._clone_fields()
        # Templates are external references
        fields["allowed_templates"] = self.allowed_templates
        return fields

    @override
    def deep_clone(self) -> ContentType:
        clone = super().deep_clone()
        clone._default_template_id = self._default_template_id  # noqa: SLF001 as this is the same class
        return clone
