# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import TYPE_CHECKING

from ..config import CFG
from ..errors import DuplicateAliasError
from ..util.mixins import LoggableMixin
from .id_factory import IncrementingIdFactory


if TYPE_CHECKING:
    import uuid

    from collections.abc import Iterator

    from ..models import ContentType, Entity


class ContentTypeRepository(LoggableMixin):
    """In-memory store of content types.

    Saving assigns ids to new entities (the content type, its groups and their property types), fires
    :meth:`~contentmodel.models.Entity.adding_entity` on new entities and
    :meth:`~contentmodel.models.Entity.updating_entity` on dirty persisted ones, then resets the dirty flags of
    the whole graph.
    """

    def __init__(self, id_factory: IncrementingIdFactory | None = None) -> None:
        self.id_factory = id_factory if id_factory is not None else IncrementingIdFactory(CFG.repository.first_id)
        self._content_types: dict[int, ContentType] = {}

    # MARK: Queries
    def get(self, content_type_id: int) -> ContentType | None:
        return self._content_types.get(content_type_id)

    def get_by_key(self, key: uuid.UUID) -> ContentType | None:
        return next((content_type for content_type in self if content_type.key == key), None)

    def get_by_alias(self, alias: str) -> ContentType | None:
        return next((content_type for content_type in self if content_type.alias == alias), None)

    def __len__(self) -> int:
        return len(self._content_types)

    def __iter__(self) -> Iterator[ContentType]:
        return iter(tuple(self._content_types.values()))

    def __contains__(self, content_type: object) -> bool:
        return any(content_type is stored for stored in self._content_types.values())

    # MARK: Saving
    def save(self, content_type: ContentType) -> None:
        existing = self.get_by_alias(content_type.alias)
        if existing is not None and existing is not content_type:
            msg = f"A content type with alias '{content_type.alias}' is already stored as {existing!r}"
            raise DuplicateAliasError(msg)

        if content_type.persisted and not content_type.is_dirty():
            self.log.debug(t"{content_type!r} has no changes, nothing to save")
            return

        self._save_entity(content_type)
        for group in content_type.property_groups:
            self._save_entity(group)
            for property_type in group.property_types:
                self._save_entity(property_type)

        assert content_type.id is not None
        self._content_types[content_type.id] = content_type
        content_type.reset_dirty_properties()

        self.log.info(t"Saved {content_type!r} (version {content_type.version})")

    def _save_entity(self, entity: Entity) -> None:
        if not entity.persisted:
            if not entity.has_identity:
                entity.assign_identity(self.id_factory.next(type(entity).__name__))
            entity.adding_entity()
        elif entity.is_dirty():
            entity.updating_entity()

    def delete(self, content_type: ContentType) -> bool:
        if content_type.id is None or self._content_types.get(content_type.id) is not content_type:
            return False
        del self._content_types[content_type.id]
        self.log.info(t"Deleted {content_type!r}")
        return True
