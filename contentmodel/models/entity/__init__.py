# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .collection import EntityCollection
from .entity import Entity, EntityField, utc_now


__all__ = [
    "Entity",
    "EntityCollection",
    "EntityField",
    "utc_now",
]
