# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Reference persistence collaborator: assigns identities and drives the entity lifecycle hooks in memory."""

from .id_factory import IncrementingIdFactory
from .repository import ContentTypeRepository


__all__ = [
    "ContentTypeRepository",
    "IncrementingIdFactory",
]
