# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


class ContentModelError(Exception):
    pass


class IdentityError(ContentModelError, RuntimeError):
    """Raised when the identifier or key of an entity is assigned a second time."""


class OwnershipError(ContentModelError, ValueError):
    """Raised when a group or property type is attached to a second owner.

    Children are exclusively owned. Use ``deep_clone()`` to obtain an unowned copy.
    """


class DuplicateAliasError(ContentModelError, ValueError):
    pass
