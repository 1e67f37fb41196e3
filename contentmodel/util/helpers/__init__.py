# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from . import script_info
from .descriptors import classinstancemethod, classinstanceproperty
from .frozendict import FrozenDict


__all__ = [
    "FrozenDict",
    "classinstancemethod",
    "classinstanceproperty",
    "script_info",
]
