# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .protocols import ChangeObserver, DirtyTrackingProtocol
from .tracker import DirtyTracker


__all__ = [
    "ChangeObserver",
    "DirtyTracker",
    "DirtyTrackingProtocol",
]
