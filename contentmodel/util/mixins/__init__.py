# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from .loggable import LoggableMixin, LoggableProtocol, NamedProtocol


__all__ = [
    "LoggableMixin",
    "LoggableProtocol",
    "NamedProtocol",
]
