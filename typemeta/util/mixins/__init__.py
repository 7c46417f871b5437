# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


# Import mixins
from .loggable import LoggableMixin, LoggableProtocol


__all__ = [
    "LoggableMixin",
    "LoggableProtocol",
]
