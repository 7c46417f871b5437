# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

# t-string log messages
from . import tstring

# Logger / getLogger
from .logger import LoggableProtocol, Logger, getLogger


__all__ = [
    "LoggableProtocol",
    "Logger",
    "getLogger",
    "tstring",
]
