# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from pydantic import Field

from ..config import BaseConfigModel
from ..helpers.frozendict import FrozenDict
from .levels import OFF, LoggingLevel


class LoggingLevels(BaseConfigModel):
    tty: LoggingLevel = Field(default=logging.NOTSET, description="Log level for TTY output, or 'OFF' to disable it")
    root: LoggingLevel = Field(default=logging.NOTSET, description="Log level for the root log handler")
    default: LoggingLevel = Field(default=logging.INFO, description="Default log level for loggers not explicitly specified in 'custom'")

    custom: FrozenDict[str, LoggingLevel] = Field(
        default_factory=dict,
        description="Custom logging levels, where the key is a regex matched (case-insensitively) against the logger name, and the value is the logging level.",
    )

    @property
    def tty_enabled(self) -> bool:
        return self.tty != OFF


class LoggingConfig(BaseConfigModel):
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
