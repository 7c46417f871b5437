# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Logging configuration for applications embedding typemeta.

Configures TTY logging, log levels, and custom per-logger levels. The library itself never configures logging on import; an application (or the test suite) calls :meth:`LoggingManager.initialize` once.
"""

import logging
import re
import sys

from typing import Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    ch: logging.Handler | None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.ch = None
        return typing_cast("Self", instance)

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config

        self._configure_root_logger()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(self.config.levels.root)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty_enabled:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(logging.Formatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty)

        # pytest captures records itself
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Do nothing if logger already has an explicit level set
        if logger.level != logging.NOTSET:
            return

        # Apply the most specific matching custom level, or default if none match
        level = self.config.levels.default
        pattern_len = 0

        for pattern, custom_level in self.config.levels.custom.items():
            if (match := re.match(pattern, logger.name, re.IGNORECASE)) is not None and pattern_len < len(match.group(0)):
                level = custom_level
                pattern_len = len(match.group(0))

        if level == logging.NOTSET:
            return

        logger.setLevel(level)

    def _configure_custom_logger_levels(self) -> None:
        # Apply logging levels to existing loggers
        for logger_name in list(logging.root.manager.loggerDict):
            logger = logging.getLogger(logger_name)
            self.apply_logging_level(logger)
