# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from abc import abstractmethod
from typing import Any, Protocol, override, runtime_checkable


@runtime_checkable
class LoggableProtocol(Protocol):
    @property
    @abstractmethod
    def log(self) -> logging.Logger:
        msg = "Subclasses must implement log property"
        raise NotImplementedError(msg)


class Logger(logging.Logger):
    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        elif handler == "tty":
            return self.isEnabledForTty(level)
        else:
            msg = f"Unknown handler: {handler}. Expected 'tty'."
            raise ValueError(msg)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        ch = LoggingManager().ch
        if ch is None or ch.level > level:
            return False
        return super().isEnabledFor(level)


logging.setLoggerClass(Logger)


def _getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802
    # Determine the logger name
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    # Create or get the logger
    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    else:
        logger = logging.getLogger(name)

    # Try to apply the logging level from the manager
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802 matches logging.getLogger
    """Return the :class:`Logger` for *obj* (a name, or an object whose class name is used).

    If *parent* is a logger or a loggable object, the returned logger is its child.
    """
    logger = _getLogger(obj, parent=parent, name=name)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    return logger
