# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import override

from ..logging import LoggableProtocol, Logger, getLogger


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a lazily created ``.log`` property. The logger is named after ``__log_name__`` (the class name unless overridden), and becomes a child of
    ``log_parent`` when one is set.
    """

    __log: Logger | None = None

    #: Optional parent whose logger becomes the parent of this object's logger.
    log_parent: LoggableProtocol | None = None

    # MARK: Logging
    @property
    def log(self) -> Logger:
        """Return a logger for the current object.

        Returns:
            Logger: The logger instance for the object.

        """
        if (log := self.__log) is None:
            log = self.__log = getLogger(self.__log_name__, parent=self.log_parent)
        return log

    @property
    def __log_name__(self) -> str:
        return type(self).__name__

    # MARK: Printing
    @override
    def __repr__(self) -> str:
        return f"<{self.__log_name__}>"
