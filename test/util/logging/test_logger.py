# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

import pytest

from typemeta.util.logging import Logger, getLogger, tstring
from typemeta.util.logging.manager import LoggingManager
from typemeta.util.logging.rich_handler import CustomRichHandler


@pytest.mark.logging
class TestLogger:
    def test_get_logger_returns_logger(self, caplog):
        logger = getLogger("testLogger")

        assert isinstance(logger, Logger)
        with caplog.at_level(logging.INFO):
            logger.debug("debug message")
            logger.info("info message")
        assert "debug message" not in caplog.text
        assert "info message" in caplog.text

    def test_get_logger_with_parent(self):
        parent = getLogger("parentLogger")
        child = getLogger("childLogger", parent=parent)

        assert child.parent is parent
        assert child.name == "parentLogger.childLogger"

    def test_get_logger_from_object(self):
        class Widget:
            pass

        assert getLogger(Widget()).name == "Widget"

    def test_invalid_handler(self):
        logger = getLogger("invalidHandlerLogger")

        with pytest.raises(ValueError, match="Unknown handler"):
            logger.isEnabledFor(logging.INFO, handler="file")

    def test_tty_handler(self):
        logger = getLogger("ttyLogger")

        assert LoggingManager().ch is not None
        assert logger.isEnabledFor(logging.CRITICAL, handler="tty") == logger.isEnabledForTty(logging.CRITICAL)


@pytest.mark.logging
class TestTemplateStrings:
    def test_render(self):
        value = 3.14159
        name = "pi"

        assert tstring.render(t"{name!r} is {value:.2f}") == "'pi' is 3.14"

    def test_log_message(self, caplog):
        logger = getLogger("tstringLogger")
        count = 3

        with caplog.at_level(logging.INFO):
            logger.info(t"found {count} properties")

        assert caplog.messages == ["found 3 properties"]

    def test_plain_messages_unchanged(self, caplog):
        logger = getLogger("plainLogger")

        with caplog.at_level(logging.INFO):
            logger.info("%s and %d", "args", 2)

        assert caplog.messages == ["args and 2"]


@pytest.mark.logging
class TestLoggingManager:
    def test_singleton(self):
        assert LoggingManager() is LoggingManager()
        assert LoggingManager().initialized

    def test_initialize_twice(self):
        with pytest.raises(RuntimeError, match="twice"):
            LoggingManager().initialize({})

    def test_rich_handler_format(self):
        handler = CustomRichHandler()
        record = logging.LogRecord("some.logger", logging.INFO, __file__, 1, "hello", None, None)

        assert handler.render_message(record, "hello").plain == "[I:some.logger] hello"
