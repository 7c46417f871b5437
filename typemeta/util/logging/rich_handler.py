# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from typing import TYPE_CHECKING, override

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    import logging


class CustomRichHandler(RichHandler):
    """Rich console handler rendering records as ``[L:logger.name] message``."""

    @override
    def __init__(
        self,
        *args,
        rich_tracebacks: bool = True,
        show_level: bool = True,
        show_name: bool = True,
        level_prefix: str = "[",
        level_suffix: str = "] ",
        **kwargs,
    ) -> None:
        super().__init__(*args, console=Console(stderr=True), rich_tracebacks=rich_tracebacks, show_level=False, **kwargs)

        self.show_level_letter = show_level
        self.show_name = show_name
        self.level_prefix = level_prefix
        self.level_suffix = level_suffix

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        if self.show_level_letter or self.show_name:
            text.append(self.level_prefix, style="dim")
            if self.show_level_letter:
                text.append(record.levelname[0], style=self.get_level_style(record))
            if self.show_name:
                text.append(f"{':' if self.show_level_letter else ''}{record.name}", style="dim")
            text.append(self.level_suffix, style="dim")

        text.append(message)
        return text
