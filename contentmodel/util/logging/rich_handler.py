# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.console import ConsoleRenderable


class CustomRichHandler(RichHandler):
    """Rich TTY handler that prefixes each message with ``[L:logger.name]``."""

    def __init__(self, *args, show_name: bool = True, level_color_everything: bool = True, **kwargs) -> None:
        kwargs.setdefault("rich_tracebacks", True)
        kwargs.setdefault("enable_link_path", False)
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_level", False)
        super().__init__(*args, console=Console(stderr=True), **kwargs)

        self.show_name = show_name
        self.level_color_everything = level_color_everything

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        level_style = f"logging.level.{record.levelname.lower()}"
        text = Text()

        if not getattr(record, "simple", False):
            text.append("[", style="dim")
            text.append(record.levelname[0], style=level_style)
            if self.show_name:
                text.append(f":{record.name}", style="dim")
            text.append("] ", style="dim")

        text.append(message, style=level_style if self.level_color_everything else "log.message")
        return text
