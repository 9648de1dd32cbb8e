from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_deepseek_client", False):
            root.removeHandler(handler)
            handler.close()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setLevel(numeric_level)
    handler._deepseek_client = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(numeric_level)
