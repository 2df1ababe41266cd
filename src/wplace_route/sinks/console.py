from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.syntax import Syntax

from wplace_route.sinks.base import DebugSink

log = logging.getLogger(__name__)


class ConsoleSink(DebugSink):
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write_debug_text(self, text: str) -> bool:
        if not text:
            log.warning("No debug data to write")
            return False
        self.console.print(Syntax(text, "json", word_wrap=True))
        return True
