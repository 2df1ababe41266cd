from __future__ import annotations

from typing import List

from wplace_route.sinks.base import DebugSink


class MemorySink(DebugSink):
    """Keeps every delivered text in ``self.texts``."""

    def __init__(self) -> None:
        self.texts: List[str] = []

    def write_debug_text(self, text: str) -> bool:
        if not text:
            return False
        self.texts.append(text)
        return True
