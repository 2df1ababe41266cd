from __future__ import annotations

from abc import ABC, abstractmethod


class DebugSink(ABC):
    """Destination for the plan's debug text (clipboard, console, file...)."""

    @abstractmethod
    def write_debug_text(self, text: str) -> bool:
        """Deliver *text*; return False when nothing was written."""
        raise NotImplementedError
