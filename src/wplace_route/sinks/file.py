from __future__ import annotations

import logging
from pathlib import Path

from wplace_route.sinks.base import DebugSink

log = logging.getLogger(__name__)


class FileSink(DebugSink):
    """Writes the debug text to a file, creating parent directories."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def write_debug_text(self, text: str) -> bool:
        if not text:
            log.warning("No debug data to write")
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            log.warning("Could not write debug data to %s: %s", self.path, exc)
            return False
        log.info("Debug data written to %s", self.path)
        return True
