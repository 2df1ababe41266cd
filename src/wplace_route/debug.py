"""Human-readable debug dump of a plan, handed to a :class:`DebugSink`."""
from __future__ import annotations

import json

from pydantic import BaseModel

from wplace_route.sinks.base import DebugSink


def render_debug_text(plan: BaseModel) -> str:
    return json.dumps(plan.model_dump(mode="json"), indent=2, ensure_ascii=False)


def emit_debug(plan: BaseModel, sink: DebugSink) -> bool:
    return sink.write_debug_text(render_debug_text(plan))
