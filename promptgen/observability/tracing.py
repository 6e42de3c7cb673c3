"""Minimal tracing primitives.

Events are printed as one JSON object per line. The API writes them to
stdout; the CLI writes them to stderr so the rendered prompt can be piped.
The renderer itself never logs.
"""

from __future__ import annotations

import json
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

from promptgen.config import settings


@dataclass
class Span:
    name: str
    trace_id: str
    start_ns: int = field(default_factory=time.perf_counter_ns)
    duration_ms: float | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def end(self) -> None:
        self.duration_ms = (time.perf_counter_ns() - self.start_ns) / 1_000_000.0


def log_event(event: str, *, trace_id: str, span: Span | None = None,
              stream: TextIO | None = None, **fields: Any) -> None:
    if not settings.log_events:
        return
    payload: dict[str, Any] = {'event': event, 'trace_id': trace_id, **fields}
    if span is not None:
        payload['span'] = {
            'name': span.name,
            'duration_ms': span.duration_ms,
            'attributes': span.attributes,
        }
    print(json.dumps(payload, ensure_ascii=False), file=stream)


@contextmanager
def traced(name: str, *, trace_id: str | None = None, stream: TextIO | None = None,
           **attributes: Any) -> Iterator[Span]:
    """Time a block and emit ``<name>.ok`` or ``<name>.error`` when it exits."""
    span = Span(name=name, trace_id=trace_id or uuid.uuid4().hex, attributes=dict(attributes))
    try:
        yield span
    except Exception as exc:
        span.end()
        log_event(f'{name}.error', trace_id=span.trace_id, span=span, stream=stream,
                  error=type(exc).__name__)
        raise
    span.end()
    log_event(f'{name}.ok', trace_id=span.trace_id, span=span, stream=stream)
