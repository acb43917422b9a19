"""Minimal tracing primitives.

Events are emitted as one JSON object per line, which keeps the package free
of an OpenTelemetry dependency while staying easy to ship to a collector.
Prompt parameter values are never written to events.
"""

from __future__ import annotations

import json
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, TextIO


@dataclass
class Span:
    name: str
    trace_id: str
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    start_ns: int = field(default_factory=time.time_ns)
    end_ns: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def end(self) -> None:
        self.end_ns = time.time_ns()

    @property
    def duration_ms(self) -> float | None:
        if self.end_ns is None:
            return None
        return (self.end_ns - self.start_ns) / 1_000_000.0


def new_trace_id() -> str:
    return uuid.uuid4().hex


def log_event(
    event: str,
    *,
    trace_id: str,
    span: Span | None = None,
    stream: TextIO | None = None,
    **fields: Any,
) -> None:
    payload: dict[str, Any] = {'event': event, 'trace_id': trace_id, **fields}
    if span is not None:
        payload['span'] = {
            'name': span.name,
            'span_id': span.span_id,
            'duration_ms': span.duration_ms,
            'attributes': span.attributes,
        }
    print(json.dumps(payload, ensure_ascii=False), file=stream)


def end_span_event(
    event: str,
    span: Span,
    *,
    enabled: bool = True,
    stream: TextIO | None = None,
    **fields: Any,
) -> None:
    """End ``span`` and, when enabled, emit ``event`` under its trace id."""
    span.end()
    if enabled:
        log_event(event, trace_id=span.trace_id, span=span, stream=stream, **fields)
