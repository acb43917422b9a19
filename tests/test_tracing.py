from __future__ import annotations

import io
import json

from archprompt.observability.tracing import Span, end_span_event, new_trace_id


def test_end_span_event_ends_span_and_logs() -> None:
    stream = io.StringIO()
    span = Span(name='render_prompt', trace_id=new_trace_id())

    end_span_event('prompt.rendered', span, stream=stream, prompt_chars=10)

    assert span.end_ns is not None
    event = json.loads(stream.getvalue())
    assert event['event'] == 'prompt.rendered'
    assert event['trace_id'] == span.trace_id
    assert event['prompt_chars'] == 10
    assert event['span']['name'] == 'render_prompt'


def test_end_span_event_disabled_still_ends_span() -> None:
    stream = io.StringIO()
    span = Span(name='render_prompt', trace_id=new_trace_id())

    end_span_event('prompt.rendered', span, enabled=False, stream=stream)

    assert span.duration_ms is not None
    assert stream.getvalue() == ''
