"""FastAPI prompt rendering service.

Exposes the architecture prompt to callers that assemble the final LLM
request elsewhere:
- describes the prompt (variables, requested response sections)
- renders a prompt version from a parameter mapping
- reports missing parameters as structured 422 errors
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from archprompt.architecture import (
    ARCHITECTURE_MODULE,
    ARCHITECTURE_RESPONSE_SECTIONS,
    load_architecture_prompt,
)
from archprompt.config import settings
from archprompt.core.errors import MissingParameterError, PromptNotFoundError, TemplateSyntaxError
from archprompt.observability.tracing import Span, end_span_event, new_trace_id
from archprompt.runtime.renderer import PromptTemplate

app = FastAPI(title='Architecture Prompt Service', version='1.0.0')

_VERSION_PATTERN = '^v[0-9]+$'


class PromptInfoOut(BaseModel):
    module: str
    version: str
    input_variables: list[str]
    response_sections: list[str]


class RenderPromptIn(BaseModel):
    parameters: dict[str, str]
    version: str | None = Field(default=None, pattern=_VERSION_PATTERN)


class RenderPromptOut(BaseModel):
    prompt: str
    module: str
    version: str
    trace_id: str


@lru_cache
def _architecture_prompt(version: str) -> PromptTemplate:
    return load_architecture_prompt(version)


@app.exception_handler(MissingParameterError)
async def missing_parameter_handler(request: Request, exc: MissingParameterError) -> JSONResponse:
    return JSONResponse(status_code=422, content={'detail': str(exc), 'missing': list(exc.missing)})


@app.exception_handler(PromptNotFoundError)
async def prompt_not_found_handler(request: Request, exc: PromptNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={'detail': str(exc)})


@app.exception_handler(TemplateSyntaxError)
async def template_syntax_handler(request: Request, exc: TemplateSyntaxError) -> JSONResponse:
    return JSONResponse(status_code=500, content={'detail': f'Malformed prompt template: {exc}'})


@app.get('/v1/prompts/architecture', response_model=PromptInfoOut)
async def describe_architecture_prompt() -> PromptInfoOut:
    version = settings.prompt_version
    template = _architecture_prompt(version)
    return PromptInfoOut(
        module=ARCHITECTURE_MODULE,
        version=version,
        input_variables=list(template.input_variables),
        response_sections=list(ARCHITECTURE_RESPONSE_SECTIONS),
    )


@app.post('/v1/prompts/architecture/render', response_model=RenderPromptOut)
async def render_architecture(payload: RenderPromptIn) -> RenderPromptOut:
    version = payload.version or settings.prompt_version
    template = _architecture_prompt(version)

    span = Span(
        name='render_prompt',
        trace_id=new_trace_id(),
        attributes={'module': ARCHITECTURE_MODULE, 'version': version},
    )
    try:
        rendered = template.render(payload.parameters)
    except MissingParameterError as exc:
        end_span_event('prompt.render_failed', span, enabled=settings.trace_events, missing=list(exc.missing))
        raise
    end_span_event('prompt.rendered', span, enabled=settings.trace_events, prompt_chars=len(rendered))

    return RenderPromptOut(prompt=rendered, module=ARCHITECTURE_MODULE, version=version, trace_id=span.trace_id)
