"""Render the cloud architecture modernization prompt."""

from archprompt.architecture import (
    ARCHITECTURE_PROMPT,
    ARCHITECTURE_RESPONSE_SECTIONS,
    ARCHITECTURE_VARIABLES,
    ArchitectureParameters,
    load_architecture_prompt,
    render_architecture_prompt,
)
from archprompt.core.errors import (
    MissingParameterError,
    PromptError,
    PromptNotFoundError,
    TemplateSyntaxError,
)
from archprompt.runtime.renderer import PromptRenderer, PromptTemplate

__version__ = '1.0.0'
