"""Cloud architecture modernization prompt.

The prompt asks a model, acting as a solutions architect, for two Mermaid
diagrams, a rationale, a Terraform template and an architectural decision
record. ``ARCHITECTURE_PROMPT`` is loaded once from the packaged
``prompts/architecture/v1/prompt.md`` and shared read-only.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from archprompt.prompts.store import DEFAULT_PROMPTS_DIR, FilesystemPromptStore, PromptStore
from archprompt.prompts.loader import default_prompt_store
from archprompt.runtime.renderer import PromptTemplate

ARCHITECTURE_MODULE = 'architecture'
ARCHITECTURE_VERSION = 'v1'

ARCHITECTURE_VARIABLES: tuple[str, ...] = ('actual_state', 'industry', 'environment', 'cloud')

# Headings the prompt asks the model to produce. Not enforced here.
ARCHITECTURE_RESPONSE_SECTIONS: tuple[str, ...] = (
    'Functional Application Architecture Diagram',
    'Cloud Infrastructure Architecture Diagram',
    'Rationale',
    'Infrastructure as Code',
    'Architectural Decision Record',
)


class ArchitectureParameters(BaseModel):
    """Inputs for the architecture prompt.

    ``cloud`` is free text; no provider allowlist is applied.
    """

    model_config = ConfigDict(frozen=True)

    actual_state: str = Field(description='Description of the current application architecture.')
    industry: str = Field(description='Industry or domain context.')
    environment: str = Field(description='Target deployment environment.')
    cloud: str = Field(description='Target cloud provider name.')


def load_architecture_prompt(
    version: str = ARCHITECTURE_VERSION,
    *,
    store: PromptStore | None = None,
) -> PromptTemplate:
    """Load a version of the architecture prompt as a validated template.

    Raises:
        PromptNotFoundError: If the store has no such version.
        TemplateSyntaxError: If the stored text does not use exactly the
            four architecture variables.
    """
    store = store or default_prompt_store()
    text = store.get_prompt(module=ARCHITECTURE_MODULE, version=version)
    return PromptTemplate(text=text, input_variables=ARCHITECTURE_VARIABLES)


ARCHITECTURE_PROMPT: PromptTemplate = load_architecture_prompt(
    store=FilesystemPromptStore(base_dir=DEFAULT_PROMPTS_DIR),
)


def render_architecture_prompt(parameters: Mapping[str, Any] | ArchitectureParameters) -> str:
    """Render the packaged architecture prompt.

    Raises:
        MissingParameterError: If any of the four variables is absent.
    """
    if isinstance(parameters, ArchitectureParameters):
        parameters = parameters.model_dump()
    return ARCHITECTURE_PROMPT.render(parameters)
