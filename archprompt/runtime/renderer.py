"""Prompt renderer (strict placeholder substitution).

Templates use ``{name}`` placeholders. Only declared names are replaced, in a
single pass, so everything else in the template (Mermaid, Terraform, literal
braces) is passed through untouched and substituted values are never
re-expanded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from archprompt.core.errors import MissingParameterError, TemplateSyntaxError

_PLACEHOLDER = re.compile(r'\{([A-Za-z_][A-Za-z0-9_]*)\}')


def find_placeholders(text: str) -> tuple[str, ...]:
    """Return placeholder names in order of first appearance."""
    seen: dict[str, None] = {}
    for match in _PLACEHOLDER.finditer(text):
        seen.setdefault(match.group(1), None)
    return tuple(seen)


@dataclass(frozen=True)
class PromptTemplate:
    """An immutable prompt template with an enumerated set of variables.

    Attributes:
        text: Template text containing ``{name}`` placeholders.
        input_variables: Names that must be supplied at render time.

    Raises:
        TemplateSyntaxError: If a declared variable is duplicated or never
            used, or if the text contains an undeclared placeholder.
    """

    text: str
    input_variables: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TemplateSyntaxError(f'Template text must be str, got {type(self.text).__name__}')
        declared = tuple(self.input_variables)
        object.__setattr__(self, 'input_variables', declared)

        duplicates = sorted({name for name in declared if declared.count(name) > 1})
        if duplicates:
            raise TemplateSyntaxError(f'Duplicate template variable(s): {", ".join(duplicates)}')

        used = find_placeholders(self.text)
        unused = [name for name in declared if name not in used]
        if unused:
            raise TemplateSyntaxError(f'Declared variable(s) not found in template: {", ".join(unused)}')
        undeclared = [name for name in used if name not in declared]
        if undeclared:
            raise TemplateSyntaxError(f'Undeclared placeholder(s) in template: {", ".join(undeclared)}')

    @classmethod
    def from_template(cls, text: str, input_variables: Iterable[str] | None = None) -> PromptTemplate:
        """Build a template, inferring variables from the text when not given."""
        if input_variables is None:
            input_variables = find_placeholders(text)
        return cls(text=text, input_variables=tuple(input_variables))

    def render(self, parameters: Mapping[str, Any]) -> str:
        """Substitute every placeholder with its parameter value.

        Keys not declared by the template are ignored. Values are converted
        with ``str()``.

        Raises:
            MissingParameterError: If any declared variable is absent.
        """
        missing = [name for name in self.input_variables if name not in parameters]
        if missing:
            raise MissingParameterError(missing)

        values = {name: str(parameters[name]) for name in self.input_variables}
        return _PLACEHOLDER.sub(lambda m: values[m.group(1)], self.text)


class PromptRenderer:
    """Render prompt templates with strict placeholder rules."""

    def render(self, template: str | PromptTemplate, variables: Mapping[str, Any]) -> str:
        """Render a prompt template.

        Args:
            template: A PromptTemplate, or raw text with {var} placeholders.
            variables: Mapping of variable names to values.

        Returns:
            Rendered prompt.

        Raises:
            MissingParameterError: If any required template variables are missing.
            TemplateSyntaxError: If raw template text is malformed.
        """
        if not isinstance(template, PromptTemplate):
            template = PromptTemplate.from_template(template)
        return template.render(variables)
