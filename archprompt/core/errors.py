# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------

from __future__ import annotations

from typing import Iterable


class PromptError(ValueError):
    """Base class for prompt loading and rendering failures."""


class MissingParameterError(PromptError, KeyError):
    """Raised when a render call does not supply every template variable."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing: tuple[str, ...] = tuple(missing)
        super().__init__(f'Missing prompt variable(s): {", ".join(self.missing)}')

    @property
    def name(self) -> str:
        """First missing variable, in template declaration order."""
        return self.missing[0]

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]


class TemplateSyntaxError(PromptError):
    """Raised when a prompt template is not well-formed."""


class PromptNotFoundError(PromptError):
    pass
