from .errors import (
    MissingParameterError,
    PromptError,
    PromptNotFoundError,
    TemplateSyntaxError,
)
