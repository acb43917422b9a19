"""Prompt loader and version selector."""

from __future__ import annotations

from archprompt.config import Settings, settings as default_settings
from archprompt.prompts.store import DEFAULT_PROMPTS_DIR, FilesystemPromptStore


def default_prompt_store(settings: Settings | None = None) -> FilesystemPromptStore:
    """Return the filesystem store for the configured prompt directory.

    Falls back to the prompts packaged with archprompt when
    ``ARCHPROMPT_PROMPTS_DIR`` is not set.
    """
    cfg = settings if settings is not None else default_settings
    return FilesystemPromptStore(base_dir=cfg.prompts_dir or DEFAULT_PROMPTS_DIR)


def load_prompt(module: str, version: str, *, settings: Settings | None = None) -> str:
    """Load a prompt template by module and version.

    Args:
        module: Prompt module name (e.g. "architecture").
        version: Version folder name (e.g. "v1").

    Returns:
        Prompt text.

    Raises:
        PromptNotFoundError: If the prompt file is missing.
    """
    return default_prompt_store(settings).get_prompt(module=module, version=version)
