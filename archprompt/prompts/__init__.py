"""Versioned prompt text, and the stores that fetch it."""
from .store import DEFAULT_PROMPTS_DIR, FilesystemPromptStore, InMemoryPromptStore, PromptStore
from .loader import default_prompt_store, load_prompt
