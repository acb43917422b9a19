from __future__ import annotations

from pathlib import Path
from typing import Protocol

from archprompt.core.errors import PromptNotFoundError

DEFAULT_PROMPTS_DIR = Path(__file__).resolve().parent


class PromptStore(Protocol):
    def get_prompt(self, *, module: str, version: str) -> str:
        ...


class FilesystemPromptStore:
    """
    PromptStore backed by a local filesystem.

    Expected layout:
        <base_dir>/
          <module>/
            <version>/
              prompt.md
    """

    def __init__(self, *, base_dir: Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _prompt_path(self, module: str, version: str) -> Path:
        return self._base_dir / module / version / "prompt.md"

    def get_prompt(self, *, module: str, version: str) -> str:
        path = self._prompt_path(module, version)
        if not path.is_file():
            raise PromptNotFoundError(f"Prompt not found: {module}/{version}")
        return path.read_text(encoding="utf-8")


class InMemoryPromptStore:
    def __init__(self, prompts: dict[tuple[str, str], str]) -> None:
        self._prompts = dict(prompts)

    def get_prompt(self, *, module: str, version: str) -> str:
        try:
            return self._prompts[(module, version)]
        except KeyError:
            raise PromptNotFoundError(f"Prompt not found: {module}/{version}") from None
