from __future__ import annotations

from pathlib import Path

import pytest

from archprompt.config import Settings
from archprompt.core.errors import PromptNotFoundError
from archprompt.prompts import (
    DEFAULT_PROMPTS_DIR,
    FilesystemPromptStore,
    InMemoryPromptStore,
    default_prompt_store,
    load_prompt,
)


def test_load_prompt_ok() -> None:
    content = load_prompt('architecture', 'v1')
    assert 'Solutions Architect' in content


def test_load_prompt_missing() -> None:
    with pytest.raises(PromptNotFoundError):
        load_prompt('does-not-exist', 'v1')


def test_filesystem_store_reads_versioned_layout(tmp_path: Path) -> None:
    # Arrange
    prompt_dir = tmp_path / 'greeting' / 'v2'
    prompt_dir.mkdir(parents=True)
    (prompt_dir / 'prompt.md').write_text('Hi {name} ☁️', encoding='utf-8')
    store = FilesystemPromptStore(base_dir=tmp_path)

    # Act / Assert
    assert store.get_prompt(module='greeting', version='v2') == 'Hi {name} ☁️'
    with pytest.raises(PromptNotFoundError):
        store.get_prompt(module='greeting', version='v1')


def test_in_memory_store() -> None:
    store = InMemoryPromptStore({('architecture', 'v9'): 'text'})
    assert store.get_prompt(module='architecture', version='v9') == 'text'
    with pytest.raises(PromptNotFoundError):
        store.get_prompt(module='architecture', version='v1')


def test_default_store_honours_prompts_dir_setting(tmp_path: Path) -> None:
    assert default_prompt_store(Settings()).base_dir == DEFAULT_PROMPTS_DIR

    (tmp_path / 'architecture' / 'v1').mkdir(parents=True)
    (tmp_path / 'architecture' / 'v1' / 'prompt.md').write_text('custom', encoding='utf-8')
    cfg = Settings(prompts_dir=tmp_path)

    assert default_prompt_store(cfg).base_dir == tmp_path
    assert load_prompt('architecture', 'v1', settings=cfg) == 'custom'


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('ARCHPROMPT_PROMPT_VERSION', 'v3')
    monkeypatch.setenv('ARCHPROMPT_TRACE_EVENTS', 'false')
    cfg = Settings()
    assert cfg.prompt_version == 'v3'
    assert cfg.trace_events is False
