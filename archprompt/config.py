from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Prompt storage
    prompts_dir: Path | None = None
    prompt_version: str = "v1"

    # Observability
    trace_events: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "ARCHPROMPT_"


settings = Settings()
