from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Prompt templates; None means the packaged templates
    templates_dir: Path | None = None

    # Rendering
    strict_rendering: bool = False

    # Observability
    log_events: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "PROMPTGEN_"


settings = Settings()
