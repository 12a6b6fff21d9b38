"""keel configuration — loads from environment and an optional .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Workspace settings — populated from KEEL_* env vars or .env file."""

    # App
    app_name: str = "keel"
    app_version: str = "0.1.0"

    # Workspace layout
    marker_dir_name: str = "copilot"
    max_parent_dirs: int = 5
    dockerfile_name: str = "Dockerfile"

    # Logging
    log_dir: Path = Path.home() / ".keel" / "logs"
    log_level: str = "INFO"

    model_config = {"env_prefix": "KEEL_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
