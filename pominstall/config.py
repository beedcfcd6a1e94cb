"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and POMINSTALL_* environment variables.  CLI
options take precedence over anything set here.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from pominstall.models.repository import ContentLayout


class InstallSettings(BaseSettings):
    """Install defaults with environment variable overrides.

    Examples
    --------
    Override via environment::

        export POMINSTALL_LOCAL_REPOSITORY_PATH=/data/m2
        export POMINSTALL_RECURSIVE=true
        export POMINSTALL_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="POMINSTALL_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scan
    files: Path | None = None
    recursive: bool = False

    # Target repository
    local_repository_path: Path = Path("target/local_repo")
    layout: ContentLayout = ContentLayout.DEFAULT

    # Extraction scratch space; None means the system temp directory
    temp_dir: Path | None = None

    log_level: str = "INFO"


# Module-level singleton — import as `from pominstall.config import settings`
settings = InstallSettings()
