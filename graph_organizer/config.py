from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Basic auth settings
    auth_username: str = ""
    auth_password: str = ""

    # Vault settings
    vault_path: Path = Path("data/vault")
    excluded_folders: list[str] = []  # path prefixes, e.g. ["Archive/", "Templates/"]
    target_folders: list[str] = []  # empty means every note may be organized

    # Organization settings
    folder_collision_policy: Literal["suffix", "merge", "reject"] = "suffix"
    auto_organize: bool = False
    debounce_seconds: float = 2.0

    # Git settings
    git_integration: bool = False
    commit_message: str = "Organize files with Graph Organizer"

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
