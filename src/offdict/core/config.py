# src/offdict/core/config.py
"""
Settings, read from OFFDICT_* environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ARTIFACT_PATH = "public/dictionary.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OFFDICT_", extra="ignore")

    # WordNet dict/ directory; falls back to WNSEARCHDIR / WNHOME
    wordnet_dir: str | None = None

    # Compiled artifact read by clients and served by the server.
    # `build` always writes DEFAULT_ARTIFACT_PATH relative to the working directory.
    artifact_path: str = DEFAULT_ARTIFACT_PATH

    # When set, clients fetch the artifact over HTTP instead of reading artifact_path
    artifact_url: str | None = None

    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()
